import argparse
import json
import logging
import sys
from pathlib import Path

from src.adapters.fs.config_file import (
    ConfigFileSource,
    find_config_file,
    write_config_file,
)
from src.components.theme_config import (
    LoadConfigInput,
    LoadConfigOutput,
    ResolveThemeInput,
    ThemeConfigError,
    ValidateConfigInput,
    run_load,
    run_resolve,
    run_validate,
)

logger = logging.getLogger("cli")


def get_config(args: argparse.Namespace) -> LoadConfigOutput:
    if args.config:
        return run_load(LoadConfigInput(source=ConfigFileSource(args.config)))

    if args.dir:
        path = find_config_file(args.dir)
        if path is None:
            logger.error(f"No theme config found in {args.dir}.")
            sys.exit(1)
        return run_load(LoadConfigInput(source=ConfigFileSource(path)))

    return run_load(LoadConfigInput())


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2))


def handle_show(args: argparse.Namespace) -> None:
    loaded = get_config(args)
    logger.info(f"Config source: {loaded.source}")
    _print_json(loaded.config.to_file_dict())


def handle_resolve(args: argparse.Namespace) -> None:
    loaded = get_config(args)
    result = run_resolve(ResolveThemeInput(config=loaded.config))

    if args.category:
        if args.category not in result.theme:
            logger.error(f"Category '{args.category}' not in resolved theme.")
            sys.exit(1)
        _print_json(result.theme[args.category])
        return

    _print_json(result.theme)
    for category, names in result.added.items():
        logger.info(f"Added to {category}: {', '.join(names)}")
    for category, names in result.overridden.items():
        logger.info(f"Overridden in {category}: {', '.join(names)}")
    for category, names in result.removed.items():
        logger.info(f"Removed from {category}: {', '.join(names)}")


def handle_validate(args: argparse.Namespace) -> None:
    loaded = get_config(args)
    report = run_validate(ValidateConfigInput(config=loaded.config))

    for violation in report.violations:
        print(f"ERROR: {violation}")
    for warning in report.warnings:
        print(f"WARNING: {warning}")

    if not report.is_valid:
        sys.exit(1)
    print(f"{loaded.source}: OK")


def handle_init(args: argparse.Namespace) -> None:
    target = Path(args.path)
    if target.exists() and not args.force:
        logger.error(f"{target} already exists. Use --force to overwrite.")
        sys.exit(1)

    declared = run_load(LoadConfigInput())
    write_config_file(declared.config, target)
    print(f"Config written: {target}")


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="Theme config inspection CLI")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--config", help="Path to a YAML or JSON config file")
    source.add_argument("--dir", help="Directory to search for tailwind.config.{yaml,yml,json}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # show
    subparsers.add_parser("show", help="Print the config record")

    # resolve
    resolve_parser = subparsers.add_parser(
        "resolve", help="Print the theme merged over the default theme"
    )
    resolve_parser.add_argument("--category", help="Only print one token category")

    # validate
    subparsers.add_parser("validate", help="Check color tokens and content patterns")

    # init
    init_parser = subparsers.add_parser("init", help="Write the declared config to a file")
    init_parser.add_argument("path", help="Target file (.yaml, .yml or .json)")
    init_parser.add_argument("--force", action="store_true", help="Overwrite an existing file")

    args = parser.parse_args(argv)

    try:
        if args.command == "show":
            handle_show(args)
        elif args.command == "resolve":
            handle_resolve(args)
        elif args.command == "validate":
            handle_validate(args)
        elif args.command == "init":
            handle_init(args)
    except (FileNotFoundError, ThemeConfigError) as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
