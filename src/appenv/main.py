#!/usr/bin/env python3
"""appenv: inspect and edit the home/local properties of a CLI app"""

import argparse
import logging
import sys

from .adapters.config_env import load_builder_defaults
from .config import config
from .core.builder import AppBuilder
from .core.errors import AppEnvError
from .core.tier import Tier
from .platform_utils import print_platform_info

TIER_CHOICES = ("home", "local", "merged")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="appenv",
        description="Inspect and edit the home/local properties of a CLI app",
    )
    parser.add_argument("--app", help="App name (default: $APPENV_APP_NAME or 'app')")
    parser.add_argument("--working-dir", help="Base directory of the local tier (default: cwd)")
    parser.add_argument("--home", help="Base directory of the home tier (default: user home)")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("paths", help="Print resolved directories and files")
    sub.add_parser("info", help="Print platform information")

    show = sub.add_parser("show", help="Print properties")
    show.add_argument("--tier", choices=TIER_CHOICES, default="merged")

    set_cmd = sub.add_parser("set", help="Set properties (creates the tier directory)")
    set_cmd.add_argument("--tier", choices=TIER_CHOICES[:2], default="local")
    set_cmd.add_argument("pairs", nargs="+", metavar="KEY=VALUE")

    unset = sub.add_parser("unset", help="Remove properties")
    unset.add_argument("--tier", choices=TIER_CHOICES[:2], default="local")
    unset.add_argument("keys", nargs="+", metavar="KEY")

    sub.add_parser("delete", help="Delete the home and local directories")
    return parser


def _builder(args) -> AppBuilder:
    builder = AppBuilder.from_config(load_builder_defaults())
    if args.app:
        builder.app_name(args.app)
    if args.working_dir:
        builder.with_working_directory(args.working_dir)
    if args.home:
        builder.with_user_home(args.home)
    return builder


def _parse_pairs(pairs: list[str]) -> dict[str, str]:
    parsed = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}")
        parsed[key] = value
    return parsed


def _print_properties(props: dict[str, str]) -> None:
    for key in sorted(props):
        print(f"{key}={props[key]}")


def run(args) -> int:
    builder = _builder(args)

    if args.command == "info":
        print_platform_info()
        return 0

    if args.command == "paths":
        app = builder.build()
        for tier in Tier:
            state = "exists" if app.exists(tier) else "missing"
            print(f"{tier.value}: {app.dir_for(tier)} ({state})")
            print(f"{tier.value} properties: {app.properties_file_for(tier)}")
        return 0

    if args.command == "show":
        app = builder.build()
        if args.tier == "merged":
            _print_properties(app.get_merged_properties())
        else:
            _print_properties(app.load_properties(Tier.parse(args.tier)))
        return 0

    if args.command in ("set", "unset"):
        tier = Tier.parse(args.tier)
        updates = _parse_pairs(args.pairs) if args.command == "set" else {}
        if tier is Tier.HOME:
            builder.with_home_directory()
        else:
            builder.with_local_directory()
        app = builder.build()
        props = app.load_properties(tier)
        if args.command == "set":
            props.update(updates)
        else:
            for key in args.keys:
                props.pop(key, None)
        app.save_properties(tier, props)
        print(f"✓ Saved {len(props)} properties to {app.properties_file_for(tier)}")
        return 0

    if args.command == "delete":
        app = builder.build()
        removed = app.delete_app()
        print(f"✓ Removed {len(removed)} entries")
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def main(argv=None) -> int:
    logging.basicConfig(
        level=config.log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except (AppEnvError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
