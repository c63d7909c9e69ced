#!/usr/bin/env python3
"""prd-beads CLI entrypoint."""

import sys
import argparse
import logging
from pathlib import Path

from prd_beads.lib.config import DEFAULT_TASKS_DIR, load_converter_config
from prd_beads.commands import convert as cmd_convert_module


def cmd_convert(args):
    tasks_dir = Path(args.tasks_dir)
    config = load_converter_config(tasks_dir)
    return cmd_convert_module.cmd_convert(args, tasks_dir, config)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='prd-beads',
        description='Convert prd.json user stories into a beads JSONL import file',
    )
    parser.add_argument('--tasks-dir', '-t', default=str(DEFAULT_TASKS_DIR),
                        help='Directory holding prd.json and beads.yaml (default: tasks)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log each converted story')
    parser.set_defaults(func=cmd_convert)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
