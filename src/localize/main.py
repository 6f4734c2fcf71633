from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from localize.application.localizer import Localize
from localize.domain import parse_language
from localize.infrastructure.fs.config_store import JsonPreferenceStore, load_config, save_config
from localize.infrastructure.fs.logger import configure_logging
from localize.infrastructure.fs.resources import DirectoryResources

DEFAULT_PREFERENCES = 'localize-preferences.json'
DEFAULT_CONFIG = 'localize.json'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='localize',
        description='Resolve localization keys from per-language JSON files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  localize --resources i18n get menu.file
  localize --resources i18n get greeting --replace World
  localize --resources i18n get welcome --set name=Ana
  localize --resources i18n set-language es
""",
    )
    parser.add_argument('--resources', action='append', type=Path, default=None,
                        help='Directory holding <file>-<code>.json files (repeatable)')
    parser.add_argument('--config', type=Path, default=Path(DEFAULT_CONFIG),
                        help='JSON config with file_name, default_language, testing')
    parser.add_argument('--preferences', type=Path, default=Path(DEFAULT_PREFERENCES),
                        help='JSON file storing the selected language')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Show diagnostics (-vv for debug output)')
    parser.add_argument('--log-file', type=Path, default=None)

    commands = parser.add_subparsers(dest='command', required=True)

    get = commands.add_parser('get', help='Print the text for a key')
    get.add_argument('key')
    group = get.add_mutually_exclusive_group()
    group.add_argument('--replace', help='Replace every %% with this text')
    group.add_argument('--values', nargs='+', help='Fill each %% in order')
    group.add_argument('--set', dest='named', action='append', metavar='NAME=VALUE',
                       help='Replace :NAME with VALUE (repeatable)')

    commands.add_parser('current', help='Print the active language code')
    commands.add_parser('languages', help='List languages that have a dictionary')

    set_language = commands.add_parser('set-language', help='Persist the active language')
    set_language.add_argument('code')

    commands.add_parser('reset-language', help='Forget the persisted language')

    init_config = commands.add_parser('init-config', help='Write the config file used by --config')
    init_config.add_argument('--file-name', help='Base name of the dictionary files')
    init_config.add_argument('--default-language', help='Fallback language code')
    return parser


def _parse_named(pairs: Sequence[str]) -> dict[str, str]:
    named: dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition('=')
        if not sep:
            raise argparse.ArgumentTypeError(f'expected NAME=VALUE, got {pair!r}')
        named[name] = value
    return named


def _log_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def run(args: argparse.Namespace, out=None) -> int:
    out = out or sys.stdout
    config = load_config(args.config)
    localizer = Localize(
        DirectoryResources(args.resources or None),
        JsonPreferenceStore(args.preferences),
        config=config,
    )

    if args.command == 'get':
        if args.replace is not None:
            text = localizer.localize(args.key, args.replace)
        elif args.values:
            text = localizer.localize(args.key, values=args.values)
        elif args.named:
            text = localizer.localize(args.key, dictionary=_parse_named(args.named))
        else:
            text = localizer.localize(args.key)
        print(text, file=out)
    elif args.command == 'current':
        print(localizer.current_language(), file=out)
    elif args.command == 'languages':
        for code in localizer.available_languages():
            print(f'{code.value}\t{localizer.display_name(code)}', file=out)
    elif args.command == 'set-language':
        localizer.set_language(args.code)
    elif args.command == 'reset-language':
        localizer.reset_language()
    elif args.command == 'init-config':
        updated = config
        if args.file_name:
            updated = replace(updated, file_name=args.file_name)
        if args.default_language:
            code = parse_language(args.default_language)
            if code is None:
                raise argparse.ArgumentTypeError(f'unsupported language {args.default_language!r}')
            updated = replace(updated, default_language=code)
        save_config(args.config, updated)
        print(args.config, file=out)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(_log_level(args.verbose), args.log_file)
    try:
        return run(args)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))
    except KeyboardInterrupt:
        return 130


if __name__ == '__main__':
    raise SystemExit(main())
