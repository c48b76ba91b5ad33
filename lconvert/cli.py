#!/usr/bin/env python3
"""
lconvert CLI entry point
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback

from lconvert import __version__
from lconvert.config import load_config
from lconvert.errors import KeymapIntegrityError, UnknownLayoutError
from lconvert.layouts import HUB, Layout, parse_layout, supported_names
from lconvert.log import setup_logging

logger = logging.getLogger('lconvert.cli')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='lconvert',
        description='Convert text typed on one keyboard layout into another',
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug mode with verbose logging'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to config file (default: ~/.config/lconvert/config.json)'
    )
    parser.add_argument(
        '--logfile',
        type=str,
        default=None,
        help='Also write the log to this file'
    )
    parser.add_argument(
        '--version',
        action='version',
        version='%(prog)s ' + __version__
    )

    sub = parser.add_subparsers(dest='command', required=True)

    p_convert = sub.add_parser('convert', help='Convert text (arguments or stdin)')
    p_convert.add_argument('--from', dest='source', required=True, help='Layout the text was typed on')
    p_convert.add_argument('--to', dest='target', required=True, help='Layout to convert into')
    p_convert.add_argument('text', nargs='*', help='Text to convert; read from stdin when omitted')

    sub.add_parser('layouts', help='List supported layouts')

    p_table = sub.add_parser('table', help='Print the character map for a layout pair as JSON')
    p_table.add_argument('--from', dest='source', required=True)
    p_table.add_argument('--to', dest='target', required=True)

    p_serve = sub.add_parser('serve', help='Run the HTTP service')
    p_serve.add_argument('--host', default=None, help='Bind address (default from config)')
    p_serve.add_argument('--port', type=int, default=None, help='Bind port (default from config)')

    return parser


def _parse_pair(args: argparse.Namespace) -> tuple[Layout, Layout]:
    return parse_layout(args.source), parse_layout(args.target)


def cmd_convert(args: argparse.Namespace, config: dict) -> int:
    from lconvert.transcoder import TextTranscoder

    source, target = _parse_pair(args)
    transcoder = TextTranscoder.from_config(config)

    if args.text:
        print(transcoder.convert_concurrently(' '.join(args.text), source, target))
    else:
        sys.stdout.write(transcoder.convert_concurrently(sys.stdin.read(), source, target))
    return 0


def cmd_layouts(args: argparse.Namespace, config: dict) -> int:
    for name in supported_names():
        print(f"{name} (hub)" if name == HUB.value else name)
    return 0


def cmd_table(args: argparse.Namespace, config: dict) -> int:
    from lconvert.keymaps import get_default_store

    source, target = _parse_pair(args)
    keymap = get_default_store().lookup(source, target) or {}
    print(json.dumps(dict(sorted(keymap.items())), ensure_ascii=False, indent=2))
    return 0


def cmd_serve(args: argparse.Namespace, config: dict) -> int:
    import uvicorn

    from lconvert.api import create_app

    host = args.host or config['host']
    port = args.port or config['port']
    logger.info("Starting HTTP service on %s:%d", host, port)
    uvicorn.run(
        create_app(config),
        host=host,
        port=port,
        log_level='debug' if config['debug'] else 'info',
    )
    return 0


COMMANDS = {
    'convert': cmd_convert,
    'layouts': cmd_layouts,
    'table': cmd_table,
    'serve': cmd_serve,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for lconvert"""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config, args.debug)
    if args.debug:
        config['debug'] = True

    log = setup_logging(debug=config['debug'], log_file=args.logfile)
    log.debug("lconvert %s, command: %s", __version__, args.command)

    try:
        return COMMANDS[args.command](args, config)

    except UnknownLayoutError as e:
        print(f"lconvert: unknown layout {e.name!r} (supported: {', '.join(supported_names())})",
              file=sys.stderr)
        return 2

    except KeymapIntegrityError as e:
        log.error("❌ Keymap table is incomplete: %s", e)
        return 1

    except KeyboardInterrupt:
        log.info("👋 lconvert terminated by user (Ctrl+C)")
        return 130

    except BrokenPipeError:
        log.error("❌ Broken pipe error - pipeline was closed")
        return 1

    except OSError as e:
        log.error("❌ OS error: %s", e)
        log.debug(traceback.format_exc())
        return 1


if __name__ == '__main__':
    sys.exit(main())
