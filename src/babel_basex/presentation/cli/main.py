"""
CLI 入口点

Evaluates a single code block from a file or stdin, the way a host would.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from babel_basex import __version__
from babel_basex.application.registries import build_default_registry
from babel_basex.config import load_settings
from babel_basex.core import BabelError, configure_logging


def create_parser() -> argparse.ArgumentParser:
    """创建 CLI 参数解析器"""
    parser = argparse.ArgumentParser(
        prog="babel-basex",
        description="Evaluate XQuery code blocks with BaseX",
    )
    parser.add_argument("--version", "-v", action="store_true", help="显示版本")

    subparsers = parser.add_subparsers(dest="command", help="可用命令")

    block_args = argparse.ArgumentParser(add_help=False)
    block_args.add_argument("file", help="block body file, or - for stdin")
    block_args.add_argument("--lang", "-l", default="xquery", help="block language")
    block_args.add_argument("--db", help="database to open (:db)")
    block_args.add_argument("--preamble", help="text prepended to the body (:preamble)")
    block_args.add_argument(
        "--var",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="declare a variable (:var), may be repeated",
    )
    block_args.add_argument("--config", "-c", help="配置文件路径")

    subparsers.add_parser("run", parents=[block_args], help="evaluate a block and print its result")
    subparsers.add_parser("command", parents=[block_args], help="print the command line a block would run")
    subparsers.add_parser("languages", help="list registered languages")

    return parser


def _block_params(parsed: argparse.Namespace) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    if parsed.db:
        params[":db"] = parsed.db
    if parsed.preamble is not None:
        params[":preamble"] = parsed.preamble
    if parsed.var:
        params[":var"] = list(parsed.var)
    return params


def _read_body(file: str) -> str:
    if file == "-":
        return sys.stdin.read()
    return Path(file).read_text(encoding="utf-8")


def run_cli(args: Optional[list] = None) -> int:
    """
    运行 CLI

    Args:
        args: 命令行参数（默认使用 sys.argv）

    Returns:
        退出码
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    if parsed.version:
        print(f"babel-basex v{__version__}")
        return 0

    if not parsed.command:
        parser.print_help()
        return 0

    registry = build_default_registry()
    if parsed.command == "languages":
        for name in registry.languages():
            desc = registry.get(name)
            aliases = f" ({', '.join(desc.aliases)})" if desc.aliases else ""
            print(f"{name}{aliases}: {desc.description}")
        return 0

    try:
        settings = load_settings(parsed.config)
        configure_logging(settings.logging.level)
        executor = registry.create(parsed.lang, settings=settings)
        params = _block_params(parsed)

        if parsed.command == "command":
            print(executor.format_command(params, parsed.file))
            return 0

        result = executor.execute(_read_body(parsed.file), params)
        sys.stdout.write(result)
        return 0

    except (BabelError, KeyError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
