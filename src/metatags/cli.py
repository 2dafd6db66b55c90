"""
MIT License

Copyright (c) 2025 Sébastien Gachoud

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

-------------------------------------------------------------------------------

Author: Sébastien Gachoud
Created: 2026-10-19
Description: Command line interface: run the tutorial, check deprecated references, describe a type.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import argparse
import logging
import sys
from collections.abc import Sequence

from .config import LintConfig, import_entity_modules
from .errors import HardDeprecationError, MetatagsError
from .lint import check_paths, enforce
from .meta import describe, tag_registry

logger = logging.getLogger(__name__)


def _cmd_demo(args: argparse.Namespace) -> int:
    from .examples.animals import run_demo

    run_demo(sys.stdout)
    return 0


def _cmd_lint(args: argparse.Namespace) -> int:
    try:
        config = LintConfig.load(args.config)
        config.import_modules()
        import_entity_modules(args.module)
        registry = tag_registry()
        if next(registry.deprecations(), None) is None:
            logger.warning(
                "No deprecated member is registered (%d entity type(s)), nothing will be"
                " reported. Set [tool.metatags] modules or pass --module.",
                len(registry),
            )
        paths = args.paths or list(config.paths)
        findings = check_paths(paths, registry, config.exclude)
        for finding in findings:
            print(finding.format())
        enforce(findings, advisories_as_errors=args.strict or config.advisories_as_errors)
    except HardDeprecationError as e:
        print(f"error: {len(e.findings)} reference(s) to hard deprecated members.", file=sys.stderr)
        return 1
    except MetatagsError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


def _cmd_describe(args: argparse.Namespace) -> int:
    try:
        import_entity_modules(args.module)
        descriptor = describe(args.type_name)
    except MetatagsError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(descriptor.type_name)
    for member in descriptor.members:
        print(f"  {member.kind} {member.name}")
        for tag in member.tags:
            print(f"    {tag!r}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metatags", description="Metadata tags on entity members, and their checks."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    # sub commands accept -v too, without resetting a -v given before them.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable debug logging.",
    )
    parser.set_defaults(func=_cmd_demo)
    sub = parser.add_subparsers(dest="command")

    demo = sub.add_parser("demo", parents=[common], help="Run the Animal tutorial.")
    demo.set_defaults(func=_cmd_demo)

    lint = sub.add_parser(
        "lint", parents=[common], help="Fail on references to hard deprecated members."
    )
    lint.add_argument("paths", nargs="*", help="Files or directories (default: from config).")
    lint.add_argument("--config", default="pyproject.toml", help="pyproject.toml to read.")
    lint.add_argument(
        "--module", action="append", default=[], help="Entity module to import (repeatable)."
    )
    lint.add_argument("--strict", action="store_true", help="Fail on advisories too.")
    lint.set_defaults(func=_cmd_lint)

    desc = sub.add_parser(
        "describe", parents=[common], help="Print the members and tags of an entity type."
    )
    desc.add_argument("type_name", help="Registered type name, e.g. AttributesExample.Animal.")
    desc.add_argument(
        "--module",
        action="append",
        default=["metatags.examples.animals"],
        help="Entity module to import (repeatable).",
    )
    desc.set_defaults(func=_cmd_describe)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)
