from __future__ import annotations

import argparse
import sys
from functools import partial
from pathlib import Path

import requests

from .browser import Browser, default_browser
from .config import Settings
from .docs import DocsOptions, DocsTask
from .errors import DocsError
from .http_client import HttpClient
from .project import load_project


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hex-docs",
        description=(
            "Fetch, open or revert package documentation hosted on hexdocs. "
            "Package and version default to the current project."
        ),
        epilog=(
            "examples:\n"
            "  hex-docs --package plug --version 1.15.3 fetch\n"
            "  hex-docs open\n"
            "  hex-docs --revert 1.0.1"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--revert",
        metavar="VERSION",
        default=None,
        help="Remove the published docs for VERSION of the current project",
    )
    parser.add_argument(
        "--progress",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Show a progress bar while downloading",
    )
    parser.add_argument("--package", metavar="NAME", default=None)
    parser.add_argument("--version", metavar="VERSION", default=None)
    parser.add_argument(
        "--project-dir",
        type=Path,
        default=Path("."),
        help="Directory holding the project's pyproject.toml (default: .)",
    )
    parser.add_argument(
        "command",
        nargs="*",
        help="open | fetch",
    )
    return parser


def parse_options(
    argv: list[str] | None = None,
) -> tuple[DocsOptions, argparse.Namespace]:
    parser = build_parser()
    args, extra = parser.parse_known_args(argv)
    # Unrecognized flags are kept as positional tokens.
    tokens = tuple(args.command) + tuple(extra)
    options = DocsOptions(
        revert=args.revert,
        progress=bool(args.progress),
        package=args.package,
        version=args.version,
        args=tokens,
    )
    return options, args


def main(
    argv: list[str] | None = None,
    *,
    session: requests.Session | None = None,
    browser: Browser | None = None,
) -> int:
    options, args = parse_options(argv)

    try:
        settings = Settings.from_env()
        http = HttpClient(
            session or requests.Session(), timeout_s=settings.http_timeout_s
        )
        task = DocsTask(
            settings=settings,
            http=http,
            project=partial(load_project, args.project_dir),
            browser=browser or default_browser(),
        )
        task.run(options)
    except DocsError as e:
        print(str(e), file=sys.stderr)
        return 1
    return 0
