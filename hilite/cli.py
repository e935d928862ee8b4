from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .config import build_highlighter, find_config, load_config
from .errors import HiliteUserError
from .jsonic import dumps as jdumps
from .markup import get_theme
from .pipeline import Highlighter
from .report import build_report, list_profiles, list_themes
from .version import tool_version

ENV_DEBUG = "HILITE_DEBUG"


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hilite",
        description="Source-code highlighting to HTML span markup",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")

    # Global options are accepted before and after the subcommand.
    # Subparsers use SUPPRESS so that an omitted option keeps the top-level value.
    def add_global(sp: argparse.ArgumentParser, *, suppress: bool) -> None:
        sp.add_argument("--config", type=Path, default=argparse.SUPPRESS if suppress else None,
                        help="YAML file with extra profiles/theme (default: $HILITE_CONFIG or ./hilite.yaml)")
        sp.add_argument("--debug", action="store_true", default=argparse.SUPPRESS if suppress else False,
                        help=f"debug logging to stderr (or set {ENV_DEBUG}=1)")

    add_global(p, suppress=False)
    sub = p.add_subparsers(dest="cmd", required=True)

    # Common arguments for render/report
    def add_common(sp: argparse.ArgumentParser) -> None:
        add_global(sp, suppress=True)
        sp.add_argument("source", nargs="?", default="-", help="file to highlight, or - for stdin")
        sp.add_argument("-p", "--profile", default="java-like", help="language profile key (see 'list profiles')")
        sp.add_argument("--theme", help="theme name (see 'list themes')")

    sp_render = sub.add_parser("render", help="highlighted markup to stdout")
    add_common(sp_render)
    sp_render.add_argument("--wrap", action="store_true", help="enclose the output in <pre><code>")

    sp_report = sub.add_parser("report", help="JSON report: literal regions and spans per category")
    add_common(sp_report)

    sp_list = sub.add_parser("list", help="lists of entities (JSON)")
    add_global(sp_list, suppress=True)
    sp_list.add_argument("what", choices=["profiles", "themes"], help="what to list")

    return p


def _setup_logging(debug: bool) -> None:
    if not (debug or os.environ.get(ENV_DEBUG)):
        return
    root = logging.getLogger("hilite")
    root.setLevel(logging.DEBUG)
    if not root.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        root.addHandler(h)


def _read_source(arg: str) -> str:
    if arg == "-":
        return sys.stdin.read()
    path = Path(arg)
    if not path.is_file():
        raise HiliteUserError(f"Source file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise HiliteUserError(f"Failed to read source file {path}: {e}") from e


def _highlighter(ns: argparse.Namespace) -> Highlighter:
    cfg = load_config(find_config(ns.config))
    theme_name: Optional[str] = getattr(ns, "theme", None)
    return build_highlighter(cfg, theme=get_theme(theme_name) if theme_name else None)


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.debug)

    try:
        hl = _highlighter(ns)

        if ns.cmd == "render":
            html = hl.highlight(_read_source(ns.source), ns.profile)
            if ns.wrap:
                html = f"<pre><code>{html}</code></pre>\n"
            sys.stdout.write(html)
            return 0

        if ns.cmd == "report":
            result = hl.analyze(_read_source(ns.source), ns.profile)
            report = build_report(result, ns.profile)
            sys.stdout.write(jdumps(report.model_dump(mode="json")))
            return 0

        if ns.cmd == "list":
            if ns.what == "profiles":
                data = list_profiles(hl.registry).model_dump(mode="json")
            else:
                data = list_themes().model_dump(mode="json")
            sys.stdout.write(jdumps(data))
            return 0

    except HiliteUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
