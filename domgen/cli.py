"""Command-line interface converting HTML markup into DOM-building JavaScript."""

from __future__ import annotations

import argparse
import difflib
import sys
from pathlib import Path

from .converter import NameResolutionError
from .io_utils import read_text, write_text
from .session import markup_to_script
from .settings import ConverterSettings, load_settings


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert an HTML fragment into JavaScript statements that rebuild it with the DOM API."
    )
    parser.add_argument("--input", type=Path, help="HTML file to convert (defaults to stdin)")
    parser.add_argument("--out", type=Path, help="Write the script to this file instead of stdout")
    parser.add_argument("--config", type=Path, help="YAML file with converter settings")
    parser.add_argument(
        "--ignore-whitespaces",
        action="store_true",
        default=None,
        help="Skip whitespace-only text nodes and trim text content",
    )
    parser.add_argument(
        "--fragment",
        action="store_true",
        default=None,
        help="Append top-level elements to a new DocumentFragment",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Compare the generated script with --out and exit non-zero on differences",
    )
    return parser.parse_args(argv)


def _resolve_settings(args: argparse.Namespace) -> ConverterSettings:
    settings = load_settings(args.config) if args.config else ConverterSettings()
    overrides = {}
    if args.ignore_whitespaces is not None:
        overrides["ignore_whitespaces"] = args.ignore_whitespaces
    if args.fragment is not None:
        overrides["fragment"] = args.fragment
    if overrides:
        settings = settings.model_copy(update=overrides)
    return settings


def _diff_script(path: Path, script: str) -> str:
    existing = path.read_text(encoding="utf-8").splitlines(keepends=True) if path.exists() else []
    generated = (script + "\n").splitlines(keepends=True) if script else []
    diff = difflib.unified_diff(existing, generated, fromfile=str(path), tofile="generated")
    return "".join(diff)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    if args.check and not args.out:
        raise SystemExit("--check requires --out")

    settings = _resolve_settings(args)
    markup = read_text(args.input) if args.input else sys.stdin.read()
    try:
        script = markup_to_script(markup, settings)
    except NameResolutionError as exc:
        raise SystemExit(f"Conversion failed: {exc}") from exc

    if args.check:
        diff = _diff_script(args.out, script)
        if diff:
            sys.stderr.write(diff)
            return 1
        return 0

    if args.out:
        write_text(args.out, script)
    else:
        print(script)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
