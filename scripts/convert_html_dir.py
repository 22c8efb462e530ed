#!/usr/bin/env python3
"""Convert every HTML fragment in a directory into a DOM-building script.

Each ``*.html`` file under ``--src`` produces a ``.js`` file at the same
relative path under ``--out``. Files whose nodes cannot be named are
reported and skipped; the script exits non-zero if any file failed.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

REPO_ROOT = Path(__file__).resolve().parents[1]
REPO_ROOT_STR = str(REPO_ROOT)
if REPO_ROOT_STR not in sys.path:
    sys.path.insert(0, REPO_ROOT_STR)

from domgen.converter import NameResolutionError
from domgen.io_utils import warn, write_text
from domgen.session import markup_to_script
from domgen.settings import ConverterSettings, load_settings


def convert_directory(src_dir: Path, out_dir: Path, settings: ConverterSettings) -> List[Path]:
    """Convert all fragments and return the paths of files that failed."""
    if not src_dir.is_dir():
        raise FileNotFoundError(f"Source directory not found: {src_dir}")

    failed: List[Path] = []
    for html_path in sorted(src_dir.rglob("*.html")):
        rel = html_path.relative_to(src_dir)
        try:
            script = markup_to_script(html_path.read_text(encoding="utf-8"), settings)
        except NameResolutionError as exc:
            warn(f"{rel}: {exc}")
            failed.append(html_path)
            continue
        write_text((out_dir / rel).with_suffix(".js"), script)
    return failed


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert a directory of HTML fragments to DOM scripts")
    parser.add_argument("--src", required=True, type=Path, help="Directory containing .html fragments")
    parser.add_argument("--out", required=True, type=Path, help="Output directory for .js files")
    parser.add_argument("--config", type=Path, help="YAML file with converter settings")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = load_settings(args.config) if args.config else ConverterSettings()
    failed = convert_directory(args.src, args.out, settings)
    if failed:
        return 1
    print(f"Wrote scripts to {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
