"""Command that builds the lexicon acceptor of a project."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from asrdecode.lexicon_fst import PROJECT_ROOT_VAR, LexiconFst


def main(argv: list[str] | None = None) -> int:
    """Build ``data/lexicon/lexicon_fst.fst`` from ``data/lexicon/lexicon.txt``."""
    parser = argparse.ArgumentParser(
        prog="asrdecode-setup",
        description="Build the sorted lexicon FST of a project.",
    )
    parser.add_argument(
        "--project-root",
        default=None,
        help=f"project directory (default: ${PROJECT_ROOT_VAR})",
    )
    args = parser.parse_args(argv)

    root_text = args.project_root or os.environ.get(PROJECT_ROOT_VAR)
    if not root_text:
        print(f"error: {PROJECT_ROOT_VAR} is not set", file=sys.stderr)
        return 1

    lexicon_dir = Path(root_text).resolve() / "data" / "lexicon"
    try:
        builder = LexiconFst(lexicon_dir / "lexicon.txt")
        builder.construct_fst_from_lex_file()
        target = builder.write_fst(lexicon_dir / "lexicon_fst.fst", sort=True)
    except (OSError, ValueError, RuntimeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"wrote {target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())