"""Command-line entry: compile a program to a tree listing and assembly."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from tinycomp.codegen import write_asm
from tinycomp.parser import parse
from tinycomp.semantics import check_semantics
from tinycomp.tokens import CompilerError
from tinycomp.tree import write_preorder

_STDIN_BASE = "filename"


def main(argv: Sequence[str] | None = None) -> int:
    """Compile the named file, or standard input, writing .preorder and .asm files."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        base = _STDIN_BASE
        text = sys.stdin.read()
    elif len(args) == 1:
        base = args[0]
        try:
            text = Path(base).read_bytes().decode("latin-1")
        except OSError:
            print("Fatal: Input File Did Not Open", file=sys.stderr)
            return 2
    else:
        print("Fatal: Invalid Arguments Given", file=sys.stderr)
        return 3

    try:
        tree = parse(text)
        write_preorder(tree, base)
        symbols = check_semantics(tree)
        write_asm(tree, base, symbols)
    except CompilerError as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())