"""The echo builtin."""

from __future__ import annotations

import sys
from typing import TextIO

from minishell.tokens import AstNode


def echo(node: AstNode, stream: TextIO | None = None) -> None:
    """Write the node's arguments joined by spaces; ``-n`` drops the newline."""
    out = stream if stream is not None else sys.stdout
    args = node.args[1:]
    newline = True
    if args and args[0] == "-n":
        newline = False
        args = args[1:]
    out.write(" ".join(args))
    if newline:
        out.write("\n")