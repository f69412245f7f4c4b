"""Token kinds and the syntax-tree node shared by the tokenizer and parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class TokenType(IntEnum):
    """Kinds of token recognised on a command line."""

    WORD = 0
    PIPE = 1
    REDIR_IN = 2
    REDIR_OUT = 3
    REDIR_APPEND = 4
    REDIR_HEREDOC = 5
    ENV_VAR = 6


@dataclass
class AstNode:
    """A node of the command syntax tree."""

    type: TokenType = TokenType.WORD
    args: list[str] = field(default_factory=list)
    left: AstNode | None = None
    right: AstNode | None = None