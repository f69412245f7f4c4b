"""Classify tokens and estimate how many tokens a command line holds."""

from __future__ import annotations

import sys
from typing import Sequence

from minishell.tokens import TokenType

_OPERATOR_STARTS = frozenset("|<>$")

_SAMPLE = "Hola mundo|adads<adad<<asd>add>>asdad$asdad| sbdfosbf | asjdoa > sdnao"


def token_type(token: str) -> TokenType:
    """Return the kind of token that ``token`` starts with."""
    if token.startswith("|"):
        return TokenType.PIPE
    if token.startswith("<<"):
        return TokenType.REDIR_HEREDOC
    if token.startswith("<"):
        return TokenType.REDIR_IN
    if token.startswith(">>"):
        return TokenType.REDIR_APPEND
    if token.startswith(">"):
        return TokenType.REDIR_OUT
    if token.startswith("$"):
        return TokenType.ENV_VAR
    return TokenType.WORD


def token_counter(text: str | None) -> int:
    """Count one token, plus two for each operator that follows a space."""
    if text is None:
        return 0
    count = 1
    i = 0
    n = len(text)
    while i < n:
        space = text.find(" ", i)
        if space == -1:
            break
        i = space + 1
        if i < n and text[i] in _OPERATOR_STARTS:
            count += 2
        i += 1
    return count


def main(argv: Sequence[str] | None = None) -> int:
    """Print the token count of a sample command line."""
    sys.stdout.write(str(token_counter(_SAMPLE)))
    return 0