"""Split a command line into words, operators and variable references."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Sequence, TextIO

from minishell.tokens import TokenType

_SPECIAL = frozenset("|<>$")
_INPUT_LIMIT = 1023


@dataclass(frozen=True)
class Token:
    """A piece of the command line and its kind."""

    value: str
    type: TokenType


def is_special_char(c: str) -> bool:
    """Return True for characters that end a word."""
    return c in _SPECIAL


def _is_name_char(c: str) -> bool:
    return c == "_" or (c.isascii() and c.isalnum())


def tokenize(text: str) -> list[Token]:
    """Return the tokens of ``text`` in order."""
    tokens: list[Token] = []
    i = 0
    n = len(text)
    while i < n:
        while i < n and text[i] == " ":
            i += 1
        if i >= n:
            break
        c = text[i]
        nxt = text[i + 1] if i + 1 < n else ""
        if c == "|":
            tokens.append(Token("|", TokenType.PIPE))
            i += 1
        elif c == "<":
            if nxt == "<":
                tokens.append(Token("<<", TokenType.REDIR_HEREDOC))
                i += 2
            else:
                tokens.append(Token("<", TokenType.REDIR_IN))
                i += 1
        elif c == ">":
            if nxt == ">":
                tokens.append(Token(">>", TokenType.REDIR_APPEND))
                i += 2
            else:
                tokens.append(Token(">", TokenType.REDIR_OUT))
                i += 1
        elif c == "$":
            start = i
            i += 1
            if i < n and _is_name_char(text[i]):
                while i < n and _is_name_char(text[i]):
                    i += 1
                tokens.append(Token(text[start:i], TokenType.ENV_VAR))
            else:
                tokens.append(Token("$", TokenType.WORD))
        else:
            start = i
            while i < n and not is_special_char(text[i]):
                i += 1
            tokens.append(Token(text[start:i], TokenType.WORD))
    return tokens


def format_token(token: Token) -> str:
    """Render a token as one report line."""
    return f"Token: {token.value:<10} Type: {int(token.type)}"


def print_tokens_forward(tokens: Iterable[Token], stream: TextIO | None = None) -> None:
    """Write the tokens first to last."""
    out = stream if stream is not None else sys.stdout
    for token in tokens:
        out.write(format_token(token) + "\n")


def print_tokens_backward(tokens: Sequence[Token], stream: TextIO | None = None) -> None:
    """Write the tokens last to first."""
    print_tokens_forward(reversed(tokens), stream)


def main(argv: Sequence[str] | None = None) -> int:
    """Read one line, tokenize it and print the tokens both ways."""
    out = sys.stdout
    out.write("minishell> ")
    out.flush()
    line = sys.stdin.readline(_INPUT_LIMIT)
    if line:
        line = line.split("\n", 1)[0]
        tokens = tokenize(line)
        out.write("\nTokens hacia adelante:\n")
        print_tokens_forward(tokens, out)
        out.write("\nTokens hacia atrás:\n")
        print_tokens_backward(tokens, out)
    return 0