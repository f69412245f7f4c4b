import io
import sys

import pytest

from minishell.tokenizer import (
    Token,
    format_token,
    is_special_char,
    main,
    print_tokens_backward,
    print_tokens_forward,
    tokenize,
)
from minishell.tokens import TokenType


@pytest.mark.parametrize("c", ["|", "<", ">", "$"])
def test_special_chars(c):
    assert is_special_char(c) is True


@pytest.mark.parametrize("c", ["a", " ", "-", "_"])
def test_ordinary_chars(c):
    assert is_special_char(c) is False


def test_word_keeps_inner_spaces_until_operator():
    assert tokenize("ls -l | wc") == [
        Token("ls -l ", TokenType.WORD),
        Token("|", TokenType.PIPE),
        Token("wc", TokenType.WORD),
    ]


def test_redirections():
    types = [t.type for t in tokenize("a<b<<c>d>>e")]
    assert types == [
        TokenType.WORD,
        TokenType.REDIR_IN,
        TokenType.WORD,
        TokenType.REDIR_HEREDOC,
        TokenType.WORD,
        TokenType.REDIR_OUT,
        TokenType.WORD,
        TokenType.REDIR_APPEND,
        TokenType.WORD,
    ]


def test_environment_variable():
    assert tokenize("echo $HOME_1") == [
        Token("echo ", TokenType.WORD),
        Token("$HOME_1", TokenType.ENV_VAR),
    ]


def test_lone_dollar_is_word():
    assert tokenize("$ x") == [Token("$", TokenType.WORD), Token("x", TokenType.WORD)]


def test_empty_and_blank_input():
    assert tokenize("") == []
    assert tokenize("    ") == []


@pytest.mark.parametrize("text", ["a|b", "cat<in>>out", "x<<y|$Z>w"])
def test_tokens_rebuild_input_without_spaces(text):
    assert "".join(t.value for t in tokenize(text)) == text


def test_format_token_pads_value():
    assert format_token(Token("|", TokenType.PIPE)) == "Token: |          Type: 1"


def test_print_forward_and_backward():
    tokens = tokenize("a|b")
    forward = io.StringIO()
    backward = io.StringIO()
    print_tokens_forward(tokens, forward)
    print_tokens_backward(tokens, backward)
    lines = forward.getvalue().splitlines()
    assert lines == [format_token(t) for t in tokens]
    assert backward.getvalue().splitlines() == list(reversed(lines))


def test_main_reads_one_line(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("a|b\nignored\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert out.startswith("minishell> ")
    tokens = tokenize("a|b")
    expected_forward = "\n".join(format_token(t) for t in tokens)
    expected_backward = "\n".join(format_token(t) for t in reversed(tokens))
    assert expected_forward in out
    assert out.endswith(expected_backward + "\n")
    assert "ignored" not in out


def test_main_on_empty_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main() == 0
    assert capsys.readouterr().out == "minishell> "