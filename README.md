# minishell

The front end of a small shell. It has a read loop that echoes each
command line back, a tokenizer that breaks a line into words, pipes,
redirections and environment-variable references, a token classifier,
an `echo` builtin, and helper modules for characters, strings, numbers,
byte buffers, output and line-by-line reading.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

`minishell` starts the read loop. It prints the prompt `$prompt>`,
reads a line, and prints it back as `line: <text>`, until end of input.
On a terminal, line editing and history come from Python's `readline`
module where it is available; Ctrl-C ends the loop with exit status 130.

```
minishell
```

`minishell-tokenize` prints the prompt `minishell> `, reads one line
(at most 1023 characters) from standard input and lists its tokens
first to last, then last to first, one per line as
`Token: <value> Type: <number>`:

```
echo 'cat file | grep x >> out' | minishell-tokenize
```

`minishell-count` prints the token count that `token_counter` gives for
a fixed sample command line.

```
minishell-count
```

## Using it from Python

```python
import sys

from minishell.tokenizer import tokenize, print_tokens_forward
from minishell.parser import token_type
from minishell.tokens import TokenType

tokens = tokenize("cat < in.txt | wc -l > $OUT")
print_tokens_forward(tokens, sys.stdout)

assert token_type(">>") is TokenType.REDIR_APPEND
```

`tokenize` returns a list of `Token(value, type)`. The operators `|`,
`<`, `<<`, `>` and `>>` are tokens of their own; `$NAME` (letters,
digits and `_`) is an `ENV_VAR` token, and a lone `$` is a `WORD`. A
word runs up to the next `|`, `<`, `>` or `$`, so spaces inside it are
kept: `"ls -l | wc"` gives `"ls -l "`, `"|"` and `"wc"`.

`minishell.echo.echo(node, stream)` writes the arguments of an
`AstNode` after the first, joined by spaces, with a trailing newline
unless the first of them is `-n`.

`minishell.shell.run(stdin, stdout)` runs the read loop on any pair of
text streams and returns the lines it read.

Reading a file descriptor, or a binary file, line by line:

```python
import os

from minishell.reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 42):
    print(line, end="")
os.close(fd)
```

Other modules:

- `minishell.chars`: `isalnum`, `isalpha`, `isascii`, `isdigit`,
  `isprint`, `tolower`, `toupper` on ASCII characters or codes.
- `minishell.numbers`: `atoi`, `itoa`, `itoh`, `xtoi`, `absolute`,
  `minimum`, `maximum`; `atoi` and `xtoi` wrap like a 32-bit int.
- `minishell.strings`: `split`, `count_substrings`, `substr`,
  `strjoin`, `strtrim`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `strmapi`, `striteri`; searches return an index
  or None.
- `minishell.memory`: `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`,
  `bzero` on `bytes`, `bytearray` and `memoryview` buffers.
- `minishell.output`: `put_char`, `put_str`, `put_line`, `put_number`.

## What it does not do

This is not yet a working shell. The `minishell` loop only echoes lines
back; it does not run commands, build a syntax tree, set up pipes or
redirections, or expand variables. The tokenizer and `echo` are not
connected to the loop, and `token_counter` is a rough count of operators
that follow a space, not the number of tokens `tokenize` returns.