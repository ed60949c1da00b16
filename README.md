# shkit

Building blocks for a small POSIX-style shell. The package is written in plain
Python and has no third-party dependencies.

## Modules

### `shkit.chars`

This module handles single characters and integers.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` and `is_space`
  classify ASCII characters. Each one accepts a one-character string or an
  integer code point. A longer string raises `ValueError`.
- `to_lower` and `to_upper` change the case of ASCII letters only.
- `atoi(text)` skips leading whitespace and reads one optional sign, then
  reads the digits that follow. If no number starts the text, it returns 0.
- `itoa(n)` returns the decimal text of an integer.
- `imin` and `imax` return the smaller or the larger of two integers.
- `put_nbr(n, stream)` and `put_endl(text, stream)` write to a stream.
  Standard output is the default stream.

### `shkit.text`

This module has string helpers that follow C-string rules.

- `split(text, sep)` splits on a single separator character and drops empty
  pieces.
- `split_ws(text)` splits on runs of ASCII whitespace.
- `strtrim(text, charset)` strips the characters in `charset` from both ends
  of the text.
- `substr(text, start, length)` returns a bounded slice. A negative `start` or
  `length` raises `ValueError`.
- `strncmp(a, b, n)` and `strncasecmp(a, b, n)` compare at most `n`
  characters. The result is negative, zero or positive. Comparison stops at
  the end of the shorter string, which counts as a NUL.
- `strnstr(haystack, needle, length)`, `strchr(text, c)` and
  `strrchr(text, c)` return an index, or `None` if nothing is found.
  Searching for `"\0"` finds the position `len(text)`.
- `strmapi(text, func)` builds a new string from `func(index, char)`.

### `shkit.linereader`

`LineReader(source, buffer_size=256)` reads lines from any object with a
`read(size)` method. The object can be a text stream or a binary stream.
`LineReader` asks for `buffer_size` characters or bytes at a time. Each line
keeps its newline. The last line of the input may have no newline.

`read_line()` returns `None` once the input is exhausted. Iterating over the
reader yields every remaining line. A `buffer_size` below 1 raises
`ValueError`.

### `shkit.environment`

`Environment` is an ordered list of `KEY=VALUE` entries, and `EnvVar` is one
entry. `parse_entry(content)` splits an entry at its first `=`. An entry
without `=` has the value `None`.

`Environment` has these operations:

- `add` appends an entry and returns it.
- `get` returns the first entry with a given key.
- `remove` removes the first entry with a given key and returns it.
- `sort` orders the entries by key. The sort is stable.
- `envp` returns the full entry texts.
- You can iterate over it and call `len` on it.

### `shkit.builtins`

This module has the `cd`, `env`, `pwd` and `exit` builtins. They all work on
a `ShellState`, which holds these fields:

- `env`: an `Environment`
- `cwd`
- `exit_code`
- `interactive`
- `error`

The `args` parameter holds only the arguments after the command name.

- `cd(state, args, stdout, stderr)` works as follows:
  - With no argument, or with `--`, it changes to `HOME`.
  - With `-`, it changes to `OLDPWD` and prints that directory.
  - After a successful change it updates `OLDPWD` and `PWD` and sorts the
    environment.
  - It returns the exit code.
- `env(state, stdout)` prints every entry. `pwd(state, stdout)` prints
  `state.cwd`.
- `exit_builtin(state, args, forked, stdout, stderr)` raises `ShellExit`.
  `ShellExit` has two attributes: `code` holds the full code and `status`
  holds the code modulo 256.
  - An argument that is not numeric, or that is outside the signed 64-bit
    range, reports "numeric argument required" and exits with code 255.
  - With more than one argument when not forked, it reports "too many
    arguments", sets the exit code to 1 and returns without raising.
  - An interactive shell that is not forked prints `exit` first.
- `is_numeric`, `is_in_range` and `parse_exit_code` validate the arguments of
  `exit`. `parse_exit_code` raises `ValueError` when an argument is rejected.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from shkit.chars import atoi
from shkit.text import split, strtrim

split("  ls   -la  ", " ")     # ['ls', '-la']
strtrim("xxhixx", "x")        # 'hi'
atoi("   -42abc")             # -42
```

```python
import io
from shkit.linereader import LineReader

reader = LineReader(io.StringIO("one\ntwo"), buffer_size=4)
list(reader)                  # ['one\n', 'two']
```

```python
from shkit.environment import Environment

env = Environment(["PATH=/bin", "HOME=/home/user"])
env.get("HOME").value         # '/home/user'
env.add("EDITOR=vi")
env.sort()
env.envp()                    # ['EDITOR=vi', 'HOME=/home/user', 'PATH=/bin']
```

```python
import io
from shkit.builtins import ShellExit, ShellState, exit_builtin

state = ShellState()
try:
    exit_builtin(state, ["3"], False, io.StringIO(), io.StringIO())
except ShellExit as stop:
    print(stop.code)          # 3
```

## What it does not do

This package is a library of parts. It does not provide a shell you can run:

- It has no command-line entry point and no prompt loop.
- It has no tokenizer, parser or expander for command lines.
- It has no pipelines, redirections or heredocs.
- It does not run external programs.
- It has only the builtins `cd`, `env`, `pwd` and `exit`. It has no `echo`,
  `export` or `unset`.