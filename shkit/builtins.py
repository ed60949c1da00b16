"""Built-in shell commands: cd, env, pwd and exit."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import Sequence, TextIO

from shkit.chars import is_digit, is_space
from shkit.environment import Environment

INT64_MIN = -9223372036854775808
INT64_MAX = 9223372036854775807

_PREFIX = "minishell"


class ShellExit(Exception):
    """Raised when the shell is asked to terminate."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code

    @property
    def status(self) -> int:
        """The process exit status the code reduces to (0..255)."""
        return self.code % 256


@dataclass
class ShellState:
    """The parts of shell state the built-ins read and change."""

    env: Environment = field(default_factory=Environment)
    cwd: str = ""
    exit_code: int = 0
    interactive: bool = False
    error: bool = False


def _out(stream: TextIO | None) -> TextIO:
    return stream if stream is not None else sys.stdout


def _err(stream: TextIO | None) -> TextIO:
    return stream if stream is not None else sys.stderr


def _set_env(env: Environment, content: str) -> None:
    """Append an entry and drop any earlier entries with the same key."""
    var = env.add(content)
    while sum(1 for other in env if other.key == var.key) > 1:
        env.remove(var.key)


def _target(key: str, state: ShellState, stderr: TextIO) -> str | None:
    var = state.env.get(key)
    if var is None or not var.value:
        stderr.write(f"{_PREFIX}: cd: {key} not set\n")
        state.exit_code = 1
        return None
    return var.value


def _update_oldpwd(state: ShellState) -> None:
    pwd_var = state.env.get("PWD")
    if pwd_var is None or not pwd_var.value:
        while state.env.remove("OLDPWD") is not None:
            pass
        state.env.add("OLDPWD")
        return
    _set_env(state.env, f"OLDPWD={pwd_var.value}")


def _update_pwd(previous: str, state: ShellState, stderr: TextIO) -> None:
    try:
        state.cwd = os.getcwd()
    except FileNotFoundError:
        stderr.write(
            f"{_PREFIX}: cd: error retrieving current directory: "
            "getcwd: cannot access parent directories: "
            "No such file or directory\n"
        )
        state.cwd = previous + "/.."
    _set_env(state.env, f"PWD={state.cwd}")


def cd(
    state: ShellState,
    args: Sequence[str],
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Change directory; args are the arguments after the command name.

    No argument or "--" goes to HOME, "-" goes to OLDPWD and prints it.
    Returns the shell's exit code afterwards.
    """
    out, err = _out(stdout), _err(stderr)
    first = args[0] if args else None
    if first is None or first == "--":
        target = _target("HOME", state, err)
    elif first == "-":
        target = _target("OLDPWD", state, err)
    else:
        target = first
    if target is None:
        return state.exit_code
    try:
        os.chdir(target)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        err.write(f"{_PREFIX}: cd: {target}: {reason}\n")
        state.exit_code = 1
        return state.exit_code
    if first == "-":
        out.write(target + "\n")
    _update_oldpwd(state)
    _update_pwd(state.cwd, state, err)
    state.env.sort()
    return state.exit_code


def env(state: ShellState, stdout: TextIO | None = None) -> None:
    """Print every environment entry on its own line."""
    out = _out(stdout)
    for entry in state.env.envp():
        out.write(entry + "\n")


def pwd(state: ShellState, stdout: TextIO | None = None) -> None:
    """Print the shell's current working directory."""
    _out(stdout).write(state.cwd + "\n")


def is_numeric(text: str) -> bool:
    """True for optional whitespace, an optional sign, digits, optional whitespace."""
    i = 0
    n = len(text)
    while i < n and is_space(text[i]):
        i += 1
    if i < n and text[i] in "+-":
        i += 1
    if i >= n or not is_digit(text[i]):
        return False
    while i < n and is_digit(text[i]):
        i += 1
    while i < n and is_space(text[i]):
        i += 1
    return i == n


def is_in_range(text: str) -> bool:
    """True if a numeric text denotes a value that fits in a signed 64-bit integer."""
    if not is_numeric(text):
        return False
    return INT64_MIN <= int(text.strip(" \t\n\v\f\r")) <= INT64_MAX


def parse_exit_code(text: str) -> int:
    """Parse an exit argument; ValueError if not numeric or out of 64-bit range."""
    if not is_numeric(text) or not is_in_range(text):
        raise ValueError(f"{text}: numeric argument required")
    return int(text.strip(" \t\n\v\f\r"))


def exit_builtin(
    state: ShellState,
    args: Sequence[str],
    forked: bool = False,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> None:
    """Terminate the shell by raising ShellExit.

    With more than one argument in the main process, reports the error,
    sets the exit code to 1 and returns instead.
    """
    out, err = _out(stdout), _err(stderr)
    if not forked and state.interactive:
        out.write("exit\n")
    if args:
        try:
            state.exit_code = parse_exit_code(args[0])
        except ValueError:
            err.write(f"{_PREFIX}: exit: {args[0]}: numeric argument required\n")
            state.error = True
            state.exit_code = 255
    if not state.error and len(args) > 1:
        err.write(f"{_PREFIX}: exit: too many arguments\n")
        state.exit_code = 1
        if not forked:
            return
    raise ShellExit(state.exit_code)