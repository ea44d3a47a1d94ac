"""Command line entry point: dump tokens or the syntax tree of a file."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import List, Optional

from .defs import load_scope
from .printer import format_scope, format_tokens
from .tokenize import tokenize
from .tokens import ParseError


class UsageError(Exception):
    """Raised when the command line is not used correctly."""


@dataclass(frozen=True)
class Task:
    """A named sub-command."""

    name: str
    description: str
    args: str
    func: Callable[[List[str]], None]


def tokens_task(args: Sequence[str]) -> None:
    """Print the tokens of the file named by the first argument."""
    if not args:
        raise UsageError("missing source file path")
    with open(args[0], encoding="utf-8") as src:
        tokens = tokenize(src)
    sys.stdout.write(format_tokens(tokens))


def ast_task(args: Sequence[str]) -> None:
    """Print the syntax tree of the file named by the first argument."""
    if not args:
        raise UsageError("missing file path")
    sys.stdout.write(format_scope(load_scope(args[0])))


TASKS = (
    Task("tokens", "show file tokens", "<file>", tokens_task),
    Task("ast", "show file ast", "<file>", ast_task),
)


def usage(tasks: Iterable[Task] = TASKS) -> str:
    """Return the usage text listing the tasks."""
    lines = ["usage: cee <task> [...args]\n", "tasks:\n"]
    for task in tasks:
        head = f"\t{task.name}"
        if task.args:
            head += f" {task.args}"
        lines.append(f"{head} - {task.description}\n")
    return "".join(lines)


def run_task(tasks: Iterable[Task], argv: Sequence[str]) -> None:
    """Run the task named by argv[0] with the remaining arguments."""
    if not argv:
        raise UsageError("missing task name")
    name, *rest = argv
    for task in tasks:
        if task.name == name:
            task.func(rest)
            return
    print(f'ERROR: unknown task "{name}"')


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        run_task(TASKS, args)
    except UsageError as error:
        print(f"ERROR: {error}")
        print(usage(TASKS), end="")
        return 1
    except OSError as error:
        print(f"ERROR: failed to open file: {error.strerror or error}")
        print("task finished due to internal error")
        return 1
    except ParseError as error:
        print(f"ERROR: {error}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())