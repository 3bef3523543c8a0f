"""Interactive menu driving a bounded stack."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from algokit.stack import ArrayStack, StackEmptyError, StackFullError

STACK_CAPACITY = 10

MENU = (
    "\n1.create stack using array\n"
    "2.push into stack\n"
    "3.pop into a stack\n"
    "4.top most element in stack\n"
    "5. check if stack is empty or not\n"
    "6. check if stack is full or not\n"
    "7.display element in stack\n"
    "8.exit\n"
    "enter your choice"
)


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _parse_int(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


def _display(stack: ArrayStack, out: TextIO) -> None:
    if stack.is_empty():
        out.write("there is no element in stack to display\n")
    for value in stack:
        out.write(f"{value}\n")


def run_stack_menu(lines: Iterable[str], out: TextIO) -> ArrayStack | None:
    """Run the menu over the given input lines, writing to ``out``.

    Stops at choice 8 or when input runs out, and returns the stack as it
    stands then (None if one was never created).
    """
    tokens = _tokens(lines)
    stack: ArrayStack | None = None
    while True:
        out.write(MENU)
        token = next(tokens, None)
        if token is None:
            return stack
        choice = _parse_int(token)

        if choice == 8:
            return stack
        if choice == 1:
            stack = ArrayStack(STACK_CAPACITY)
            continue
        if choice is None or not 2 <= choice <= 7:
            out.write("enter wrong choice\n")
            continue

        value: int | None = None
        if choice == 2:
            out.write("enter number to push in a stack")
            number = next(tokens, None)
            if number is None:
                return stack
            value = _parse_int(number)
            if value is None:
                out.write("enter a valid number\n")
                continue

        if stack is None:
            out.write("stack has not been created\n")
            continue

        if choice == 2:
            try:
                stack.push(value)
            except StackFullError:
                out.write("stack is full\n")
        elif choice == 3:
            try:
                out.write(f"deleted element is {stack.pop()}")
            except StackEmptyError:
                out.write("stack is empty\n")
        elif choice == 4:
            try:
                out.write(f"top element in a stack is {stack.peek()}")
            except StackEmptyError:
                out.write("stack is empty\n")
        elif choice == 5:
            out.write("stack is empty\n" if stack.is_empty() else "stack is not empty\n")
        elif choice == 6:
            out.write("stack is full\n" if stack.is_full() else "stack is not full\n")
        else:
            _display(stack, out)


def main(argv: list[str] | None = None) -> int:
    """Run the stack menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="algokit-stack", description="Interactive bounded stack menu."
    )
    parser.parse_args(argv)
    run_stack_menu(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())