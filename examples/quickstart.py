"""Quickstart - Scanning arithmetic with lexcursor.

Demonstrates:

1. Writing a classifier against the Cursor API
2. Lazy (kind, length) streams and the slice materializer
3. Lexical errors surfacing as ordinary tokens
4. The stateful Scanner helper

Python 3.13+.
"""

from __future__ import annotations

import logging
from enum import Enum, auto

from lexcursor import Cursor, RecoverableScanError, Scanner, UnexpectedInput, lex, tokens


class Kind(Enum):
    ERROR = auto()
    WHITESPACE = auto()
    ADD = auto()
    FLOAT = auto()
    INTEGER = auto()

    @classmethod
    def from_scan_error(cls, error: RecoverableScanError) -> Kind:
        return cls.ERROR


def is_digit(char: str) -> bool:
    return char in "0123456789"


def classify(cursor: Cursor) -> Kind:
    char = cursor.peek()
    if char.isspace():
        cursor.take_while(str.isspace)
        return Kind.WHITESPACE
    if char == "." or is_digit(char):
        cursor.take_while(is_digit)
        if cursor.take(".").any():
            # "4." is rejected: a decimal point needs trailing digits
            cursor.take_while(is_digit).at_least(1)
            return Kind.FLOAT
        return Kind.INTEGER
    if char == "+":
        cursor.bump()
        return Kind.ADD
    cursor.bump()
    raise UnexpectedInput


def example_1_text_tokens() -> None:
    """Scan into (kind, text) pairs."""
    print("=" * 60)
    print("Example 1: (kind, text) tokens")
    print("=" * 60)

    for kind, text in lex("1 + 2.3 + 4. + .5", classify, error_kind=Kind):
        print(f"  {kind.name:<10} {text!r}")
    print()


def example_2_sized_tokens() -> None:
    """Scan into (kind, length) pairs, e.g. for a green-tree builder."""
    print("=" * 60)
    print("Example 2: (kind, length) tokens")
    print("=" * 60)

    stream = tokens("12+€", classify, error_kind=Kind)
    for kind, length in stream:
        print(f"  {kind.name:<10} {length}")
    print(f"  consumed {stream.cursor.pos} chars / {stream.cursor.byte_pos} UTF-8 bytes")
    print()


def example_3_scanner() -> None:
    """Pull tokens one at a time with Scanner."""
    print("=" * 60)
    print("Example 3: Scanner")
    print("=" * 60)

    scanner = Scanner(".5 + x", error_kind=Kind)
    while (token := scanner.wrap(classify)) is not None:
        print(f"  {token}")
    print()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    example_1_text_tokens()
    example_2_sized_tokens()
    example_3_scanner()
