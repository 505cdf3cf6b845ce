"""Shell-style argument tokenizer.

A small explicit state machine over (quote state, escape flag). ``step`` decides
what one character means; ``tokenize`` applies the resulting actions to a token
accumulator.

Rules:
    - Outside quotes, a backslash escapes any following character.
    - Inside single quotes every character is literal, backslash included.
    - Inside double quotes a backslash only escapes ``"`` and ``\\``; before any
      other character both characters are kept.
    - Unquoted whitespace ends the current token. Empty tokens are never emitted,
      so ``""`` on its own produces nothing.
    - A trailing lone backslash is kept literally; an unterminated quote simply
      runs to the end of input.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import cast

BACKSLASH = "\\"
SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
DOUBLE_QUOTE_ESCAPABLE = frozenset({DOUBLE_QUOTE, BACKSLASH})


class QuoteState(Enum):
    UNQUOTED = "unquoted"
    SINGLE = "single"
    DOUBLE = "double"


class ActionKind(Enum):
    PUSH = "push"
    FLUSH = "flush"
    SET_QUOTE = "set_quote"
    START_ESCAPE = "start_escape"
    CONSUME = "consume"


@dataclass(frozen=True)
class Action:
    """What the tokenizer should do with one input character."""

    kind: ActionKind
    char: str = ""
    quote: QuoteState | None = None


FLUSH = Action(ActionKind.FLUSH)
START_ESCAPE = Action(ActionKind.START_ESCAPE)


def step(quote: QuoteState, escaped: bool, char: str) -> Action:
    """Transition function for one character."""
    if escaped:
        return Action(ActionKind.CONSUME, char)

    if quote is QuoteState.UNQUOTED:
        if char == BACKSLASH:
            return START_ESCAPE
        if char == SINGLE_QUOTE:
            return Action(ActionKind.SET_QUOTE, quote=QuoteState.SINGLE)
        if char == DOUBLE_QUOTE:
            return Action(ActionKind.SET_QUOTE, quote=QuoteState.DOUBLE)
        if char.isspace():
            return FLUSH
        return Action(ActionKind.PUSH, char)

    if quote is QuoteState.SINGLE:
        if char == SINGLE_QUOTE:
            return Action(ActionKind.SET_QUOTE, quote=QuoteState.UNQUOTED)
        return Action(ActionKind.PUSH, char)

    if char == DOUBLE_QUOTE:
        return Action(ActionKind.SET_QUOTE, quote=QuoteState.UNQUOTED)
    if char == BACKSLASH:
        return START_ESCAPE
    return Action(ActionKind.PUSH, char)


def _consume(quote: QuoteState, char: str) -> str:
    if quote is QuoteState.UNQUOTED:
        return char
    if quote is QuoteState.DOUBLE:
        return char if char in DOUBLE_QUOTE_ESCAPABLE else BACKSLASH + char
    raise AssertionError("backslash does not escape inside single quotes")


def tokenize(text: str) -> list[str]:
    """Split ``text`` into argument tokens using shell quoting rules."""
    tokens: list[str] = []
    current: list[str] = []
    quote = QuoteState.UNQUOTED
    escaped = False

    for char in text:
        action = step(quote, escaped, char)
        if action.kind is ActionKind.PUSH:
            current.append(action.char)
        elif action.kind is ActionKind.FLUSH:
            if current:
                tokens.append("".join(current))
                current = []
        elif action.kind is ActionKind.SET_QUOTE:
            quote = cast(QuoteState, action.quote)
        elif action.kind is ActionKind.START_ESCAPE:
            escaped = True
        else:
            current.append(_consume(quote, action.char))
            escaped = False

    if escaped:
        current.append(BACKSLASH)
    if current:
        tokens.append("".join(current))
    return tokens
