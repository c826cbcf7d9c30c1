# generator.py
from __future__ import annotations

import operator as _op
import secrets
from typing import Literal

from pydantic import BaseModel, ConfigDict

OPERATORS = ("+", "-", "*")

_APPLY = {
    "+": _op.add,
    "-": _op.sub,
    "*": _op.mul,
}

# operand ranges for + and *; subtraction draws b from [1, a]
ADD_MUL_MAX = 10
SUB_MAX = 20


class Puzzle(BaseModel):
    """An arithmetic challenge before the store assigns it a token."""

    model_config = ConfigDict(frozen=True)

    a: int
    operator: Literal["+", "-", "*"]
    b: int
    equation: str
    answer: int


def make_puzzle(a: int, op: str, b: int) -> Puzzle:
    if op not in _APPLY:
        raise ValueError(f"unsupported operator: {op!r}")
    return Puzzle(
        a=a,
        operator=op,
        b=b,
        equation=f"{a} {op} {b} = ?",
        answer=_APPLY[op](a, b),
    )


class ChallengeGenerator:
    """
    Draws operator and operands from a secure source by default.
    Tests may pass any object exposing `choice` and `randint`, e.g. random.Random(seed).
    """

    def __init__(self, rng=None):
        self._rng = rng if rng is not None else secrets.SystemRandom()

    def generate(self) -> Puzzle:
        op = self._rng.choice(OPERATORS)
        if op == "-":
            a = self._rng.randint(1, SUB_MAX)
            b = self._rng.randint(1, a)
        else:
            a = self._rng.randint(1, ADD_MUL_MAX)
            b = self._rng.randint(1, ADD_MUL_MAX)
        return make_puzzle(a, op, b)
