# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Comparison operators and their algebra.

`Cmp` is both the result type of a version comparison (only LT, EQ and GT
are ever returned) and the operator type tested by `compare_to` (all six).

Transforms:
    invert:   EQ<->NE, LT<->GE, LE<->GT  (same question, opposite truth)
    opposite: EQ<->NE, LT<->GT, LE<->GE  (swap direction, keep strictness)
    flip:     LT<->GT, LE<->GE           (swap operands; EQ/NE unchanged)

Example:
    >>> Cmp.LT.invert()
    <Cmp.GE: '>='>
    >>> satisfies(Cmp.EQ, Cmp.LE)
    True
    >>> Cmp.from_sign("<=")
    <Cmp.LE: '<='>
"""

from __future__ import annotations

from enum import Enum


class Cmp(Enum):
    """One of the six comparison operators; the value is its sign."""

    EQ = "=="
    NE = "!="
    LT = "<"
    LE = "<="
    GE = ">="
    GT = ">"

    def invert(self) -> Cmp:
        """Return the logical complement (LT -> GE, EQ -> NE, ...)."""
        return _INVERT[self]

    def opposite(self) -> Cmp:
        """Return the operator pointing the other way (LT -> GT, LE -> GE, ...)."""
        return _OPPOSITE[self]

    def flip(self) -> Cmp:
        """Return the operator for swapped operands (a < b <=> b > a)."""
        return _FLIP[self]

    @property
    def sign(self) -> str:
        return self.value

    @property
    def factor(self) -> int:
        """Numeric direction: -1 for LT/LE, 1 for GT/GE, 0 for EQ/NE."""
        return _FACTOR[self]

    @classmethod
    def from_sign(cls, sign: str) -> Cmp:
        """Get the operator for a textual sign.

        Accepts the six canonical signs plus the aliases "=", "<>" and "!".
        Surrounding whitespace is ignored.

        Raises:
            ValueError: If the sign is not recognised.

        """
        op = _SIGNS.get(sign.strip())
        if op is None:
            raise ValueError(f"unknown comparison operator: {sign!r}")
        return op

    @classmethod
    def from_ord(cls, ordering: int) -> Cmp:
        """Map a cmp-style integer (negative/zero/positive) to LT/EQ/GT."""
        if ordering < 0:
            return cls.LT
        if ordering > 0:
            return cls.GT
        return cls.EQ

    def __str__(self) -> str:
        return self.value


_INVERT = {
    Cmp.EQ: Cmp.NE,
    Cmp.NE: Cmp.EQ,
    Cmp.LT: Cmp.GE,
    Cmp.LE: Cmp.GT,
    Cmp.GE: Cmp.LT,
    Cmp.GT: Cmp.LE,
}

_OPPOSITE = {
    Cmp.EQ: Cmp.NE,
    Cmp.NE: Cmp.EQ,
    Cmp.LT: Cmp.GT,
    Cmp.LE: Cmp.GE,
    Cmp.GE: Cmp.LE,
    Cmp.GT: Cmp.LT,
}

_FLIP = {
    Cmp.EQ: Cmp.EQ,
    Cmp.NE: Cmp.NE,
    Cmp.LT: Cmp.GT,
    Cmp.LE: Cmp.GE,
    Cmp.GE: Cmp.LE,
    Cmp.GT: Cmp.LT,
}

_FACTOR = {
    Cmp.EQ: 0,
    Cmp.NE: 0,
    Cmp.LT: -1,
    Cmp.LE: -1,
    Cmp.GE: 1,
    Cmp.GT: 1,
}

_SIGNS = {op.value: op for op in Cmp}
_SIGNS.update({"=": Cmp.EQ, "<>": Cmp.NE, "!": Cmp.NE})

# Operators that hold for each concrete three-way result
_SATISFIED_BY = {
    Cmp.EQ: frozenset({Cmp.EQ, Cmp.LE, Cmp.GE}),
    Cmp.LT: frozenset({Cmp.NE, Cmp.LT, Cmp.LE}),
    Cmp.GT: frozenset({Cmp.NE, Cmp.GT, Cmp.GE}),
}


def satisfies(result: Cmp, operator: Cmp) -> bool:
    """Test whether a three-way comparison result satisfies an operator.

    Args:
        result: Outcome of a comparison; must be LT, EQ or GT.
        operator: Any of the six operators.

    Returns:
        True if `a <operator> b` holds given `compare(a, b) == result`.

    Raises:
        ValueError: If `result` is NE, LE or GE (not a concrete outcome).

    Example:
        >>> satisfies(Cmp.LT, Cmp.NE)
        True
        >>> satisfies(Cmp.EQ, Cmp.LT)
        False
    """
    try:
        return operator in _SATISFIED_BY[result]
    except KeyError:
        raise ValueError(
            f"comparison result must be LT, EQ or GT, got {result.name}"
        ) from None
