"""Quadratic extension ``F[u] / (u^2 - nr)`` of a prime field."""

from __future__ import annotations

from enum import Enum
from typing import Tuple, Union

from .primefield import PrimeField
from .splitparstr import split_par_str

F2Element = Tuple[int, int]


class _NrKind(Enum):
    ZERO = "zero"
    ONE = "one"
    NEG_ONE = "neg_one"
    LONG = "long"


class F2Field:
    """Elements are pairs ``(a, b)`` standing for ``a + b*u`` with ``u^2 = nr``."""

    def __init__(self, base: PrimeField, non_residue: Union[int, str]) -> None:
        self.base = base
        if isinstance(non_residue, str):
            nr = base.from_string(non_residue)
        else:
            nr = base.from_int(non_residue)
        self.nr = nr
        if base.is_zero(nr):
            self._nr_kind = _NrKind.ZERO
        elif base.eq(nr, base.one):
            self._nr_kind = _NrKind.ONE
        elif base.eq(nr, base.neg_one):
            self._nr_kind = _NrKind.NEG_ONE
        else:
            self._nr_kind = _NrKind.LONG

    @property
    def zero(self) -> F2Element:
        return (self.base.zero, self.base.zero)

    @property
    def one(self) -> F2Element:
        return (self.base.one, self.base.zero)

    @property
    def neg_one(self) -> F2Element:
        return (self.base.neg_one, self.base.zero)

    def _mul_by_nr(self, a: int) -> int:
        kind = self._nr_kind
        if kind is _NrKind.ZERO:
            return self.base.zero
        if kind is _NrKind.ONE:
            return a
        if kind is _NrKind.NEG_ONE:
            return self.base.neg(a)
        return self.base.mul(self.nr, a)

    def from_string(self, s: str) -> F2Element:
        """Parse ``"(a,b)"``; raises ValueError unless there are two parts."""
        parts = split_par_str(s)
        if len(parts) != 2:
            raise ValueError(f"expected 2 components in {s!r}, got {len(parts)}")
        return (self.base.from_string(parts[0]), self.base.from_string(parts[1]))

    def to_string(self, a: F2Element, radix: int = 10) -> str:
        f = self.base
        return f"({f.to_string(a[0], radix)},{f.to_string(a[1], radix)})"

    def add(self, a: F2Element, b: F2Element) -> F2Element:
        f = self.base
        return (f.add(a[0], b[0]), f.add(a[1], b[1]))

    def sub(self, a: F2Element, b: F2Element) -> F2Element:
        f = self.base
        return (f.sub(a[0], b[0]), f.sub(a[1], b[1]))

    def neg(self, a: F2Element) -> F2Element:
        f = self.base
        return (f.neg(a[0]), f.neg(a[1]))

    def conjugate(self, a: F2Element) -> F2Element:
        return (self.base.from_int(a[0]), self.base.neg(a[1]))

    def mul(self, a: F2Element, b: F2Element) -> F2Element:
        f = self.base
        aa = f.mul(a[0], b[0])
        bb = f.mul(a[1], b[1])
        real = f.add(aa, self._mul_by_nr(bb))
        cross = f.mul(f.add(a[0], a[1]), f.add(b[0], b[1]))
        imag = f.sub(f.sub(cross, aa), bb)
        return (real, imag)

    def mul_scalar(self, a: F2Element, b: int) -> F2Element:
        f = self.base
        return (f.mul(a[0], b), f.mul(a[1], b))

    def mul_xi(self, a: F2Element) -> F2Element:
        """Multiply by ``xi = 9 + u`` (for ``u^2 = -1``)."""
        f = self.base
        t = self.add(self.dbl(self.dbl(self.dbl(a))), a)
        return (f.sub(t[0], a[1]), f.add(t[1], a[0]))

    def dbl(self, a: F2Element) -> F2Element:
        f = self.base
        return (f.dbl(a[0]), f.dbl(a[1]))

    def square(self, a: F2Element) -> F2Element:
        f = self.base
        ab = f.mul(a[0], a[1])
        if self._nr_kind is _NrKind.NEG_ONE:
            real = f.mul(f.add(a[0], a[1]), f.sub(a[0], a[1]))
        else:
            t1 = f.add(a[0], a[1])
            t2 = f.add(a[0], self._mul_by_nr(a[1]))
            real = f.sub(f.mul(t1, t2), f.add(ab, self._mul_by_nr(ab)))
        return (real, f.add(ab, ab))

    def inv(self, a: F2Element) -> F2Element:
        f = self.base
        norm = f.sub(f.square(a[0]), self._mul_by_nr(f.square(a[1])))
        t = f.inv(norm)
        return (f.mul(a[0], t), f.neg(f.mul(a[1], t)))

    def div(self, a: F2Element, b: F2Element) -> F2Element:
        return self.mul(a, self.inv(b))

    def is_zero(self, a: F2Element) -> bool:
        return self.base.is_zero(a[0]) and self.base.is_zero(a[1])

    def is_one(self, a: F2Element) -> bool:
        return self.base.eq(a[0], self.base.one) and self.base.is_zero(a[1])

    def eq(self, a: F2Element, b: F2Element) -> bool:
        return self.base.eq(a[0], b[0]) and self.base.eq(a[1], b[1])