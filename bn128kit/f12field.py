"""Quadratic extension ``F6[w] / (w^2 - v)`` over a sextic extension."""

from __future__ import annotations

from typing import Tuple, Union

from .f2field import F2Element
from .f6field import F6Element, F6Field
from .splitparstr import split_par_str

F12Element = Tuple[F6Element, F6Element]


class F12Field:
    """Elements are pairs ``(x, y)`` standing for ``x*w + y``."""

    def __init__(self, base: F6Field) -> None:
        self.base = base
        self.xi_to_p_minus_1_over_6: F2Element = base.base.from_string(
            "8376118865763821496583973867626364092589906065868298776909617916018768340080,"
            "16469823323077808223889137241176536799009286646108169935659301613961712198316"
        )
        self.xi_to_p_squared_minus_1_over_6: int = base.base.base.from_string(
            "21888242871839275220042445260109153167277707414472061641714758635765020556617"
        )

    @property
    def zero(self) -> F12Element:
        return (self.base.zero, self.base.zero)

    @property
    def one(self) -> F12Element:
        return (self.base.zero, self.base.one)

    @property
    def neg_one(self) -> F12Element:
        return (self.base.zero, self.base.neg_one)

    def from_string(self, s: str) -> F12Element:
        """Parse ``"((x),(y))"``; raises ValueError unless there are two parts."""
        parts = split_par_str(s)
        if len(parts) != 2:
            raise ValueError(f"expected 2 components in {s!r}, got {len(parts)}")
        return (self.base.from_string(parts[0]), self.base.from_string(parts[1]))

    def to_string(self, a: F12Element, radix: int = 10) -> str:
        f = self.base
        return f"({f.to_string(a[0], radix)},{f.to_string(a[1], radix)})"

    def add(self, a: F12Element, b: F12Element) -> F12Element:
        f = self.base
        return (f.add(a[0], b[0]), f.add(a[1], b[1]))

    def sub(self, a: F12Element, b: F12Element) -> F12Element:
        f = self.base
        return (f.sub(a[0], b[0]), f.sub(a[1], b[1]))

    def neg(self, a: F12Element) -> F12Element:
        f = self.base
        return (f.neg(a[0]), f.neg(a[1]))

    def conjugate(self, a: F12Element) -> F12Element:
        return (self.base.neg(a[0]), a[1])

    def mul(self, a: F12Element, b: F12Element) -> F12Element:
        f = self.base
        tx = f.add(f.mul(a[0], b[1]), f.mul(b[0], a[1]))
        ty = f.add(f.mul(a[1], b[1]), f.mul_tau(f.mul(a[0], b[0])))
        return (tx, ty)

    def mul_scalar(self, a: F12Element, b: F6Element) -> F12Element:
        f = self.base
        return (f.mul(a[0], b), f.mul(a[1], b))

    def exp(self, a: F12Element, scalar: Union[int, bytes]) -> F12Element:
        """Raise ``a`` to ``scalar``, given as an integer or little-endian bytes."""
        if isinstance(scalar, (bytes, bytearray, memoryview)):
            e = int.from_bytes(bytes(scalar), "little")
        else:
            e = scalar
        if e < 0:
            raise ValueError("exponent must not be negative")
        r = self.one
        for bit in bin(e)[2:] if e else "":
            r = self.square(r)
            if bit == "1":
                r = self.mul(r, a)
        return r

    def square(self, a: F12Element) -> F12Element:
        f = self.base
        ax, ay = a
        v0 = f.mul(ax, ay)
        t = f.add(ay, f.mul_tau(ax))
        ty = f.mul(f.add(ax, ay), t)
        ty = f.sub(f.sub(ty, v0), f.mul_tau(v0))
        return (f.dbl(v0), ty)

    def frobenius(self, a: F12Element) -> F12Element:
        f = self.base
        x = f.mul_scalar(f.frobenius(a[0]), self.xi_to_p_minus_1_over_6)
        return (x, f.frobenius(a[1]))

    def frobenius_p2(self, a: F12Element) -> F12Element:
        f = self.base
        x = f.mul_gfp(f.frobenius_p2(a[0]), self.xi_to_p_squared_minus_1_over_6)
        return (x, f.frobenius_p2(a[1]))

    def inv(self, a: F12Element) -> F12Element:
        f = self.base
        norm = f.sub(f.square(a[1]), f.mul_tau(f.square(a[0])))
        t = f.inv(norm)
        return self.mul_scalar((f.neg(a[0]), a[1]), t)

    def div(self, a: F12Element, b: F12Element) -> F12Element:
        return self.mul(a, self.inv(b))

    def is_zero(self, a: F12Element) -> bool:
        return self.base.is_zero(a[0]) and self.base.is_zero(a[1])

    def is_one(self, a: F12Element) -> bool:
        return self.base.is_zero(a[0]) and self.base.is_one(a[1])

    def eq(self, a: F12Element, b: F12Element) -> bool:
        return self.base.eq(a[0], b[0]) and self.base.eq(a[1], b[1])