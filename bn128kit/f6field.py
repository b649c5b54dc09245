"""Cubic extension ``F2[v] / (v^3 - xi)`` over a quadratic extension."""

from __future__ import annotations

from typing import Tuple

from .f2field import F2Element, F2Field
from .splitparstr import split_par_str

F6Element = Tuple[F2Element, F2Element, F2Element]


class F6Field:
    """Elements are triples ``(x, y, z)`` standing for ``x*v^2 + y*v + z``."""

    def __init__(self, base: F2Field) -> None:
        self.base = base
        self.xi_to_2p_minus_2_over_3 = base.from_string(
            "2581911344467009335267311115468803099551665605076196740867805258568234346338,"
            "19937756971775647987995932169929341994314640652964949448313374472400716661030"
        )
        self.xi_to_p_minus_1_over_3 = base.from_string(
            "21575463638280843010398324269430826099269044274347216827212613867836435027261,"
            "10307601595873709700152284273816112264069230130616436755625194854815875713954"
        )
        self.xi_to_2p_squared_minus_2_over_3 = base.base.from_string(
            "2203960485148121921418603742825762020974279258880205651966"
        )
        self.xi_to_p_squared_minus_1_over_3 = base.base.from_string(
            "21888242871839275220042445260109153167277707414472061641714758635765020556616"
        )

    @property
    def zero(self) -> F6Element:
        z = self.base.zero
        return (z, z, z)

    @property
    def one(self) -> F6Element:
        z = self.base.zero
        return (z, z, self.base.one)

    @property
    def neg_one(self) -> F6Element:
        z = self.base.zero
        return (z, z, self.base.neg_one)

    def from_string(self, s: str) -> F6Element:
        """Parse ``"((x),(y),(z))"``; raises ValueError unless there are three parts."""
        parts = split_par_str(s)
        if len(parts) != 3:
            raise ValueError(f"expected 3 components in {s!r}, got {len(parts)}")
        f = self.base
        return (f.from_string(parts[0]), f.from_string(parts[1]), f.from_string(parts[2]))

    def to_string(self, a: F6Element, radix: int = 10) -> str:
        return "(" + ",".join(self.base.to_string(c, radix) for c in a) + ")"

    def add(self, a: F6Element, b: F6Element) -> F6Element:
        f = self.base
        return (f.add(a[0], b[0]), f.add(a[1], b[1]), f.add(a[2], b[2]))

    def sub(self, a: F6Element, b: F6Element) -> F6Element:
        f = self.base
        return (f.sub(a[0], b[0]), f.sub(a[1], b[1]), f.sub(a[2], b[2]))

    def neg(self, a: F6Element) -> F6Element:
        f = self.base
        return (f.neg(a[0]), f.neg(a[1]), f.neg(a[2]))

    def mul(self, a: F6Element, b: F6Element) -> F6Element:
        f = self.base
        ax, ay, az = a
        bx, by, bz = b
        v0 = f.mul(az, bz)
        v1 = f.mul(ay, by)
        v2 = f.mul(ax, bx)

        tz = f.mul(f.add(ax, ay), f.add(bx, by))
        tz = f.add(f.mul_xi(f.sub(f.sub(tz, v1), v2)), v0)

        ty = f.mul(f.add(ay, az), f.add(by, bz))
        ty = f.add(f.sub(f.sub(ty, v0), v1), f.mul_xi(v2))

        tx = f.mul(f.add(ax, az), f.add(bx, bz))
        tx = f.sub(f.add(f.sub(tx, v0), v1), v2)
        return (tx, ty, tz)

    def mul_scalar(self, a: F6Element, b: F2Element) -> F6Element:
        f = self.base
        return (f.mul(a[0], b), f.mul(a[1], b), f.mul(a[2], b))

    def mul_tau(self, a: F6Element) -> F6Element:
        """Multiply by ``v``."""
        return (a[1], a[2], self.base.mul_xi(a[0]))

    def mul_gfp(self, a: F6Element, b: int) -> F6Element:
        """Multiply every coefficient by an element of the prime field."""
        f = self.base
        return (f.mul_scalar(a[0], b), f.mul_scalar(a[1], b), f.mul_scalar(a[2], b))

    def square(self, a: F6Element) -> F6Element:
        f = self.base
        ax, ay, az = a
        v0 = f.square(az)
        v1 = f.square(ay)
        v2 = f.square(ax)

        c0 = f.square(f.add(ax, ay))
        c0 = f.add(f.mul_xi(f.sub(f.sub(c0, v1), v2)), v0)

        c1 = f.square(f.add(ay, az))
        c1 = f.add(f.sub(f.sub(c1, v0), v1), f.mul_xi(v2))

        c2 = f.square(f.add(ax, az))
        c2 = f.sub(f.add(f.sub(c2, v0), v1), v2)
        return (c2, c1, c0)

    def dbl(self, a: F6Element) -> F6Element:
        f = self.base
        return (f.dbl(a[0]), f.dbl(a[1]), f.dbl(a[2]))

    def frobenius(self, a: F6Element) -> F6Element:
        f = self.base
        x = f.mul(f.conjugate(a[0]), self.xi_to_2p_minus_2_over_3)
        y = f.mul(f.conjugate(a[1]), self.xi_to_p_minus_1_over_3)
        return (x, y, f.conjugate(a[2]))

    def frobenius_p2(self, a: F6Element) -> F6Element:
        f = self.base
        return (
            f.mul_scalar(a[0], self.xi_to_2p_squared_minus_2_over_3),
            f.mul_scalar(a[1], self.xi_to_p_squared_minus_1_over_3),
            a[2],
        )

    def inv(self, a: F6Element) -> F6Element:
        f = self.base
        ax, ay, az = a
        big_a = f.sub(f.square(az), f.mul_xi(f.mul(ax, ay)))
        big_b = f.sub(f.mul_xi(f.square(ax)), f.mul(ay, az))
        big_c = f.sub(f.square(ay), f.mul(ax, az))

        norm = f.mul_xi(f.mul(big_c, ay))
        norm = f.add(norm, f.mul(big_a, az))
        norm = f.add(norm, f.mul_xi(f.mul(big_b, ax)))
        t = f.inv(norm)
        return (f.mul(big_c, t), f.mul(big_b, t), f.mul(big_a, t))

    def div(self, a: F6Element, b: F6Element) -> F6Element:
        return self.mul(a, self.inv(b))

    def is_zero(self, a: F6Element) -> bool:
        return all(self.base.is_zero(c) for c in a)

    def is_one(self, a: F6Element) -> bool:
        f = self.base
        return f.is_zero(a[0]) and f.is_zero(a[1]) and f.is_one(a[2])

    def eq(self, a: F6Element, b: F6Element) -> bool:
        return all(self.base.eq(x, y) for x, y in zip(a, b))