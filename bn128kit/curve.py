"""Short Weierstrass curves ``y^2 = x^3 + a*x + b`` in XYZZ coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence, Union

from .exp import naf_mul_by_scalar
from .msm import MSM
from .multiexp import ParallelMultiexp


@dataclass(frozen=True)
class Point:
    """A point in extended Jacobian form: ``(x/zz, y/zzz)`` with ``zz^3 = zzz^2``.

    A point with ``zz == 0`` is the point at infinity. Dataclass equality
    compares coordinates; use ``Curve.eq`` to compare points on the curve.
    """

    x: Any
    y: Any
    zz: Any
    zzz: Any


@dataclass(frozen=True)
class PointAffine:
    """A point in affine form; ``(0, 0)`` stands for the point at infinity."""

    x: Any
    y: Any


AnyPoint = Union[Point, PointAffine]


class _AKind(Enum):
    ZERO = "zero"
    ONE = "one"
    NEG_ONE = "neg_one"
    LONG = "long"


class Curve:
    """Group law of a curve over ``field``.

    ``field`` provides ``zero``, ``one``, ``neg_one``, ``from_string``,
    ``to_string``, ``add``, ``sub``, ``neg``, ``mul``, ``square``, ``div``,
    ``is_zero`` and ``eq``. The coefficients and generator may be given as
    field elements or as strings the field parses.
    """

    def __init__(self, field: Any, a: Any, b: Any, gx: Any, gy: Any) -> None:
        self.field = field
        self.a = self._element(a)
        self.b = self._element(b)
        gx = self._element(gx)
        gy = self._element(gy)
        f = field
        self.one = Point(gx, gy, f.one, f.one)
        self.one_affine = PointAffine(gx, gy)
        self.zero = Point(f.one, f.one, f.zero, f.zero)
        self.zero_affine = PointAffine(f.zero, f.zero)

        if f.is_zero(self.a):
            self._a_kind = _AKind.ZERO
        elif f.eq(self.a, f.one):
            self._a_kind = _AKind.ONE
        elif f.eq(self.a, f.neg_one):
            self._a_kind = _AKind.NEG_ONE
        else:
            self._a_kind = _AKind.LONG

    def _element(self, value: Any) -> Any:
        if isinstance(value, str):
            return self.field.from_string(value)
        return value

    def _mul_by_a(self, value: Any) -> Any:
        f = self.field
        kind = self._a_kind
        if kind is _AKind.ZERO:
            return f.zero
        if kind is _AKind.ONE:
            return value
        if kind is _AKind.NEG_ONE:
            return f.neg(value)
        return f.mul(self.a, value)

    @staticmethod
    def _check(p: Any) -> None:
        if not isinstance(p, (Point, PointAffine)):
            raise TypeError(f"not a curve point: {p!r}")

    def is_zero(self, p: AnyPoint) -> bool:
        """True for the point at infinity."""
        self._check(p)
        if isinstance(p, Point):
            return self.field.is_zero(p.zz)
        return self.field.is_zero(p.x) and self.field.is_zero(p.y)

    def to_projective(self, p: AnyPoint) -> Point:
        self._check(p)
        if isinstance(p, Point):
            return p
        if self.is_zero(p):
            return self.zero
        f = self.field
        return Point(p.x, p.y, f.one, f.one)

    def to_affine(self, p: AnyPoint) -> PointAffine:
        self._check(p)
        if isinstance(p, PointAffine):
            return p
        if self.is_zero(p):
            return self.zero_affine
        f = self.field
        return PointAffine(f.div(p.x, p.zz), f.div(p.y, p.zzz))

    def add(self, p1: AnyPoint, p2: AnyPoint) -> Point:
        """Sum of two points of either form, in projective form."""
        self._check(p1)
        self._check(p2)
        if isinstance(p1, Point):
            if isinstance(p2, Point):
                return self._add_projective(p1, p2)
            return self._add_mixed(p1, p2)
        if isinstance(p2, Point):
            return self._add_mixed(p2, p1)
        return self._add_affine(p1, p2)

    def _add_projective(self, p1: Point, p2: Point) -> Point:
        if self.is_zero(p1):
            return p2
        if self.is_zero(p2):
            return p1
        f = self.field
        u1 = f.mul(p1.x, p2.zz)
        u2 = f.mul(p2.x, p1.zz)
        s1 = f.mul(p1.y, p2.zzz)
        s2 = f.mul(p2.y, p1.zzz)
        p = f.sub(u2, u1)
        r = f.sub(s2, s1)
        if f.is_zero(p) and f.is_zero(r):
            return self._dbl_projective(p1)
        pp = f.square(p)
        ppp = f.mul(p, pp)
        q = f.mul(u1, pp)
        x3 = f.sub(f.sub(f.sub(f.square(r), ppp), q), q)
        y3 = f.sub(f.mul(f.sub(q, x3), r), f.mul(s1, ppp))
        zz3 = f.mul(f.mul(p1.zz, p2.zz), pp)
        zzz3 = f.mul(f.mul(p1.zzz, p2.zzz), ppp)
        return Point(x3, y3, zz3, zzz3)

    def _add_mixed(self, p1: Point, p2: PointAffine) -> Point:
        if self.is_zero(p1):
            return self.to_projective(p2)
        if self.is_zero(p2):
            return p1
        f = self.field
        u2 = f.mul(p2.x, p1.zz)
        s2 = f.mul(p2.y, p1.zzz)
        p = f.sub(u2, p1.x)
        r = f.sub(s2, p1.y)
        if f.is_zero(p) and f.is_zero(r):
            return self._dbl_affine(p2)
        pp = f.square(p)
        ppp = f.mul(p, pp)
        q = f.mul(p1.x, pp)
        x3 = f.sub(f.sub(f.sub(f.square(r), ppp), q), q)
        y3 = f.sub(f.mul(f.sub(q, x3), r), f.mul(p1.y, ppp))
        return Point(x3, y3, f.mul(p1.zz, pp), f.mul(p1.zzz, ppp))

    def _add_affine(self, p1: PointAffine, p2: PointAffine) -> Point:
        if self.is_zero(p1):
            return self.to_projective(p2)
        if self.is_zero(p2):
            return self.to_projective(p1)
        f = self.field
        p = f.sub(p2.x, p1.x)
        r = f.sub(p2.y, p1.y)
        if f.is_zero(p) and f.is_zero(r):
            return self._dbl_affine(p2)
        pp = f.square(p)
        ppp = f.mul(p, pp)
        q = f.mul(p1.x, pp)
        x3 = f.sub(f.sub(f.sub(f.square(r), ppp), q), q)
        y3 = f.sub(f.mul(f.sub(q, x3), r), f.mul(p1.y, ppp))
        return Point(x3, y3, pp, ppp)

    def sub(self, p1: AnyPoint, p2: AnyPoint) -> Point:
        return self.add(p1, self.neg(p2))

    def dbl(self, p: AnyPoint) -> Point:
        """Twice ``p``, in projective form."""
        self._check(p)
        if isinstance(p, Point):
            return self._dbl_projective(p)
        return self._dbl_affine(p)

    def _dbl_projective(self, p: Point) -> Point:
        if self.is_zero(p):
            return p
        f = self.field
        u = f.add(p.y, p.y)
        v = f.square(u)
        w = f.mul(u, v)
        s = f.mul(p.x, v)
        xx = f.square(p.x)
        m = f.add(xx, f.add(xx, xx))
        if self._a_kind is not _AKind.ZERO:
            m = f.add(m, self._mul_by_a(f.square(p.zz)))
        x3 = f.sub(f.sub(f.square(m), s), s)
        y3 = f.sub(f.mul(m, f.sub(s, x3)), f.mul(w, p.y))
        return Point(x3, y3, f.mul(v, p.zz), f.mul(w, p.zzz))

    def _dbl_affine(self, p: PointAffine) -> Point:
        if self.is_zero(p):
            return self.zero
        f = self.field
        u = f.add(p.y, p.y)
        v = f.square(u)
        w = f.mul(u, v)
        s = f.mul(p.x, v)
        xx = f.square(p.x)
        m = f.add(f.add(xx, f.add(xx, xx)), self.a)
        x3 = f.sub(f.sub(f.square(m), s), s)
        y3 = f.sub(f.mul(m, f.sub(s, x3)), f.mul(w, p.y))
        return Point(x3, y3, v, w)

    def neg(self, p: AnyPoint) -> AnyPoint:
        """The opposite of ``p``, in the same form as ``p``."""
        self._check(p)
        f = self.field
        if isinstance(p, Point):
            return Point(p.x, f.neg(p.y), p.zz, p.zzz)
        return PointAffine(p.x, f.neg(p.y))

    def eq(self, p1: AnyPoint, p2: AnyPoint) -> bool:
        """True when both arguments stand for the same curve point."""
        self._check(p1)
        self._check(p2)
        f = self.field
        if isinstance(p1, PointAffine) and isinstance(p2, PointAffine):
            return f.eq(p1.x, p2.x) and f.eq(p1.y, p2.y)
        if isinstance(p1, PointAffine):
            p1, p2 = p2, p1
        if self.is_zero(p1):
            return self.is_zero(p2)
        if self.is_zero(p2):
            return False
        if isinstance(p2, PointAffine):
            u1, s1 = p1.x, p1.y
            u2 = f.mul(p2.x, p1.zz)
            s2 = f.mul(p2.y, p1.zzz)
        else:
            u1 = f.mul(p1.x, p2.zz)
            u2 = f.mul(p2.x, p1.zz)
            s1 = f.mul(p1.y, p2.zzz)
            s2 = f.mul(p2.y, p1.zzz)
        return f.is_zero(f.sub(u2, u1)) and f.is_zero(f.sub(s2, s1))

    def to_string(self, p: AnyPoint, radix: int = 10) -> str:
        """``"(x,y)"`` of the affine form of ``p``."""
        affine = self.to_affine(p)
        f = self.field
        return f"({f.to_string(affine.x, radix)},{f.to_string(affine.y, radix)})"

    def mul_by_scalar(self, base: AnyPoint, scalar: Union[int, bytes]) -> Point:
        """``scalar * base``; the scalar is an integer or little-endian bytes."""
        self._check(base)
        return naf_mul_by_scalar(self, base, scalar)

    def multi_mul_by_scalar(
        self,
        bases: Sequence[AnyPoint],
        scalars: bytes,
        scalar_size: int = 32,
        n_threads: int = 0,
    ) -> Point:
        """Sum of ``scalar_i * base_i`` by the bucket multi-exponentiation."""
        return ParallelMultiexp(self).multiexp(bases, scalars, scalar_size, n_threads)

    def multi_mul_by_scalar_msm(
        self,
        bases: Sequence[AnyPoint],
        scalars: bytes,
        scalar_size: int = 32,
        n_threads: int = 0,
    ) -> Point:
        """Sum of ``scalar_i * base_i`` by signed-digit bucket windows."""
        return MSM(self).run(bases, scalars, scalar_size, n_threads)