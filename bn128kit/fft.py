"""Radix-2 number-theoretic transform over a prime field."""

from __future__ import annotations

from typing import Any, List, Sequence


def _bit_reverse(x: int, bits: int) -> int:
    if bits == 0:
        return 0
    return int(format(x, f"0{bits}b")[::-1], 2)


class FFT:
    """Forward and inverse transforms over power-of-two domains of ``field``.

    ``field`` is a prime field with integer elements in normal form, providing
    ``q``, ``one``, ``from_int``, ``add``, ``sub``, ``mul``, ``inv``, ``exp``
    and ``eq``.
    """

    def __init__(self, field: Any, max_domain_size: int) -> None:
        self.field = field
        domain_pow = self.log2(max_domain_size)
        q = field.q
        if q < 3:
            raise ValueError("the field must have an odd prime modulus")

        qm1d2 = (q - 1) // 2
        nqr = 2
        while pow(nqr, qm1d2, q) == 1:
            nqr += 1
            if nqr >= q:
                raise ValueError("no quadratic non-residue in the field")
        self.nqr = field.from_int(nqr)

        s = 1
        aux = qm1d2
        while aux % 2 == 0 and s < domain_pow:
            aux //= 2
            s += 1
        if s < domain_pow:
            raise ValueError("Domain size too big for the curve")
        self.s = s

        n_roots = 1 << s
        w = field.exp(self.nqr, aux)
        roots = [field.one]
        current = field.one
        for _ in range(1, n_roots):
            current = field.mul(current, w)
            roots.append(current)
        if not field.eq(field.mul(roots[-1], w), field.one):
            raise ValueError("root of unity has the wrong order")
        self._roots: List[Any] = roots

        two_inv = field.inv(field.from_int(2))
        pow_two_inv = [field.one]
        for _ in range(s):
            pow_two_inv.append(field.mul(pow_two_inv[-1], two_inv))
        self._pow_two_inv: List[Any] = pow_two_inv

    @staticmethod
    def log2(n: int) -> int:
        """Floor of the base-2 logarithm of a positive ``n``."""
        if n <= 0:
            raise ValueError("log2 needs a positive number")
        return n.bit_length() - 1

    def root(self, domain_pow: int, idx: int) -> Any:
        """The ``idx``-th power of the primitive ``2**domain_pow``-th root of unity."""
        if not 0 <= domain_pow <= self.s:
            raise ValueError(f"domain power {domain_pow} out of range 0..{self.s}")
        return self._roots[idx << (self.s - domain_pow)]

    def _domain_pow(self, n: int) -> int:
        if n == 0:
            raise ValueError("cannot transform an empty sequence")
        domain_pow = self.log2(n)
        if 1 << domain_pow != n:
            raise ValueError(f"length {n} is not a power of two")
        if domain_pow > self.s:
            raise ValueError(f"length {n} exceeds the prepared domain")
        return domain_pow

    def fft(self, a: Sequence[Any]) -> List[Any]:
        """Evaluations of the polynomial with coefficients ``a`` on the domain."""
        f = self.field
        n = len(a)
        domain_pow = self._domain_pow(n)
        values = list(a)
        out = [values[_bit_reverse(i, domain_pow)] for i in range(n)]
        for s in range(1, domain_pow + 1):
            m = 1 << s
            half = m >> 1
            twiddles = [self.root(s, j) for j in range(half)]
            for k in range(0, n, m):
                for j, w in enumerate(twiddles):
                    t = f.mul(w, out[k + j + half])
                    u = out[k + j]
                    out[k + j] = f.add(t, u)
                    out[k + j + half] = f.sub(u, t)
        return out

    def ifft(self, a: Sequence[Any]) -> List[Any]:
        """Inverse of ``fft``."""
        f = self.field
        n = len(a)
        domain_pow = self._domain_pow(n)
        out = self.fft(a)
        scale = self._pow_two_inv[domain_pow]
        half = n >> 1
        for i in range(1, half):
            r = n - i
            out[i], out[r] = f.mul(out[r], scale), f.mul(out[i], scale)
        out[0] = f.mul(out[0], scale)
        if half:
            out[half] = f.mul(out[half], scale)
        return out