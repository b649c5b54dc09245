"""Arithmetic in a prime field, with elements held as integers in normal form."""

from __future__ import annotations

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


class PrimeField:
    """The field of integers modulo a prime ``modulus``."""

    def __init__(self, modulus: int) -> None:
        if modulus < 2:
            raise ValueError("modulus must be at least 2")
        self.q = modulus
        self.n_bits = modulus.bit_length()
        self.n64 = (self.n_bits + 63) // 64
        self.n8 = self.n64 * 8
        self.mask = (1 << self.n_bits) - 1
        self._r = (1 << (64 * self.n64)) % modulus

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1 % self.q

    @property
    def neg_one(self) -> int:
        return self.q - 1

    def _norm(self, a: int) -> int:
        return a % self.q

    def from_string(self, s: str, radix: int = 10) -> int:
        """Parse ``s`` in base ``radix``; negative values wrap around the modulus."""
        return int(s.strip(), radix) % self.q

    def to_string(self, a: int, radix: int = 10) -> str:
        if not 2 <= radix <= len(_DIGITS):
            raise ValueError(f"unsupported radix {radix}")
        value = self._norm(a)
        if value == 0:
            return "0"
        out = []
        while value:
            value, digit = divmod(value, radix)
            out.append(_DIGITS[digit])
        return "".join(reversed(out))

    def from_int(self, v: int) -> int:
        return v % self.q

    def from_bytes(self, data: bytes) -> int:
        """Read a little-endian integer and reduce it into the field."""
        return int.from_bytes(bytes(data), "little") % self.q

    def to_bytes(self, a: int, size: int | None = None) -> bytes:
        """Little-endian encoding, ``n8`` bytes long unless ``size`` is given."""
        return self._norm(a).to_bytes(self.n8 if size is None else size, "little")

    def to_montgomery(self, a: int) -> int:
        return self._norm(a) * self._r % self.q

    def from_montgomery(self, a: int) -> int:
        return self._norm(a) * pow(self._r, -1, self.q) % self.q

    def add(self, a: int, b: int) -> int:
        return (a + b) % self.q

    def sub(self, a: int, b: int) -> int:
        return (a - b) % self.q

    def neg(self, a: int) -> int:
        return -a % self.q

    def mul(self, a: int, b: int) -> int:
        return a * b % self.q

    def square(self, a: int) -> int:
        return a * a % self.q

    def dbl(self, a: int) -> int:
        return 2 * a % self.q

    def inv(self, a: int) -> int:
        value = self._norm(a)
        if value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return pow(value, -1, self.q)

    def div(self, a: int, b: int) -> int:
        return self.mul(a, self.inv(b))

    def exp(self, a: int, e: int | bytes) -> int:
        """Raise ``a`` to ``e``, given as an integer or little-endian bytes."""
        if isinstance(e, (bytes, bytearray, memoryview)):
            e = int.from_bytes(bytes(e), "little")
        return pow(self._norm(a), e, self.q)

    def pow(self, a: int, b: int) -> int:
        return pow(self._norm(a), self._norm(b), self.q)

    def idiv(self, a: int, b: int) -> int:
        """Integer quotient of the normal representatives."""
        return self._norm(a) // self._norm(b)

    def mod(self, a: int, b: int) -> int:
        """Integer remainder of the normal representatives."""
        return self._norm(a) % self._norm(b)

    def _shift_left(self, a: int, k: int) -> int:
        r = (a << k) & self.mask
        return r - self.q if r >= self.q else r

    def shl(self, a: int, b: int) -> int:
        """Shift left; shifts above the field size count as negative shifts."""
        a, b = self._norm(a), self._norm(b)
        if b < self.n_bits:
            return self._shift_left(a, b)
        back = self.q - b
        return a >> back if back < self.n_bits else 0

    def shr(self, a: int, b: int) -> int:
        """Shift right; shifts above the field size count as negative shifts."""
        a, b = self._norm(a), self._norm(b)
        if b < self.n_bits:
            return a >> b
        back = self.q - b
        return self._shift_left(a, back) if back < self.n_bits else 0

    def is_zero(self, a: int) -> bool:
        return self._norm(a) == 0

    def is_one(self, a: int) -> bool:
        return self._norm(a) == self.one

    def eq(self, a: int, b: int) -> bool:
        return self._norm(a) == self._norm(b)