"""Non-adjacent form of little-endian scalars."""


def build_naf(scalar: bytes) -> list[int]:
    """Return the non-adjacent form of a little-endian ``scalar``.

    The result lists digits in {-1, 0, 1}, least significant first, padded
    with zeros to ``(len(scalar) + 2) * 8`` digits.
    """
    value = int.from_bytes(bytes(scalar), "little")
    length = (len(scalar) + 2) * 8
    digits: list[int] = []
    while value:
        if value & 1:
            digit = 2 - (value & 3)
            value -= digit
        else:
            digit = 0
        digits.append(digit)
        value >>= 1
    digits.extend([0] * (length - len(digits)))
    return digits