"""Splitting of parenthesised, comma separated element strings such as ``((1,2),(3,4))``."""

_SPACES = " \t\n\v\f\r"


def remove_pars(s: str) -> str:
    """Strip the parentheses that wrap ``s`` as a whole.

    Raises ValueError when the parentheses of ``s`` do not balance.
    """
    length = len(s)
    ns = 0
    while (
        ns < length
        and 2 * ns <= length
        and s[ns] == "("
        and s[length - 1 - ns] == ")"
    ):
        ns += 1

    depth = 0
    min_depth = 0
    for ch in s[ns:length - 2 * ns]:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        min_depth = min(min_depth, depth)

    cut = ns + min_depth
    if cut < 0:
        raise ValueError(f"unbalanced parentheses in {s!r}")
    if cut == 0:
        return s
    return s[cut:length - cut]


def _split_top_level(s: str) -> list[str]:
    parts: list[str] = []
    acc: list[str] = []
    depth = 0
    for ch in s:
        if ch in _SPACES:
            continue
        if ch == "," and depth == 0:
            parts.append(remove_pars("".join(acc)))
            acc = []
            continue
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        acc.append(ch)
    parts.append(remove_pars("".join(acc)))
    return parts


def split_par_str(s: str) -> list[str]:
    """Split ``s`` at its top-level commas, unwrapping enclosing parentheses.

    A string that wraps a single list is unwrapped until a level with more
    than one element is found. Raises ValueError when no such level exists.
    """
    current = s
    while True:
        parts = _split_top_level(current)
        if len(parts) > 1:
            return parts
        inner = remove_pars(parts[0])
        if inner == current:
            raise ValueError(f"no comma separated elements in {s!r}")
        current = inner