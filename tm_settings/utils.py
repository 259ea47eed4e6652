import math
import re

# leading decimal literal, as a tolerant float parser reads it: "12abc" -> 12, "abc" -> none
_FLOAT_PREFIX_RE = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)

def parse_float_prefix(s) -> float | None:
    """Parse the leading numeric prefix of ``s``; None when there is none."""
    if s is None:
        return None
    m = _FLOAT_PREFIX_RE.match(str(s))
    if not m:
        return None
    tok = m.group(1)
    if tok.lstrip("+-") == "Infinity":
        return -math.inf if tok.startswith("-") else math.inf
    return float(tok)

def number_or_default(value: str | None, default: float) -> float:
    if not value:
        return default
    parsed = parse_float_prefix(value)
    return default if parsed is None else parsed

def bool_or_default(value: str | None, default: bool) -> bool:
    """Only the literal TRUE (any case) is true; anything else non-empty is false."""
    if not value:
        return default
    return value.upper() == "TRUE"

def split_csv(s: str | None) -> list[str]:
    # "" still yields one empty element
    return [part.strip() for part in (s or "").split(",")]

def cell_str(v) -> str:
    return "" if v is None else str(v)
