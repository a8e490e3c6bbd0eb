from __future__ import annotations

import math
from typing import Union

LooseNumber = Union[int, float, str, None]


def to_text(value: LooseNumber) -> str:
    """Render a number-or-string provider field as text."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)
