# fping_stats/stats/rounding.py
import math
from decimal import ROUND_HALF_UP, Context, Decimal

# wide enough to quantize any finite double without signalling
_CTX = Context(prec=1100, rounding=ROUND_HALF_UP)


def to_fixed(value: float, digits: int = 3) -> float:
    """
    Round to `digits` decimal places the way fixed-point formatting does:
    the exact binary value is rounded half away from zero, so 1.005 -> 1.0
    (it is really 1.00499...) while 0.125 -> 0.13.
    """
    if not math.isfinite(value):
        return value
    step = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(step, context=_CTX))
