import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from enum import Enum


class RoundingPolicy(str, Enum):
    NEAREST_INTEGER = "nearest_integer"
    TWO_SIG_FIGS = "two_sig_figs"

    @classmethod
    def parse(cls, name: str) -> "RoundingPolicy":
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown rounding policy {name!r} (expected one of: {choices})") from None


# two_sig_figs keeps two digits after the decimal point (hundredths of a percent)
_QUANTUM = {
    RoundingPolicy.NEAREST_INTEGER: Decimal("1"),
    RoundingPolicy.TWO_SIG_FIGS: Decimal("0.01"),
}


def round_pct(value: float, policy: RoundingPolicy = RoundingPolicy.TWO_SIG_FIGS) -> float:
    """Round a percentage under ``policy``, ties away from zero.

    Goes through the shortest repr of the float so 87.125 rounds to 87.13
    on every platform instead of depending on its binary expansion.
    """
    value = float(value)
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    quantum = _QUANTUM[policy]
    with localcontext() as ctx:
        # integer digits plus kept fraction digits must fit in the precision
        ctx.prec = max(ctx.prec, exact.adjusted() - quantum.as_tuple().exponent + 2)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)
