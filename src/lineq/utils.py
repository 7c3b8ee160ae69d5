"""Float arithmetic with IEEE semantics.

Python raises on 1.0 / 0 and returns complex numbers for (-8) ** (1 / 3). We want inf / nan instead,
the same values a C double would give, so these go through numpy with its warnings silenced.
"""

import numpy as np


def divide(numerator: float, denominator: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def power(base: float, exponent: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.power(np.float64(base), np.float64(exponent)))
