import logging
import math
import sys

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_TICK_COUNT = 10

# Geometric means of neighbouring nice multipliers 1, 2, 5 and 10.
SQRT_50 = math.sqrt(50)
SQRT_10 = math.sqrt(10)
SQRT_2 = math.sqrt(2)

# Steps are limited to normal floats; subnormal spans get no step even where
# 1 / 10 ** -power would still be representable.
MIN_POWER = sys.float_info.min_10_exp


def _nice_multiplier(fraction: float) -> int:
    """Snap a normalised step in [1, 10) to the closest of 1, 2, 5, 10 in log space."""
    if fraction >= SQRT_50:
        return 10
    if fraction >= SQRT_10:
        return 5
    if fraction >= SQRT_2:
        return 2
    return 1


def _nice_parts(start: float, stop: float, count: float) -> tuple[int, int] | None:
    """Return (multiplier, power) of the nice step for start < stop, or None if out of range."""
    raw_step = (stop - start) / count
    if not np.isfinite(raw_step) or raw_step <= 0:
        logger.debug("No finite step for start=%r stop=%r count=%r", start, stop, count)
        return None

    power = int(np.floor(np.log10(raw_step)))
    if power < MIN_POWER:
        logger.debug("Step %r underflows the float range", raw_step)
        return None

    fraction = raw_step / 10.0 ** power
    return _nice_multiplier(fraction), power


def tick_increment(start: float, stop: float, count: float = DEFAULT_TICK_COUNT) -> float:
    """
    Increment used to enumerate ticks between start and stop, with start <= stop.

    A positive result is the step itself. A negative result -k means the step is
    1 / k; tick i is then i / k, which is exact for integer i because k is an
    integer-valued float.
    """
    if start == stop or count <= 0:
        return 0.0

    parts = _nice_parts(start, stop, count)
    if parts is None:
        return math.nan

    multiplier, power = parts
    if power >= 0:
        return multiplier * 10.0 ** power
    return -(10 ** -power) / multiplier


def compute_step(start: float, stop: float, count: float = DEFAULT_TICK_COUNT) -> float:
    """
    Nice spacing between ticks for the interval [start, stop].

    The magnitude is 1, 2, 5 or 10 times a power of ten; the sign follows the
    direction of the interval. Returns 0.0 when start == stop or count <= 0 and
    nan when no finite step exists.
    """
    if start == stop or count <= 0:
        return 0.0

    reverse = stop < start
    if reverse:
        start, stop = stop, start

    parts = _nice_parts(start, stop, count)
    if parts is None:
        return math.nan

    multiplier, power = parts
    if power < 0:
        # Integer divisor keeps 0.005 from becoming 0.004999999999999999.
        step = multiplier / 10 ** -power
    else:
        step = multiplier * 10.0 ** power
    return -step if reverse else step
