import numpy as np

from axisticks.step import DEFAULT_TICK_COUNT, compute_step, tick_increment


def ticks(start: float, stop: float, count: float = DEFAULT_TICK_COUNT) -> list[float]:
    """
    Generate nicely rounded tick values spanning [start, stop].

    Roughly count + 1 values are returned, spaced by the step of tick_step().
    The values keep the direction of the interval, descending when stop < start.
    Each value is computed from an integer index, so 0.15 comes out as 0.15.
    """
    if start == stop and count > 0:
        return [float(start)]

    reverse = stop < start
    lo, hi = (stop, start) if reverse else (start, stop)

    increment = tick_increment(lo, hi, count)
    if increment == 0 or not np.isfinite(increment):
        return []

    if increment > 0:
        first = np.ceil(lo / increment)
        last = np.floor(hi / increment)
        n = max(int(last - first + 1), 0)
        values = (first + np.arange(n)) * increment
    else:
        inverse = -increment
        first = np.floor(lo * inverse)
        last = np.ceil(hi * inverse)
        n = max(int(last - first + 1), 0)
        values = (first + np.arange(n)) / inverse

    # Steps below the float resolution of the interval map neighbouring indices to one value.
    distinct = np.ones(len(values), dtype=bool)
    distinct[1:] = values[1:] != values[:-1]
    values = values[distinct]

    if reverse:
        values = values[::-1]

    return values.tolist()


def tick_step(start: float, stop: float, count: float = DEFAULT_TICK_COUNT) -> float:
    """Spacing between the ticks ticks() would return, signed like stop - start."""
    return compute_step(start, stop, count)
