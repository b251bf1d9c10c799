"""Nicely rounded tick values for axes and grid-lines."""

from .step import DEFAULT_TICK_COUNT, compute_step, tick_increment
from .ticks import ticks, tick_step

__all__ = [
    "DEFAULT_TICK_COUNT",
    "compute_step",
    "tick_increment",
    "ticks",
    "tick_step",
]
