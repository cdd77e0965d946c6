"""
Core Type Definitions
=====================

Fundamental type aliases used throughout PySATL Prob.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable, Iterable


type Weights = Iterable[float]
"""Non-negative, not necessarily normalised, category weights."""

type WeightedValues[T] = Iterable[tuple[float, T]]
"""``(weight, value)`` pairs describing a finite discrete distribution."""

type Effect[T] = Callable[[], T]
"""Zero-argument effectful action that can be interleaved with draws."""


__all__ = [
    "Weights",
    "WeightedValues",
    "Effect",
]
