"""
Sampling Interfaces
===================

This module drives draws of a distribution through a single random source:

- :func:`sample` – one draw chain;
- :func:`sample_n` – ``n`` sequential independent draws.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pysatl_prob.distributions.distribution import Distribution
    from pysatl_prob.random.source import RandomSource


def sample[T](dist: Distribution[T], source: RandomSource) -> T:
    """
    Draw once from ``dist``.

    Every call re-executes the full sampling procedure; nothing is cached.
    """
    return dist.sample(source)


def sample_n[T](n: int, dist: Distribution[T], source: RandomSource) -> list[T]:
    """
    Draw ``n`` independent values from ``dist``, in call order.

    Parameters
    ----------
    n : int
        Number of draws; ``0`` yields an empty list.
    dist : Distribution[T]
        Distribution to sample.
    source : RandomSource
        Source shared by all draws; draw ``0`` consumes its randomness first.

    Returns
    -------
    list[T]
        Exactly ``n`` values.

    Raises
    ------
    ValueError
        If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"Number of samples must be non-negative, got {n}.")
    return [dist.sample(source) for _ in range(n)]


__all__ = [
    "sample",
    "sample_n",
]
