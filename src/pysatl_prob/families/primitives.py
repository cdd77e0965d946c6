"""
Primitive distribution constructors.

Each constructor wraps one random-source primitive directly. Parameters are
not validated; see the individual docstrings for the expected ranges.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import overload

from pysatl_prob.distributions.distribution import Distribution


def uniform() -> Distribution[float]:
    """The uniform distribution over the unit interval ``[0, 1)``."""
    return Distribution(lambda source: source.uniform(), name="uniform")


@overload
def uniform_range(lo: int, hi: int) -> Distribution[int]: ...
@overload
def uniform_range(lo: float, hi: float) -> Distribution[float]: ...


def uniform_range(lo: float, hi: float) -> Distribution[float]:
    """
    The uniform distribution over the provided interval.

    Integer bounds give the integers in ``[lo, hi]``; any float bound gives
    reals in ``[lo, hi)``.
    """
    return Distribution(lambda source: source.uniform_range(lo, hi), name="uniform_range")


def standard_normal() -> Distribution[float]:
    """The normal distribution with mean 0 and standard deviation 1."""
    return Distribution(lambda source: source.standard_normal(), name="standard_normal")


def normal(mean: float, sd: float) -> Distribution[float]:
    """
    The normal distribution with given mean and standard deviation.

    ``sd`` should be positive.
    """
    return standard_normal().map(lambda z: mean + sd * z).named("normal")


def gamma(shape: float, scale: float) -> Distribution[float]:
    """
    The gamma distribution with shape ``a`` and scale ``b``.

    Density ``f(x; a, b) = x^(a-1) e^(-x/b) / (Gamma(a) b^a)``. Both parameters
    should be positive.
    """
    return Distribution(lambda source: source.gamma(shape, scale), name="gamma")


def chi_square(k: float) -> Distribution[float]:
    """The chi-square distribution with ``k`` (> 0) degrees of freedom."""
    return Distribution(lambda source: source.chi_square(k), name="chi_square")


def exponential(rate: float) -> Distribution[float]:
    """The exponential distribution with the provided (positive) rate."""
    return Distribution(lambda source: source.exponential(rate), name="exponential")


__all__ = [
    "uniform",
    "uniform_range",
    "standard_normal",
    "normal",
    "gamma",
    "chi_square",
    "exponential",
]
