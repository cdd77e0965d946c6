"""
Discrete distribution families.

Bernoulli-type counts, Poisson-type counts, draws from finite weighted
supports and the Zipf–Mandelbrot rejection sampler.

Notes
-----
- Weight vectors must be non-negative but need not sum to one.
- A weight vector that cannot produce an outcome raises
  :class:`~pysatl_prob.distributions.exceptions.InvalidProbabilityVectorError`
  at sampling time.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from pysatl_prob.distributions.distribution import Distribution, replicate
from pysatl_prob.distributions.exceptions import (
    InvalidProbabilityVectorError,
    RejectionLimitExceededError,
)
from pysatl_prob.families.primitives import gamma, uniform, uniform_range

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from pysatl_prob.random.source import RandomSource
    from pysatl_prob.types import WeightedValues, Weights

logger = logging.getLogger(__name__)

_INVALID_VECTOR = "invalid probability vector"


def bernoulli(p: float) -> Distribution[bool]:
    """The Bernoulli distribution with success probability ``p``: ``uniform() < p``."""
    return uniform().map(lambda u: u < p).named("bernoulli")


def binomial(n: int, p: float) -> Distribution[int]:
    """
    The binomial distribution with ``n`` trials and success probability ``p``.

    Counts the successes of ``n`` independent Bernoulli draws, so sampling
    costs ``n`` uniform variates.
    """
    return replicate(n, bernoulli(p)).map(lambda trials: sum(trials)).named("binomial")


def poisson(rate: float) -> Distribution[int]:
    """
    The Poisson distribution with the provided (positive) rate.

    The source builds, or fetches from its cache, an alias table for ``rate``
    and draws one outcome from it.
    """

    def sampler(source: RandomSource) -> int:
        table = source.build_alias_table(rate)
        return source.draw_from_table(table)

    return Distribution(sampler, name="poisson")


def negative_binomial(n: float, p: float) -> Distribution[int]:
    """
    The negative binomial distribution as a gamma–Poisson mixture.

    ``y ~ gamma(n, (1 - p) / p)`` is drawn first, then ``poisson(y)``.
    """
    return gamma(float(n), (1.0 - p) / p).bind(poisson).named("negative_binomial")


def discrete_uniform[T](values: Iterable[T]) -> Distribution[T]:
    """The uniform distribution over a finite collection of values."""
    items = list(values)
    return uniform_range(0, len(items) - 1).map(lambda j: items[j]).named("discrete_uniform")


def _cumulative(weights: Weights) -> tuple[np.ndarray, float]:
    w = np.asarray(list(weights), dtype=np.float64)
    return np.cumsum(w), float(w.sum())


def _first_exceeding(cumulative: np.ndarray, z: float) -> int:
    hits = np.flatnonzero(cumulative > z)
    if hits.size == 0:
        raise InvalidProbabilityVectorError(_INVALID_VECTOR)
    return int(hits[0])


def multinomial(n: int, weights: Weights) -> Distribution[list[int]]:
    """
    ``n`` independent category draws from unnormalised weights.

    Each draw picks ``z ~ U(0, total)`` and returns the first category whose
    cumulative weight exceeds ``z``.

    Parameters
    ----------
    n : int
        Number of trials.
    weights : Iterable[float]
        Non-negative category weights, not necessarily normalised.

    Returns
    -------
    Distribution[list[int]]
        Category index of each trial, in draw order.

    Raises
    ------
    InvalidProbabilityVectorError
        At sampling time, if no cumulative weight exceeds the drawn value
        (empty vector, or no positive weight).
    """
    cumulative, total = _cumulative(weights)

    def _trial(source: RandomSource) -> int:
        z = source.uniform_range(0.0, total)
        return _first_exceeding(cumulative, z)

    return replicate(n, Distribution(_trial)).named("multinomial")


def categorical(weights: Weights) -> Distribution[int]:
    """
    A single category index drawn in proportion to ``weights``.

    Raises
    ------
    InvalidProbabilityVectorError
        At sampling time, for weight vectors that cannot produce an outcome.
    """

    def _single(draws: list[int]) -> int:
        if len(draws) != 1:
            raise InvalidProbabilityVectorError(_INVALID_VECTOR)
        return draws[0]

    return multinomial(1, weights).map(_single).named("categorical")


def discrete[T](weighted_values: WeightedValues[T]) -> Distribution[T]:
    """
    A distribution over a finite support given as ``(weight, value)`` pairs.

    Weights are non-negative and need not sum to one.
    """
    pairs = list(weighted_values)
    weights = [w for w, _ in pairs]
    values: Sequence[T] = [v for _, v in pairs]
    return categorical(weights).map(lambda idx: values[idx]).named("discrete")


def zipf(a: float, max_iterations: int | None = None) -> Distribution[int]:
    """
    The Zipf–Mandelbrot distribution with exponent ``a``.

    Rejection sampler: each attempt draws ``u`` then ``v`` from ``U(0, 1)``,
    proposes ``x = floor(u ** (-1 / (a - 1)))`` and accepts when
    ``v * x * (t - 1) / (b - 1) <= t / b`` with ``t = (1 + 1/x) ** (a - 1)``
    and ``b = 2 ** (a - 1)``. Proposals that overflow are rejected. For
    ``a < 1`` every proposal floors to ``0``, which is accepted at once.

    Parameters
    ----------
    a : float
        Exponent, positive and different from one. Values close to one make
        the sampler very slow.
    max_iterations : int, optional
        Upper bound on the number of attempts per sample. ``None`` leaves the
        loop unbounded.

    Returns
    -------
    Distribution[int]

    Raises
    ------
    ValueError
        If ``a`` equals one.
    RejectionLimitExceededError
        At sampling time, if ``max_iterations`` attempts were all rejected.
    """
    if a == 1.0:
        raise ValueError("Zipf exponent must differ from 1.")
    b = 2.0 ** (a - 1.0)
    exponent = -1.0 / (a - 1.0)

    def sampler(source: RandomSource) -> int:
        attempts = 0
        while max_iterations is None or attempts < max_iterations:
            attempts += 1
            u = source.uniform()
            v = source.uniform()
            with np.errstate(over="ignore", divide="ignore"):
                proposal = float(np.power(u, exponent))
            if not math.isfinite(proposal):
                continue
            x = math.floor(proposal)
            if x == 0:
                # t -> 0 as x -> 0, the acceptance test reduces to 0 <= 0
                return 0
            t = (1.0 + 1.0 / x) ** (a - 1.0)
            if v * x * (t - 1.0) / (b - 1.0) <= t / b:
                if attempts > 1:
                    logger.debug("zipf(%s) accepted after %d attempts", a, attempts)
                return x
        logger.debug("zipf(%s) gave up after %d attempts", a, attempts)
        raise RejectionLimitExceededError(attempts)

    return Distribution(sampler, name="zipf")


__all__ = [
    "bernoulli",
    "binomial",
    "poisson",
    "negative_binomial",
    "discrete_uniform",
    "multinomial",
    "categorical",
    "discrete",
    "zipf",
]
