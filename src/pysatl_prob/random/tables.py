"""
Alias Tables
============

Precomputed lookup tables for O(1) sampling from a fixed finite discrete
distribution (Vose's variant of Walker's alias method).

- :class:`AliasTable` – immutable table mapping one uniform variate to an
  outcome.
- :class:`AliasTableConfig` – truncation and caching settings used when
  building Poisson tables.
- :func:`build_alias_table` – builds a table from a probability vector.
- :func:`poisson_table` – builds a table for a Poisson distribution of a
  given rate.

Notes
-----
- The Poisson support is unbounded; it is truncated to
  ``rate ± (tail_sigmas * sqrt(rate) + min_half_width)`` and the remaining
  probability mass is renormalised.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from scipy.stats import poisson

if TYPE_CHECKING:
    from typing import Any

    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AliasTableConfig:
    """
    Configuration for Poisson alias tables.

    Parameters
    ----------
    tail_sigmas : float, default 12.0
        Half-width of the truncated support in standard deviations.
    min_half_width : int, default 10
        Absolute half-width added on top of ``tail_sigmas * sqrt(rate)`` so
        that small rates keep a usable support.
    cache_size : int, default 128
        Number of built tables a source keeps per rate. ``0`` disables
        caching.
    """

    tail_sigmas: float = 12.0
    min_half_width: int = 10
    cache_size: int = 128


@dataclass(frozen=True, slots=True)
class AliasTable:
    """
    Alias table over the outcomes ``offset, offset + 1, ..., offset + size - 1``.

    Parameters
    ----------
    offset : int
        Outcome represented by column ``0``.
    probabilities : numpy.ndarray
        Acceptance threshold of each column, in ``[0, 1]``.
    aliases : numpy.ndarray
        Column used when the threshold rejects.
    """

    offset: int
    probabilities: npt.NDArray[np.floating[Any]]
    aliases: npt.NDArray[np.integer[Any]]

    def __len__(self) -> int:
        return int(self.probabilities.shape[0])

    def lookup(self, u: float) -> int:
        """
        Map a unit variate ``u`` in ``[0, 1)`` to an outcome.

        The integer part of ``u * size`` selects a column, the fractional part
        decides between the column and its alias, so one variate is enough.
        """
        size = len(self)
        scaled = u * size
        column = min(int(scaled), size - 1)
        if scaled - column < self.probabilities[column]:
            return self.offset + column
        return self.offset + int(self.aliases[column])


def build_alias_table(weights: npt.ArrayLike, offset: int = 0) -> AliasTable:
    """
    Build an alias table from non-negative weights.

    Parameters
    ----------
    weights : array_like
        Non-negative weights; normalised internally.
    offset : int, default 0
        Outcome associated with the first weight.

    Returns
    -------
    AliasTable

    Raises
    ------
    ValueError
        If ``weights`` is empty or sums to zero.
    """
    p = np.asarray(weights, dtype=np.float64).ravel()
    total = float(p.sum()) if p.size else 0.0
    if p.size == 0 or not total > 0.0:
        raise ValueError("Alias table requires at least one positive weight.")

    size = p.size
    scaled = p * (size / total)
    probabilities = np.ones(size, dtype=np.float64)
    aliases = np.arange(size, dtype=np.int64)

    small = [i for i in range(size) if scaled[i] < 1.0]
    large = [i for i in range(size) if scaled[i] >= 1.0]

    while small and large:
        s = small.pop()
        g = large.pop()
        probabilities[s] = scaled[s]
        aliases[s] = g
        scaled[g] = (scaled[g] + scaled[s]) - 1.0
        if scaled[g] < 1.0:
            small.append(g)
        else:
            large.append(g)

    # leftovers are 1 up to rounding
    for i in large + small:
        probabilities[i] = 1.0

    return AliasTable(offset=offset, probabilities=probabilities, aliases=aliases)


def poisson_table(rate: float, config: AliasTableConfig | None = None) -> AliasTable:
    """
    Build the alias table of a Poisson distribution.

    Parameters
    ----------
    rate : float
        Poisson rate. A rate of ``0`` yields the point mass at ``0``.
    config : AliasTableConfig, optional
        Truncation settings; defaults to :class:`AliasTableConfig()`.

    Returns
    -------
    AliasTable
    """
    cfg = AliasTableConfig() if config is None else config
    half_width = cfg.tail_sigmas * math.sqrt(max(rate, 0.0)) + cfg.min_half_width
    left = max(0, math.floor(rate - half_width))
    right = max(left, math.ceil(rate + half_width))

    support = np.arange(left, right + 1)
    pmf = poisson.pmf(support, rate)
    table = build_alias_table(pmf, offset=left)

    logger.debug("Built Poisson alias table: rate=%s, support=[%d, %d]", rate, left, right)
    return table


__all__ = [
    "AliasTable",
    "AliasTableConfig",
    "build_alias_table",
    "poisson_table",
]
