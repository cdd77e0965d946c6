"""
Random Sources
==============

This module defines the protocol for the primitive draws every distribution
is built from, and a default implementation backed by NumPy:

- :class:`RandomSource` protocol – primitive variates consumed by
  distributions.
- :class:`NumpyRandomSource` – seedable implementation over
  :class:`numpy.random.Generator`.

Notes
-----
- A source is mutable. It must be used by one sequence of draws at a time;
  concurrent use needs external synchronisation.
- Distributions never own a source, they borrow it for one sample call.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache, partial
from typing import TYPE_CHECKING, Protocol, overload, runtime_checkable

import numpy as np

from pysatl_prob.random.tables import AliasTable, AliasTableConfig, poisson_table

if TYPE_CHECKING:
    from collections.abc import Callable


@runtime_checkable
class RandomSource(Protocol):
    """Primitive draws supplied to distributions."""

    def uniform(self) -> float:
        """Return a variate in ``[0, 1)``."""
        ...

    @overload
    def uniform_range(self, lo: int, hi: int) -> int: ...
    @overload
    def uniform_range(self, lo: float, hi: float) -> float: ...

    def uniform_range(self, lo: float, hi: float) -> float:
        """Return an int in ``[lo, hi]`` for int bounds, a float in ``[lo, hi)`` otherwise."""
        ...

    def standard_normal(self) -> float: ...

    def gamma(self, shape: float, scale: float) -> float: ...

    def exponential(self, rate: float) -> float: ...

    def chi_square(self, k: float) -> float: ...

    def build_alias_table(self, rate: float) -> AliasTable:
        """Return the Poisson alias table for ``rate``."""
        ...

    def draw_from_table(self, table: AliasTable) -> int:
        """Draw one outcome from ``table``."""
        ...


def _is_integral(value: object) -> bool:
    return isinstance(value, int | np.integer) and not isinstance(value, bool | np.bool_)


class NumpyRandomSource:
    """
    Random source backed by :class:`numpy.random.Generator`.

    Parameters
    ----------
    seed : int, numpy.random.Generator or None, default None
        Seed for a fresh PCG64 generator, or an existing generator to wrap.
        ``None`` draws entropy from the operating system.
    table_config : AliasTableConfig, optional
        Settings for Poisson alias tables built by this source.

    Attributes
    ----------
    generator : numpy.random.Generator
        Underlying bit generator wrapper.
    """

    def __init__(
        self,
        seed: int | np.random.Generator | None = None,
        table_config: AliasTableConfig | None = None,
    ) -> None:
        if isinstance(seed, np.random.Generator):
            self.generator = seed
        else:
            self.generator = np.random.default_rng(seed)
        self.table_config = AliasTableConfig() if table_config is None else table_config

        build = partial(poisson_table, config=self.table_config)
        self._build_table: Callable[[float], AliasTable]
        if self.table_config.cache_size > 0:
            self._build_table = lru_cache(maxsize=self.table_config.cache_size)(build)
        else:
            self._build_table = build

    def uniform(self) -> float:
        return float(self.generator.random())

    def uniform_range(self, lo: float, hi: float) -> float:
        if _is_integral(lo) and _is_integral(hi):
            return int(self.generator.integers(lo, hi, endpoint=True))
        return float(lo + (hi - lo) * self.generator.random())

    def standard_normal(self) -> float:
        return float(self.generator.standard_normal())

    def gamma(self, shape: float, scale: float) -> float:
        return float(self.generator.gamma(shape, scale))

    def exponential(self, rate: float) -> float:
        return float(self.generator.exponential(1.0 / rate))

    def chi_square(self, k: float) -> float:
        return float(self.generator.chisquare(k))

    def build_alias_table(self, rate: float) -> AliasTable:
        return self._build_table(float(rate))

    def draw_from_table(self, table: AliasTable) -> int:
        return table.lookup(self.uniform())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(bit_generator={type(self.generator.bit_generator).__name__})"


def create_source(
    seed: int | None = None, table_config: AliasTableConfig | None = None
) -> NumpyRandomSource:
    """
    Create the default random source.

    Parameters
    ----------
    seed : int or None, default None
        Seed for reproducible draws; ``None`` uses system entropy.
    table_config : AliasTableConfig, optional
        Poisson alias-table settings.

    Returns
    -------
    NumpyRandomSource
    """
    return NumpyRandomSource(seed, table_config=table_config)


__all__ = [
    "RandomSource",
    "NumpyRandomSource",
    "create_source",
]
