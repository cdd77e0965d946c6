"""
Chinese Restaurant Process
==========================

Sequential partition sampler (Griffiths and Ghahramani, 2011). Customers
enter one at a time; each joins an occupied table with weight proportional to
its occupancy or opens a new table with weight proportional to the
concentration parameter.

- :class:`CRPTables` – table occupancies during one draw.
- :func:`crp` – distribution over the final occupancies.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_prob.distributions.distribution import Distribution
from pysatl_prob.families.discrete import categorical

if TYPE_CHECKING:
    from pysatl_prob.random.source import RandomSource


class CRPTables:
    """
    Seated-customer counts keyed by table id.

    Table ids are dense, start at ``0`` and follow creation order: a new table
    always gets the current table count as its id.
    """

    __slots__ = ("_counts",)

    def __init__(self) -> None:
        self._counts: dict[int, int] = {}

    def __len__(self) -> int:
        """Return the number of open tables."""
        return len(self._counts)

    @property
    def customers(self) -> int:
        """Return the number of seated customers."""
        return sum(self._counts.values())

    def seat(self, table: int) -> None:
        """
        Seat one customer at ``table``.

        Parameters
        ----------
        table : int
            Id of an open table, or the current table count to open a new one.

        Raises
        ------
        ValueError
            If ``table`` is neither open nor the next id.
        """
        if table == len(self._counts):
            self._counts[table] = 1
        elif table in self._counts:
            self._counts[table] += 1
        else:
            raise ValueError(f"Table {table} is not open and is not the next table id.")

    def counts(self) -> list[int]:
        """Return occupancies ordered by table id."""
        return [self._counts[k] for k in range(len(self._counts))]

    def weights(self, customer: int, concentration: float) -> list[float]:
        """
        Seating weights for ``customer``: one per open table, then the new table.
        """
        denominator = customer - 1 + concentration
        return [c / denominator for c in self.counts()] + [concentration / denominator]


def crp(a: float, n: int) -> Distribution[list[int]]:
    """
    The Chinese Restaurant Process with concentration ``a`` and ``n`` customers.

    Customer ``0`` sits at table ``0``; every following customer draws one
    categorical seating choice. Each sample consumes ``n - 1`` categorical
    draws.

    Parameters
    ----------
    a : float
        Concentration parameter (> 0).
    n : int
        Number of customers (>= 1).

    Returns
    -------
    Distribution[list[int]]
        Table occupancies in table creation order. They sum to ``n``.

    Raises
    ------
    ValueError
        If ``n < 1``.
    """
    if n < 1:
        raise ValueError(f"CRP needs at least one customer, got {n}.")

    def sampler(source: RandomSource) -> list[int]:
        tables = CRPTables()
        tables.seat(0)
        for i in range(1, n):
            choice = categorical(tables.weights(i, a)).sample(source)
            tables.seat(choice)
        return tables.counts()

    return Distribution(sampler, name="crp")


__all__ = [
    "CRPTables",
    "crp",
]
