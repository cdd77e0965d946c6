from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import poisson

from pysatl_prob.random.tables import (
    AliasTable,
    AliasTableConfig,
    build_alias_table,
    poisson_table,
)


def _table_probabilities(table: AliasTable) -> np.ndarray:
    """Exact outcome probabilities encoded by an alias table."""
    size = len(table)
    probs = np.zeros(size)
    for column in range(size):
        probs[column] += table.probabilities[column] / size
        probs[table.aliases[column]] += (1.0 - table.probabilities[column]) / size
    return probs


class TestBuildAliasTable:
    @pytest.mark.parametrize(
        "weights",
        [
            [1.0],
            [1.0, 1.0],
            [0.1, 0.2, 0.7],
            [5.0, 0.0, 3.0, 2.0],
            [1e-6, 1.0, 1e-3],
        ],
    )
    def test_encodes_normalised_weights(self, weights) -> None:
        table = build_alias_table(weights)
        expected = np.asarray(weights) / np.sum(weights)

        np.testing.assert_allclose(_table_probabilities(table), expected, atol=1e-12)

    def test_zero_weight_is_never_drawn(self) -> None:
        table = build_alias_table([1.0, 0.0, 1.0])
        outcomes = {table.lookup(u) for u in np.linspace(0.0, 1.0, 1001, endpoint=False)}
        assert outcomes == {0, 2}

    def test_offset_shifts_outcomes(self) -> None:
        table = build_alias_table([1.0], offset=7)
        assert table.lookup(0.0) == 7
        assert table.lookup(0.999) == 7

    @pytest.mark.parametrize("weights", [[], [0.0, 0.0]])
    def test_rejects_degenerate_weights(self, weights) -> None:
        with pytest.raises(ValueError, match="positive weight"):
            build_alias_table(weights)


class TestPoissonTable:
    @pytest.mark.parametrize("rate", [0.5, 3.0, 40.0, 1000.0])
    def test_matches_poisson_pmf(self, rate: float) -> None:
        table = poisson_table(rate)
        support = table.offset + np.arange(len(table))

        np.testing.assert_allclose(
            _table_probabilities(table), poisson.pmf(support, rate), atol=1e-9
        )

    def test_support_is_truncated_around_rate(self) -> None:
        table = poisson_table(10_000.0, AliasTableConfig(tail_sigmas=5.0, min_half_width=0))
        assert table.offset == 10_000 - 500
        assert len(table) == 1001

    def test_zero_rate_is_point_mass(self) -> None:
        table = poisson_table(0.0)
        assert table.offset == 0
        assert {table.lookup(u) for u in (0.0, 0.5, 0.99)} == {0}
