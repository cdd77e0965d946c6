"""
Common fixtures and utilities for distribution family tests.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from typing import Any

import numpy as np
from scipy import stats

from pysatl_prob.distributions.sampling import sample_n
from pysatl_prob.random.source import create_source


class BaseDistributionTest:
    """Base class for all distribution families' tests"""

    # Precision for floating point comparisons
    CALCULATION_PRECISION = 1e-10
    # Seed of the source used for statistical checks
    SEED = 20250101
    # Number of draws used for statistical checks
    SAMPLE_SIZE = 4000
    # Smallest accepted p-value of goodness-of-fit checks
    MIN_P_VALUE = 1e-4

    @staticmethod
    def assert_arrays_almost_equal(
        actual: np.ndarray[Any, Any], expected: np.ndarray[Any, Any], precision: float | None = None
    ) -> None:
        """Helper method to assert arrays are almost equal."""
        if precision is None:
            precision = BaseDistributionTest.CALCULATION_PRECISION

        np.testing.assert_array_almost_equal(actual, expected, decimal=int(-math.log10(precision)))

    def draw(self, dist: Any, n: int | None = None) -> np.ndarray[Any, Any]:
        """Draw ``n`` values from a fresh seeded source."""
        size = self.SAMPLE_SIZE if n is None else n
        return np.asarray(sample_n(size, dist, create_source(self.SEED)), dtype=np.float64)

    def assert_fits(self, dist: Any, reference: Any) -> None:
        """Kolmogorov-Smirnov check of ``dist`` against a frozen SciPy distribution."""
        result = stats.kstest(self.draw(dist), reference.cdf)
        assert result.pvalue > self.MIN_P_VALUE, result
