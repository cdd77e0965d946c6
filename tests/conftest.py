from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_prob.random.source import NumpyRandomSource, create_source

pytest.importorskip("scipy")

SEED = 20250101


@pytest.fixture
def source() -> NumpyRandomSource:
    """Seeded default source; a fresh one per test."""
    return create_source(seed=SEED)
