"""
Random subpackage

Primitive randomness consumed by distributions:

- random source protocol and NumPy-backed default (:mod:`.source`);
- alias tables for constant-time discrete lookups (:mod:`.tables`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .source import NumpyRandomSource, RandomSource, create_source
from .tables import AliasTable, AliasTableConfig, build_alias_table, poisson_table

__all__ = [
    # sources
    "RandomSource",
    "NumpyRandomSource",
    "create_source",
    # tables
    "AliasTable",
    "AliasTableConfig",
    "build_alias_table",
    "poisson_table",
]
