"""
PySATL Prob
===========

Unit tests for sampling-function distributions, their families and random
sources.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
