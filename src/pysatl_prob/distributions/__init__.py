"""
Distributions subpackage

Sampling-function distributions and the machinery to compose and draw them:

- distribution type and combinators (:mod:`.distribution`);
- ordered-container helpers (:mod:`.containers`);
- single and batch sampling (:mod:`.sampling`);
- error types (:mod:`.exceptions`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .distribution import (
    Distribution,
    combine,
    fmap,
    lift,
    pure,
    replicate,
    sequence,
    traverse,
)
from .exceptions import InvalidProbabilityVectorError, RejectionLimitExceededError
from .sampling import sample, sample_n

__all__ = [
    # distribution
    "Distribution",
    # combinators
    "fmap",
    "combine",
    "sequence",
    "pure",
    "lift",
    "traverse",
    "replicate",
    # sampling
    "sample",
    "sample_n",
    # errors
    "InvalidProbabilityVectorError",
    "RejectionLimitExceededError",
]
