"""
Sampling error definitions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class InvalidProbabilityVectorError(ValueError):
    """
    Raised when a weight vector cannot produce an outcome.

    This error occurs in categorical and multinomial draws when no cumulative
    bucket exceeds the drawn value, e.g. when the weights are empty or none of
    them is positive.
    """


class RejectionLimitExceededError(RuntimeError):
    """
    Raised when a rejection sampler exhausts its iteration bound.

    Parameters
    ----------
    attempts : int
        Number of proposals drawn before giving up.
    """

    def __init__(self, attempts: int, message: str | None = None) -> None:
        self.attempts = attempts
        super().__init__(message or f"No proposal accepted after {attempts} attempts.")


__all__ = [
    "InvalidProbabilityVectorError",
    "RejectionLimitExceededError",
]
