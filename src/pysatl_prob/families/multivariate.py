"""
Multivariate distribution families.

Distributions over ordered containers. The container passed in (list, tuple,
NumPy array or mapping) determines the kind, shape and order of the sampled
container.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any

from pysatl_prob.distributions.containers import rebuild, values_of
from pysatl_prob.distributions.distribution import Distribution, traverse
from pysatl_prob.families.primitives import gamma, normal

if TYPE_CHECKING:
    from collections.abc import Iterable


def dirichlet(concentrations: Iterable[float]) -> Distribution[Any]:
    """
    The Dirichlet distribution with the provided concentration parameters.

    One ``gamma(c, 1)`` is drawn per component, in order, and the draws are
    normalised by their sum. The dimension is the number of concentrations.

    Parameters
    ----------
    concentrations : Iterable[float]
        Positive concentration parameters.

    Returns
    -------
    Distribution
        Distribution over containers shaped like ``concentrations`` whose
        elements sum to one.
    """

    def _normalise(draws: Any) -> Any:
        zs = values_of(draws)
        total = sum(zs)
        return rebuild(draws, [z / total for z in zs])

    return traverse(lambda c: gamma(c, 1.0), concentrations).map(_normalise).named("dirichlet")


def symmetric_dirichlet(n: int, a: float) -> Distribution[list[float]]:
    """The Dirichlet distribution of dimension ``n`` with every concentration ``a``."""
    return dirichlet([a] * n).named("symmetric_dirichlet")


def iso_normal(means: Iterable[float], sd: float) -> Distribution[Any]:
    """
    An isotropic (spherical) Gaussian.

    Each component is drawn independently from ``normal(mean_i, sd)``, in
    container order.
    """
    return traverse(lambda m: normal(m, sd), means).named("iso_normal")


__all__ = [
    "dirichlet",
    "symmetric_dirichlet",
    "iso_normal",
]
