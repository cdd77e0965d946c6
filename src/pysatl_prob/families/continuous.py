"""
Continuous distribution families.

Derived distributions built from primitive draws by closed-form transforms
or by sequential composition. Parameters are not validated; scales, shapes
and rates should be positive.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np

from pysatl_prob.distributions.distribution import Distribution
from pysatl_prob.families.primitives import (
    exponential,
    gamma,
    normal,
    standard_normal,
    uniform,
    uniform_range,
)


def log_normal(mean: float, sd: float) -> Distribution[float]:
    """The log-normal distribution: ``exp`` of ``normal(mean, sd)``."""

    def _exp(x: float) -> float:
        with np.errstate(over="ignore"):
            return float(np.exp(x))

    return normal(mean, sd).map(_exp).named("log_normal")


def laplace(mu: float, sigma: float) -> Distribution[float]:
    """
    The Laplace (double-exponential) distribution.

    Inverse-CDF transform of ``u ~ U(-0.5, 0.5)`` with scale
    ``b = sigma / sqrt(2)``, so ``sigma`` is the standard deviation.
    """
    b = sigma / math.sqrt(2.0)

    def _transform(u: float) -> float:
        with np.errstate(divide="ignore"):
            return float(mu - b * np.sign(u) * np.log1p(-2.0 * abs(u)))

    return uniform_range(-0.5, 0.5).map(_transform).named("laplace")


def weibull(a: float, b: float) -> Distribution[float]:
    """
    The Weibull distribution with rate-like parameter ``a`` and shape ``b``.

    Samples are ``(-ln(1 - x) / a) ** (1 / b)`` for ``x ~ U(0, 1)``, the
    inverse CDF of ``F(t) = 1 - exp(-a * t**b)``.
    """

    def _transform(x: float) -> float:
        return (-math.log1p(-x) / a) ** (1.0 / b)

    return uniform().map(_transform).named("weibull")


def inverse_gamma(a: float, b: float) -> Distribution[float]:
    """The inverse-gamma distribution: reciprocal of ``gamma(a, b)``."""
    return gamma(a, b).map(lambda x: 1.0 / x).named("inverse_gamma")


def normal_gamma(mu: float, lambda_: float, a: float, b: float) -> Distribution[float]:
    """
    The Normal-Gamma distribution, marginal over the precision.

    Draws a precision ``tau ~ gamma(a, b)`` and then a normal with mean
    ``mu`` and standard deviation ``sqrt(1 / (lambda_ * tau))``.
    """

    def _conditional(tau: float) -> Distribution[float]:
        return normal(mu, math.sqrt(1.0 / (lambda_ * tau)))

    return gamma(a, b).bind(_conditional).named("normal_gamma")


def beta(a: float, b: float) -> Distribution[float]:
    """The beta distribution as a ratio of unit-scale gammas, ``a`` drawn first."""
    return (
        gamma(a, 1.0)
        .combine(gamma(b, 1.0))
        .map(lambda uw: uw[0] / (uw[0] + uw[1]))
        .named("beta")
    )


def pareto(a: float, xmin: float) -> Distribution[float]:
    """The Pareto distribution with index ``a`` and minimum ``xmin``."""

    def _transform(y: float) -> float:
        with np.errstate(over="ignore"):
            return float(xmin * np.exp(y))

    return exponential(a).map(_transform).named("pareto")


def gstudent(m: float, s: float, k: float) -> Distribution[float]:
    """
    Generalised Student's t with location ``m``, scale ``s`` and ``k`` dof.

    A scale mixture of normals: ``sd = sqrt(inverse_gamma(k / 2, 2 s / k))``.
    """
    return (
        inverse_gamma(k / 2.0, s * 2.0 / k)
        .map(math.sqrt)
        .bind(lambda sd: normal(m, sd))
        .named("gstudent")
    )


def student(k: float) -> Distribution[float]:
    """Student's t distribution with ``k`` degrees of freedom."""
    return gstudent(0.0, 1.0, k).named("student")


def inverse_gaussian(lambda_: float, mu: float) -> Distribution[float]:
    """
    The inverse Gaussian (Wald) distribution with shape ``lambda_`` and mean ``mu``.

    Michael–Schucany–Haas transform: one standard normal draw followed by one
    uniform draw choosing between the two roots.
    """

    def _root(nu: float) -> float:
        y = nu * nu
        s = math.sqrt(4.0 * mu * lambda_ * y + mu * mu * y * y)
        return mu * (1.0 + (mu * y - s) / (2.0 * lambda_))

    def _choose(xz: tuple[float, float]) -> float:
        x, z = xz
        return x if z <= mu / (mu + x) else mu * mu / x

    return standard_normal().map(_root).combine(uniform()).map(_choose).named("inverse_gaussian")


__all__ = [
    "log_normal",
    "laplace",
    "weibull",
    "inverse_gamma",
    "normal_gamma",
    "beta",
    "pareto",
    "gstudent",
    "student",
    "inverse_gaussian",
]
