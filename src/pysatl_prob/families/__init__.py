"""
Distribution families for PySATL Prob.

This package provides the constructors of the built-in distributions:

- primitive draws (:mod:`.primitives`);
- continuous transforms (:mod:`.continuous`);
- discrete families and weighted draws (:mod:`.discrete`);
- container-valued families (:mod:`.multivariate`);
- the Chinese Restaurant Process (:mod:`.crp`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from pysatl_prob.families.continuous import (
    beta,
    gstudent,
    inverse_gamma,
    inverse_gaussian,
    laplace,
    log_normal,
    normal_gamma,
    pareto,
    student,
    weibull,
)
from pysatl_prob.families.crp import CRPTables, crp
from pysatl_prob.families.discrete import (
    bernoulli,
    binomial,
    categorical,
    discrete,
    discrete_uniform,
    multinomial,
    negative_binomial,
    poisson,
    zipf,
)
from pysatl_prob.families.multivariate import dirichlet, iso_normal, symmetric_dirichlet
from pysatl_prob.families.primitives import (
    chi_square,
    exponential,
    gamma,
    normal,
    standard_normal,
    uniform,
    uniform_range,
)

__all__ = [
    # primitives
    "uniform",
    "uniform_range",
    "standard_normal",
    "normal",
    "gamma",
    "chi_square",
    "exponential",
    # continuous
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
    # multivariate
    "dirichlet",
    "symmetric_dirichlet",
    "iso_normal",
    # discrete
    "bernoulli",
    "binomial",
    "negative_binomial",
    "poisson",
    "discrete_uniform",
    "zipf",
    "multinomial",
    "categorical",
    "discrete",
    # chinese restaurant process
    "CRPTables",
    "crp",
]
