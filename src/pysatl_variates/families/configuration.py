"""
Distribution Families Configuration
====================================

This module registers the built-in parametric families of PySATL Variates:

- continuous families — Normal, ContinuousUniform, Exponential, Gamma, Beta,
  ChiSquared, F, StudentT, LogNormal, LogLogistic, Logistic, Laplace,
  Weibull, Rayleigh, Triangular, Cauchy, Pareto, Levy and Erlang;
- discrete families — Binomial, Hypergeometric, Poisson, NegativeBinomial
  and Logarithmic.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Every family carries analytical characteristics and a sampler factory.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_variates.families.builtins import (
    configure_beta_family,
    configure_binomial_family,
    configure_cauchy_family,
    configure_chi_squared_family,
    configure_erlang_family,
    configure_exponential_family,
    configure_f_family,
    configure_gamma_family,
    configure_hypergeometric_family,
    configure_laplace_family,
    configure_levy_family,
    configure_log_logistic_family,
    configure_log_normal_family,
    configure_logarithmic_family,
    configure_logistic_family,
    configure_negative_binomial_family,
    configure_normal_family,
    configure_pareto_family,
    configure_poisson_family,
    configure_rayleigh_family,
    configure_student_t_family,
    configure_triangular_family,
    configure_uniform_family,
    configure_weibull_family,
)
from pysatl_variates.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_normal_family()
    configure_uniform_family()
    configure_exponential_family()
    configure_gamma_family()
    configure_beta_family()
    configure_chi_squared_family()
    configure_f_family()
    configure_student_t_family()
    configure_log_normal_family()
    configure_log_logistic_family()
    configure_logistic_family()
    configure_laplace_family()
    configure_weibull_family()
    configure_rayleigh_family()
    configure_triangular_family()
    configure_cauchy_family()
    configure_pareto_family()
    configure_levy_family()
    configure_erlang_family()

    configure_binomial_family()
    configure_hypergeometric_family()
    configure_poisson_family()
    configure_negative_binomial_family()
    configure_logarithmic_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
