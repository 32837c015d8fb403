"""
Built-in distribution families for PySATL Variates.

This package contains implementations of standard statistical distribution
families, each wired to the variate sampler that draws from it.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.families.builtins.continuous import (
    configure_beta_family,
    configure_cauchy_family,
    configure_chi_squared_family,
    configure_erlang_family,
    configure_exponential_family,
    configure_f_family,
    configure_gamma_family,
    configure_laplace_family,
    configure_levy_family,
    configure_log_logistic_family,
    configure_log_normal_family,
    configure_logistic_family,
    configure_normal_family,
    configure_pareto_family,
    configure_rayleigh_family,
    configure_student_t_family,
    configure_triangular_family,
    configure_uniform_family,
    configure_weibull_family,
)
from pysatl_variates.families.builtins.discrete import (
    configure_binomial_family,
    configure_hypergeometric_family,
    configure_logarithmic_family,
    configure_negative_binomial_family,
    configure_poisson_family,
)

__all__ = [
    "configure_normal_family",
    "configure_uniform_family",
    "configure_exponential_family",
    "configure_gamma_family",
    "configure_beta_family",
    "configure_chi_squared_family",
    "configure_f_family",
    "configure_student_t_family",
    "configure_log_normal_family",
    "configure_log_logistic_family",
    "configure_logistic_family",
    "configure_laplace_family",
    "configure_weibull_family",
    "configure_rayleigh_family",
    "configure_triangular_family",
    "configure_cauchy_family",
    "configure_pareto_family",
    "configure_levy_family",
    "configure_erlang_family",
    "configure_binomial_family",
    "configure_hypergeometric_family",
    "configure_negative_binomial_family",
    "configure_poisson_family",
    "configure_logarithmic_family",
]
