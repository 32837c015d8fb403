from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from pysatl_variates.families import ParametricFamily, Parametrization
from pysatl_variates.stats._variates import UniformSampler
from pysatl_variates.types import (
    GenericCharacteristicName,
    UnivariateContinuous,
)


class TestBaseFamily:
    PDF: GenericCharacteristicName = "pdf"
    CDF: GenericCharacteristicName = "cdf"
    PPF: GenericCharacteristicName = "ppf"

    def make_default_family(
        self,
        distr_characteristics: dict[GenericCharacteristicName, dict[str, object]] | None = None,
        with_sampler: bool = True,
    ) -> ParametricFamily:
        if distr_characteristics is None:
            distr_characteristics = {
                self.PDF: {"base": lambda p, x: x},
                self.CDF: {"alt": lambda p, x: x, "base": lambda p, x: x},
                self.PPF: {"base": lambda p, x: x},
            }
        fam = ParametricFamily(
            name="Default",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base", "alt"],
            distr_characteristics=distr_characteristics,  # type: ignore[arg-type]
            sampler_by_parametrization=(
                (lambda p: UniformSampler(p.value, p.value + 1.0)) if with_sampler else None
            ),
        )

        @fam.parametrization(name="base")
        class Base(Parametrization):
            value: float

        @fam.parametrization(name="alt")
        class Alt(Parametrization):
            value: float

            def transform_to_base_parametrization(self) -> Parametrization:
                return Base(value=self.value)  # type: ignore[call-arg]

        return fam
