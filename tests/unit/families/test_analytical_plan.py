from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from pysatl_variates.families import ParametricFamilyRegister
from pysatl_variates.types import CharacteristicName
from tests.unit.families.test_basic import TestBaseFamily


class TestAnalyticalPlan(TestBaseFamily):
    def test_family_analytical_plan_picks_provider_correctly(self) -> None:
        fam = self.make_default_family()

        plan = fam._analytical_plan
        assert set(plan.keys()) == {"base", "alt"}

        assert plan["alt"][CharacteristicName.CDF] == "alt"
        assert plan["alt"][CharacteristicName.PDF] == "base"
        assert plan["alt"][CharacteristicName.PPF] == "base"

        for characteristic in (CharacteristicName.PDF, CharacteristicName.CDF):
            assert plan["base"][characteristic] == "base"

    def test_alt_form_receives_alt_parameters(self) -> None:
        seen: list[str] = []
        fam = self.make_default_family(
            distr_characteristics={
                self.CDF: {
                    "alt": lambda p, x: seen.append(p.name) or x,
                    "base": lambda p, x: seen.append(p.name) or x,
                },
                self.PDF: {"base": lambda p, x: seen.append(p.name) or x},
            }
        )
        ParametricFamilyRegister.register(fam)
        distr = fam.distribution("alt", value=1.0)
        distr.analytical_computations[self.CDF](0.5)
        distr.analytical_computations[self.PDF](0.5)
        assert seen == ["alt", "base"]
