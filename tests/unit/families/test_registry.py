from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_dists.errors import UnknownFamilyError
from pysatl_dists.families import (
    ParametricFamily,
    ParametricFamilyRegister,
    categorical_guard,
    configure_families_register,
    reset_families_register,
)
from pysatl_dists.types import Domain, FamilyName


class TestFamilyRegister:
    def make_family(self, name: str = "weighted") -> ParametricFamily:
        return ParametricFamily(name, Domain.UNCONSTRAINED, ["w"], 2, guard=categorical_guard)

    def test_singleton(self) -> None:
        assert ParametricFamilyRegister() is ParametricFamilyRegister()

    def test_register_and_get(self) -> None:
        family = self.make_family()
        ParametricFamilyRegister.register(family)
        assert ParametricFamilyRegister.contains("weighted")
        assert ParametricFamilyRegister.get("weighted") is family

    def test_duplicate_registration(self) -> None:
        ParametricFamilyRegister.register(self.make_family())
        with pytest.raises(ValueError, match="already found"):
            ParametricFamilyRegister.register(self.make_family())

    def test_unknown_family(self) -> None:
        with pytest.raises(UnknownFamilyError) as exc_info:
            ParametricFamilyRegister.get("zipf")
        assert isinstance(exc_info.value, KeyError)
        assert "zipf" in str(exc_info.value)

    def test_reset_drops_families(self) -> None:
        ParametricFamilyRegister.register(self.make_family())
        reset_families_register()
        assert not ParametricFamilyRegister.contains("weighted")


class TestConfiguration:
    def test_all_builtins_registered(self) -> None:
        register = configure_families_register()
        assert set(register.names()) == {str(name) for name in FamilyName}

    def test_configuration_is_cached(self) -> None:
        first = configure_families_register()
        normal = first.get(FamilyName.NORMAL)
        assert configure_families_register() is first
        assert first.get(FamilyName.NORMAL) is normal

    def test_reconfigure_after_reset(self) -> None:
        normal = configure_families_register().get(FamilyName.NORMAL)
        reset_families_register()
        fresh = configure_families_register().get(FamilyName.NORMAL)
        assert fresh is not normal
        assert fresh.name == FamilyName.NORMAL

    @pytest.mark.parametrize(
        "name, domain",
        [
            (FamilyName.BERNOULLI, Domain.NATURAL),
            (FamilyName.POISSON, Domain.NATURAL),
            (FamilyName.GAMMA, Domain.REAL),
            (FamilyName.UNIFORM, Domain.REAL),
            (FamilyName.CATEGORICAL, Domain.UNCONSTRAINED),
        ],
    )
    def test_domains(self, name, domain) -> None:
        assert configure_families_register().get(name).domain is domain

    def test_registered_by_plain_string(self) -> None:
        assert configure_families_register().get("normal").parameter_names == ("mean", "stddev")
