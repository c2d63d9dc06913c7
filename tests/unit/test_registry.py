"""Unit tests for the method registry and factory."""

from __future__ import annotations

import pytest

from rgb_gapfill.exceptions import ConfigError
from rgb_gapfill.methods.base import BaseInterpolator
from rgb_gapfill.methods.carry import NearestInterpolator
from rgb_gapfill.methods.curve import LinearInterpolator, PchipInterpolator1D
from rgb_gapfill.methods.registry import (
    InterpolationMethod,
    get_all_methods,
    get_interpolator,
    list_aliases,
    list_methods,
    resolve_method,
)


class TestGetInterpolator:
    def test_nearest_returns_correct_type(self) -> None:
        interp = get_interpolator("nearest")
        assert isinstance(interp, BaseInterpolator)
        assert isinstance(interp, NearestInterpolator)
        assert interp.name == "nearest"

    def test_accepts_enum_member(self) -> None:
        interp = get_interpolator(InterpolationMethod.LINEAR)
        assert isinstance(interp, LinearInterpolator)

    def test_case_insensitive(self) -> None:
        interp = get_interpolator("  LINEAR ")
        assert isinstance(interp, LinearInterpolator)

    def test_alias_cubic_resolves_to_pchip(self) -> None:
        interp = get_interpolator("cubic")
        assert isinstance(interp, PchipInterpolator1D)

    def test_unknown_name_raises_config_error(self) -> None:
        with pytest.raises(ConfigError, match="Unknown method"):
            get_interpolator("makima")

    def test_unknown_name_is_also_value_error(self) -> None:
        """ConfigError inherits ValueError, so callers can catch either."""
        with pytest.raises(ValueError, match="Unknown method"):
            get_interpolator("unknown_method_xyz")

    def test_non_string_raises_config_error(self) -> None:
        with pytest.raises(ConfigError, match="must be a string"):
            get_interpolator(3)  # type: ignore[arg-type]

    @pytest.mark.parametrize("name", list_methods())
    def test_every_method_name_matches(self, name: str) -> None:
        assert get_interpolator(name).name == name


class TestResolveMethod:
    def test_returns_enum(self) -> None:
        assert resolve_method("spline") is InterpolationMethod.SPLINE

    def test_enum_is_str(self) -> None:
        assert InterpolationMethod.PCHIP == "pchip"
        assert str(InterpolationMethod.PCHIP) == "pchip"


class TestListMethods:
    def test_returns_sorted_list(self) -> None:
        methods = list_methods()
        assert methods == sorted(methods)

    def test_exactly_six_methods(self) -> None:
        assert set(list_methods()) == {
            "previous",
            "next",
            "nearest",
            "linear",
            "spline",
            "pchip",
        }

    def test_no_aliases_in_list(self) -> None:
        methods = list_methods()
        for alias in list_aliases():
            assert alias not in methods

    def test_aliases_point_to_canonical_names(self) -> None:
        for target in list_aliases().values():
            assert target in list_methods()


class TestGetAllMethods:
    def test_keys_match_list_methods(self) -> None:
        assert sorted(get_all_methods()) == list_methods()

    def test_values_are_interpolator_classes(self) -> None:
        for name, cls in get_all_methods().items():
            assert issubclass(cls, BaseInterpolator)
            assert cls.name == name

    def test_factory_returns_registered_class(self) -> None:
        for name, cls in get_all_methods().items():
            assert type(get_interpolator(name)) is cls
