"""Tests for the per-key validation engine."""

from __future__ import annotations

import logging

import pytest

from paramdeps.base.spec import ParamSpec
from paramdeps.base.types import ARRAYREF, HASHREF, SCALAR, UNDEF
from paramdeps.base.validator import to_param_map, validate_params
from paramdeps.config.settings import ValidateSettings
from paramdeps.errors import ParamSpecError, ParamsValidationError


class TestToParamMap:
    def test_mapping(self) -> None:
        assert to_param_map({"a": 1}, "foo") == {"a": 1}

    def test_flat_pairs(self) -> None:
        assert to_param_map(["a", 1, "b", None], "foo") == {"a": 1, "b": None}

    def test_later_duplicate_wins(self) -> None:
        assert to_param_map(("a", 1, "a", 2), "foo") == {"a": 2}

    def test_odd_length(self) -> None:
        with pytest.raises(ParamsValidationError, match="^Odd number of parameters in call to foo"):
            to_param_map(["a", 1, "b"], "foo")

    @pytest.mark.parametrize("args", [[["x"], 1], [1, "a"], ("a", 1, None, 2)])
    def test_name_slot_must_be_str(self, args: list[object]) -> None:
        with pytest.raises(ParamsValidationError, match="^Parameter names in call to foo must be strings"):
            to_param_map(args, "foo")

    @pytest.mark.parametrize("args", ["ab", 3, None])
    def test_not_args(self, args: object) -> None:
        with pytest.raises(ParamsValidationError, match="mapping or a list"):
            to_param_map(args, "foo")  # type: ignore[arg-type]


class TestPresence:
    def test_missing_mandatory(self, settings: ValidateSettings) -> None:
        with pytest.raises(ParamsValidationError) as excinfo:
            validate_params({}, {"a": True}, called="foo", settings=settings)
        assert str(excinfo.value) == "Mandatory parameter 'a' missing in call to foo"
        assert excinfo.value.param == "a"

    def test_missing_several(self, settings: ValidateSettings) -> None:
        with pytest.raises(ParamsValidationError, match="Mandatory parameters 'a' 'b' missing"):
            validate_params({}, {"a": True, "b": {}, "c": False}, called="foo", settings=settings)

    def test_optional_may_be_omitted(self, settings: ValidateSettings) -> None:
        assert validate_params({}, {"a": False}, settings=settings) == {}

    def test_unknown_key(self, settings: ValidateSettings) -> None:
        with pytest.raises(ParamsValidationError) as excinfo:
            validate_params({"a": 1, "zz": 2}, {"a": True}, called="foo", settings=settings)
        assert str(excinfo.value) == (
            "The following parameter was passed in the call to foo "
            "but was not listed in the validation options: zz"
        )

    def test_allow_extra(self) -> None:
        settings = ValidateSettings(allow_extra=True)
        assert validate_params({"a": 1, "zz": 2}, {"a": True}, settings=settings) == {"a": 1, "zz": 2}

    def test_called_falls_back_to_settings(self) -> None:
        settings = ValidateSettings(called="my_func")
        with pytest.raises(ParamsValidationError, match="in call to my_func$"):
            validate_params({}, {"a": True}, settings=settings)


class TestTypes:
    def test_type_mismatch(self, settings: ValidateSettings) -> None:
        with pytest.raises(ParamsValidationError) as excinfo:
            validate_params({"a": [1]}, {"a": {"type": SCALAR}}, called="foo", settings=settings)
        assert str(excinfo.value) == (
            "The 'a' parameter ([1]) to foo was a 'arrayref', "
            "which is not one of the allowed types: scalar"
        )

    def test_combined_tag(self, settings: ValidateSettings) -> None:
        spec = {"a": {"type": ARRAYREF | HASHREF}}
        validate_params({"a": []}, spec, settings=settings)
        validate_params({"a": {}}, spec, settings=settings)
        with pytest.raises(ParamsValidationError):
            validate_params({"a": "x"}, spec, settings=settings)

    def test_none_needs_undef(self, settings: ValidateSettings) -> None:
        with pytest.raises(ParamsValidationError):
            validate_params({"a": None}, {"a": {"type": SCALAR}}, settings=settings)
        validate_params({"a": None}, {"a": {"type": SCALAR | UNDEF}}, settings=settings)

    def test_isa(self, settings: ValidateSettings) -> None:
        spec = {"a": ParamSpec(isa=int)}
        validate_params({"a": 3}, spec, settings=settings)
        with pytest.raises(ParamsValidationError, match="was not a 'int'"):
            validate_params({"a": "3"}, spec, called="foo", settings=settings)

    def test_regex(self, settings: ValidateSettings) -> None:
        spec = {"a": {"regex": r"^\d+$"}}
        validate_params({"a": 42}, spec, settings=settings)
        with pytest.raises(ParamsValidationError, match="regex"):
            validate_params({"a": "4x"}, spec, settings=settings)

    def test_callbacks(self, settings: ValidateSettings) -> None:
        spec = {
            "low": {"type": SCALAR},
            "high": {"callbacks": {"above low": lambda value, params: value > params["low"]}},
        }
        validate_params({"low": 1, "high": 2}, spec, settings=settings)
        with pytest.raises(ParamsValidationError, match="'above low' callback") as excinfo:
            validate_params({"low": 3, "high": 2}, spec, settings=settings)
        assert excinfo.value.param == "high"


class TestResult:
    def test_defaults_filled_in(self, settings: ValidateSettings) -> None:
        spec = {"a": True, "b": {"default": 5}, "c": {"default": None}}
        assert validate_params({"a": 1}, spec, settings=settings) == {"a": 1, "b": 5, "c": None}

    def test_supplied_value_beats_default(self, settings: ValidateSettings) -> None:
        assert validate_params({"b": 1}, {"b": {"default": 5}}, settings=settings) == {"b": 1}

    def test_input_not_mutated(self, settings: ValidateSettings) -> None:
        args = {"a": 1}
        validate_params(args, {"a": True, "b": {"default": 2}}, settings=settings)
        assert args == {"a": 1}

    def test_flat_args(self, settings: ValidateSettings) -> None:
        assert validate_params(["a", 1], {"a": {"type": SCALAR}}, settings=settings) == {"a": 1}


class TestNoValidation:
    def test_skips_checks_keeps_defaults(self, caplog: pytest.LogCaptureFixture) -> None:
        settings = ValidateSettings(no_validation=True)
        spec = {"a": {"type": SCALAR}, "b": {"default": 1}}
        with caplog.at_level(logging.DEBUG, logger="paramdeps"):
            result = validate_params({"a": [1], "zz": 0}, spec, called="foo", settings=settings)
        assert result == {"a": [1], "zz": 0, "b": 1}
        assert "Per-key validation disabled for foo" in caplog.text

    def test_malformed_spec_still_raises(self) -> None:
        settings = ValidateSettings(no_validation=True)
        with pytest.raises(ParamSpecError):
            validate_params({}, {"a": "yes"}, settings=settings)
