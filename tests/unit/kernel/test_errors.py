"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from fix_commons.kernel.errors import (
    ERROR_CODES,
    ApplicationError,
    BaseError,
    DomainError,
    InvalidArgumentError,
    ParseError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        err = BaseError("m", code="custom")
        assert err.code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {
            "error": "BaseError",
            "code": "my_code",
            "message": "m",
            "detail": {"key": "val"},
        }

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        err = BaseError("oops", code="oops", detail={"x": 1})
        parsed = json.loads(str(err))
        assert parsed["code"] == "oops"
        assert parsed["message"] == "oops"

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert "hi" in r
        assert "hello" in r


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls, parent",
        [
            (DomainError, BaseError),
            (ValidationError, DomainError),
            (InvalidArgumentError, ValidationError),
            (ParseError, ValidationError),
            (ApplicationError, BaseError),
        ],
    )
    def test_subclassing(self, cls: type, parent: type) -> None:
        assert issubclass(cls, parent)

    def test_codes(self) -> None:
        assert InvalidArgumentError("m").code == "invalid_argument"
        assert ParseError("m").code == "parse_error"
        assert ValidationError("m").code == "validation_error"

    def test_codes_are_registered(self) -> None:
        from fix_commons.config import InvalidSettingValueError

        assert ERROR_CODES["invalid_argument"] is InvalidArgumentError
        assert ERROR_CODES["parse_error"] is ParseError
        assert ERROR_CODES["invalid_setting_value"] is InvalidSettingValueError
        assert ERROR_CODES["base_error"] is BaseError

    def test_duplicate_code_is_rejected(self) -> None:
        with pytest.raises(TypeError):
            type("Clash", (DomainError,), {"default_code": "parse_error"})

    def test_detail_is_copied(self) -> None:
        detail = {"argument": "bound"}
        err = BaseError("m", detail=detail)
        detail["argument"] = "other"
        assert err.detail == {"argument": "bound"}


class TestInvalidArgumentError:
    def test_records_argument_and_value(self) -> None:
        err = InvalidArgumentError("bad bound", argument="bound", value=-5)
        assert err.argument == "bound"
        assert err.value == -5
        assert err.detail == {"argument": "bound", "value": -5}

    def test_explicit_detail_wins(self) -> None:
        err = InvalidArgumentError("m", argument="x", value=1, detail={"custom": True})
        assert err.detail == {"custom": True}

    def test_to_dict_has_errors_key(self) -> None:
        assert InvalidArgumentError("m").to_dict()["errors"] == []


class TestParseError:
    def test_records_source_and_fragment(self) -> None:
        err = ParseError("bad", source="Y+1:X", fragment="X")
        assert err.source == "Y+1:X"
        assert err.fragment == "X"
        assert err.detail == {"source": "Y+1:X", "fragment": "X"}

    def test_str_is_json_with_detail(self) -> None:
        parsed = json.loads(str(ParseError("bad", source="Q", fragment="Q")))
        assert parsed["code"] == "parse_error"
        assert parsed["detail"]["fragment"] == "Q"


class TestPublicReExports:
    def test_all_symbols_importable(self) -> None:
        import importlib

        mod = importlib.import_module("fix_commons.kernel.errors")
        for name in mod.__all__:
            assert hasattr(mod, name), f"{name!r} missing from fix_commons.kernel.errors"
