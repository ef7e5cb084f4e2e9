"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from keyset_pager.config import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from keyset_pager.kernel.errors import (
    BaseError,
    ConfigurationError,
    CountUnavailableError,
    ExecutionError,
    InvalidCursorError,
    InvalidOrderingError,
    UnboundedSourceRequiredError,
    UnresolvableFieldError,
    ValidationError,
    backend_faults,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "keyset_pager_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == {"type": "RuntimeError", "message": "root"}

    def test_with_detail_merges_and_returns_self(self) -> None:
        err = BaseError("m", detail={"a": 1})
        assert err.with_detail(b=2) is err
        assert err.detail == {"a": 1, "b": 2}

    def test_detail_is_copied(self) -> None:
        detail = {"a": 1}
        BaseError("m", detail=detail).with_detail(b=2)
        assert detail == {"a": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m", code="c")) == "BaseError[c]('m')"

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}


class TestTaxonomy:
    @pytest.mark.parametrize(
        "error_cls, parent",
        [
            (ConfigurationError, BaseError),
            (InvalidOrderingError, ConfigurationError),
            (UnboundedSourceRequiredError, ConfigurationError),
            (ExecutionError, BaseError),
            (CountUnavailableError, ExecutionError),
            (ValidationError, BaseError),
            (UnresolvableFieldError, ValidationError),
            (InvalidCursorError, ValidationError),
            (ConfigError, ConfigurationError),
            (MissingRequiredSettingError, ConfigError),
            (InvalidSettingValueError, ConfigError),
        ],
    )
    def test_hierarchy(self, error_cls: type, parent: type) -> None:
        assert issubclass(error_cls, parent)

    def test_unbounded_source_carries_bounds(self) -> None:
        err = UnboundedSourceRequiredError(10, 5)
        assert err.offset == 10
        assert err.limit == 5
        assert err.detail == {"offset": 10, "limit": 5}
        assert err.code == "source_already_bounded"

    def test_unresolvable_field_lists_error(self) -> None:
        err = UnresolvableFieldError("x.id", "alias 'x' unknown")
        assert err.field == "x.id"
        assert err.to_dict()["errors"] == [{"field": "x.id", "reason": "alias 'x' unknown"}]

    def test_setting_errors_name_the_setting(self) -> None:
        missing = MissingRequiredSettingError("KEYSET_PAGER_CURSOR_SECRET")
        assert missing.detail == {"setting": "KEYSET_PAGER_CURSOR_SECRET"}
        invalid = InvalidSettingValueError("cursor_secret", "hunter2", "too short")
        assert invalid.detail == {"setting": "cursor_secret", "reason": "too short"}
        assert "hunter2" not in str(invalid)
        assert invalid.value == "hunter2"


class TestBackendFaults:
    def test_wraps_foreign_exception(self) -> None:
        boom = RuntimeError("db down")
        with pytest.raises(ExecutionError) as info:
            with backend_faults("fetch"):
                raise boom
        assert info.value.cause is boom
        assert info.value.detail == {"operation": "fetch"}

    def test_own_errors_pass_through(self) -> None:
        with pytest.raises(ConfigurationError) as info:
            with backend_faults("fetch"):
                raise ConfigurationError("bad")
        assert type(info.value) is ConfigurationError

    def test_no_error_is_transparent(self) -> None:
        with backend_faults("count"):
            value = 1
        assert value == 1
