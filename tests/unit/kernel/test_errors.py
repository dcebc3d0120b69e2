"""Unit tests for the kernel error hierarchy."""
from __future__ import annotations

from mp_metrics.kernel.errors import (
    ApplicationError,
    BaseError,
    ConfigError,
    DumpWriteError,
    InfrastructureError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


class TestBaseError:
    def test_default_code(self) -> None:
        assert BaseError("x").code == "base_error"

    def test_str_is_message(self) -> None:
        assert str(BaseError("hello")) == "hello"

    def test_custom_code_and_detail(self) -> None:
        err = BaseError("x", code="custom", detail={"k": 1})
        assert err.to_dict() == {"code": "custom", "message": "x", "detail": {"k": 1}}

    def test_detail_is_copied(self) -> None:
        detail = {"k": 1}
        BaseError("x", detail=detail).detail["k"] = 2
        assert detail == {"k": 1}

    def test_cause_chained(self) -> None:
        cause = OSError("disk")
        err = BaseError("x", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == repr(cause)

    def test_log_fields_flatten_detail(self) -> None:
        err = BaseError("boom", code="c", detail={"path": "/x"})
        assert err.log_fields() == {"error_code": "c", "error": "boom", "path": "/x"}

    def test_repr(self) -> None:
        assert repr(ApplicationError("m")) == "ApplicationError(code='application_error', message='m')"


class TestHierarchy:
    def test_dump_write_error(self) -> None:
        err = DumpWriteError("/tmp/x.prom", cause=PermissionError("denied"))
        assert isinstance(err, InfrastructureError)
        assert err.code == "dump_write_error"
        assert str(err) == "Could not write metrics dump to '/tmp/x.prom'"
        fields = err.log_fields()
        assert fields["path"] == "/tmp/x.prom"
        assert "denied" in fields["cause"]

    def test_missing_setting(self) -> None:
        err = MissingRequiredSettingError("METRICS_PROJECT_NAME")
        assert isinstance(err, ConfigError)
        assert isinstance(err, ApplicationError)
        assert err.detail == {"setting": "METRICS_PROJECT_NAME"}

    def test_invalid_setting(self) -> None:
        err = InvalidSettingValueError("dump_interval", -1.0, "must be greater than zero")
        assert err.detail["reason"] == "must be greater than zero"
        assert "dump_interval" in str(err)
