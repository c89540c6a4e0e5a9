"""Tests for the flyover exception taxonomy.

Validates:
- FlyoverError base attributes and ``to_error_dict()`` keys
- Category and code defaults per subclass
- ServiceError carries status code and body
- All domain exceptions are FlyoverError subclasses
"""

from __future__ import annotations

from iss_flyover.core.config import ConfigValidationError
from iss_flyover.core.exceptions import (
    FlyoverError,
    ParseError,
    ServiceError,
    TransportError,
)


class TestFlyoverErrorBase:
    """FlyoverError base class behavior."""

    def test_default_attributes(self) -> None:
        err = FlyoverError("boom")
        assert err.message == "boom"
        assert err.stage == ""
        assert err.code == ""
        assert err.category == "unknown"

    def test_str_is_message(self) -> None:
        err = FlyoverError("human-readable error")
        assert str(err) == "human-readable error"

    def test_explicit_code_overrides_default(self) -> None:
        err = ParseError("x", code="CUSTOM")
        assert err.code == "CUSTOM"

    def test_to_error_dict_keys(self) -> None:
        err = FlyoverError("x", stage="locate_address", code="C")
        d = err.to_error_dict()
        assert set(d.keys()) == {"category", "code", "stage", "message"}
        assert d["message"] == "x"
        assert d["stage"] == "locate_address"
        assert d["code"] == "C"


class TestCategories:
    """Each subclass reports its own category and code."""

    def test_transport_error(self) -> None:
        err = TransportError("refused", stage="locate_address")
        assert err.category == "transport"
        assert err.code == "TRANSPORT_FAILED"

    def test_service_error(self) -> None:
        err = ServiceError("bad", status_code=503, body="down", stage="predict_passes")
        assert err.category == "service"
        assert err.code == "SERVICE_ERROR"
        assert err.status_code == 503
        assert err.body == "down"
        assert err.stage == "predict_passes"

    def test_service_error_dict_includes_status(self) -> None:
        d = ServiceError("bad", status_code=500).to_error_dict()
        assert d["status_code"] == 500
        assert d["category"] == "service"

    def test_parse_error(self) -> None:
        err = ParseError("no ip")
        assert err.category == "parse"
        assert err.code == "PARSE_FAILED"

    def test_config_error(self) -> None:
        err = ConfigValidationError("KEY", "v", "must not be empty")
        assert err.category == "config"
        assert err.stage == "config"
        assert err.code == "CONFIG_VALIDATION_FAILED"


class TestAllExceptionsAreFlyoverError:
    """Every domain exception can be caught as FlyoverError."""

    def test_subclasses(self) -> None:
        for cls in (TransportError, ServiceError, ParseError, ConfigValidationError):
            assert issubclass(cls, FlyoverError), cls.__name__
