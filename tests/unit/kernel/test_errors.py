"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

from es_commons.config.validation import ConfigError
from es_commons.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ExternalServiceError,
    InfrastructureError,
    InvalidSortFieldError,
    SerializationError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        assert BaseError("m", detail={"k": 1}).to_dict() == {"code": "base_error", "message": "m", "detail": {"k": 1}}

    def test_cause_is_chained(self) -> None:
        cause = OSError("io")
        err = BaseError("m", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == repr(cause)

    def test_str_is_json(self) -> None:
        payload = json.loads(str(BaseError("m")))
        assert payload["message"] == "m"


class TestHierarchy:
    def test_domain(self) -> None:
        assert issubclass(ValidationError, DomainError)
        assert issubclass(InvalidSortFieldError, ValidationError)

    def test_application(self) -> None:
        assert issubclass(ConfigError, ApplicationError)

    def test_infrastructure(self) -> None:
        assert issubclass(SerializationError, InfrastructureError)
        assert issubclass(ExternalServiceError, InfrastructureError)
        assert issubclass(InfrastructureError, BaseError)


class TestInvalidSortFieldError:
    def test_message_lists_allowed_names(self) -> None:
        err = InvalidSortFieldError("ip", ["operationTime"])
        assert err.message == 'Unknown sort field \'ip\'; allowed sort fields: ["operationTime"]'
        assert err.to_dict()["errors"] == [{"field": "sorts", "value": "ip", "allowed": ["operationTime"]}]


class TestExternalServiceError:
    def test_default_message(self) -> None:
        err = ExternalServiceError("elasticsearch")
        assert err.message == "External service 'elasticsearch' error"
        assert err.status_code is None

    def test_status_code(self) -> None:
        assert ExternalServiceError("elasticsearch", "boom", status_code=503).status_code == 503
