from fastapi import status
from typing import Any, Dict, Optional


class FactServiceException(Exception):
    """
    Base exception for fact service errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        detail: str = "An unexpected error occurred",
        code: str = "internal_error",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        context: Optional[Dict[str, Any]] = None
    ):
        self.status_code = status_code
        self.detail = detail
        self.code = code
        self.context = context or {}
        super().__init__(self.detail)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for logging."""
        return {
            "code": self.code,
            "message": self.detail,
            "status_code": self.status_code,
            "context": self.context
        }


class MalformedPayloadError(FactServiceException):
    """Exception raised when an upstream body does not match the provider schema."""

    def __init__(self, provider: str, detail: str):
        super().__init__(
            detail=f"{provider} fact endpoint returned a malformed payload: {detail}",
            code="malformed_payload",
            context={"provider": provider}
        )


class InvalidResponseError(FactServiceException):
    """Exception raised when an upstream body parses but breaks the provider contract."""

    def __init__(self, provider: str, detail: str):
        super().__init__(
            detail=f"{provider} fact endpoint returned {detail}",
            code="invalid_response",
            context={"provider": provider}
        )


class UnknownAnimalError(FactServiceException):
    """Exception raised when the selected animal has no configured endpoint."""

    def __init__(self, animal: str):
        super().__init__(
            detail=f"the animal type does not exist in the configuration file: {animal}",
            code="unknown_animal",
            context={"animal": animal}
        )


class UnsupportedAnimalError(FactServiceException):
    """Exception raised when the selected animal has no adapter."""

    def __init__(self, animal: str):
        super().__init__(
            detail=f"invalid animal type: {animal}",
            code="unsupported_animal",
            context={"animal": animal}
        )


class UpstreamUnreachableError(FactServiceException):
    """Exception raised when the fact endpoint cannot be reached."""

    def __init__(self, endpoint: str, original_exception: Optional[Exception] = None):
        super().__init__(
            detail=f"fact endpoint is unreachable: {endpoint}",
            code="upstream_unreachable",
            context={"endpoint": endpoint}
        )
        self.original_exception = original_exception

        if original_exception is not None:
            self.context["original_error"] = str(original_exception)


class UpstreamError(FactServiceException):
    """Exception raised when the fact endpoint answers with an error status."""

    def __init__(
        self,
        endpoint: str,
        upstream_status: int,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(
            detail=f"fact endpoint {endpoint} responded with status {upstream_status}",
            code="upstream_error",
            context={"endpoint": endpoint, "upstream_status": upstream_status}
        )
        self.original_exception = original_exception

        if original_exception is not None:
            self.context["original_error"] = str(original_exception)


class ConfigLoadError(FactServiceException):
    """Exception raised when the configuration file cannot be loaded at startup."""

    def __init__(
        self,
        detail: str = "configuration file loading error",
        code: str = "config_load_error",
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(detail=detail, code=code, context=context)


class InvalidAddressError(ConfigLoadError):
    """Exception raised when the configured listening address cannot be parsed."""

    def __init__(self, address: str):
        super().__init__(
            detail=f"failed to parse listening address value: {address!r}",
            code="invalid_address",
            context={"address": address}
        )
