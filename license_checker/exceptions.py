from typing import Any, Optional


class APIException(Exception):
    def __init__(
        self,
        message: str,
        error_code: str = "",
        error_details: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.error_details = error_details

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, error_code={self.error_code!r})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.error_code,
            "message": self.message,
            "details": self.error_details,
        }


class MalformedResponseException(APIException):
    ...


class NetworkException(APIException):
    ...


class ValidationException(APIException):
    ...


class LicenseNotFoundException(APIException):
    ...


class ExpiredLicenseKeyException(APIException):
    ...


class ActivationLimitReachedException(APIException):
    ...
