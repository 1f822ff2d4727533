from .constants import ErrorCode, HttpStatus, LicenseStatus
from .exceptions import (
    ActivationLimitReachedException,
    APIException,
    ExpiredLicenseKeyException,
    LicenseNotFoundException,
    MalformedResponseException,
    NetworkException,
    ValidationException,
)
from .http import HttpClient, HttpResponse, RequestsHttpClient
from .sdk import LicenseChecker, LicenseExceptionFactory

__version__ = "1.0.0"

__all__ = [
    "ActivationLimitReachedException",
    "APIException",
    "ErrorCode",
    "ExpiredLicenseKeyException",
    "HttpClient",
    "HttpResponse",
    "HttpStatus",
    "LicenseChecker",
    "LicenseExceptionFactory",
    "LicenseNotFoundException",
    "LicenseStatus",
    "MalformedResponseException",
    "NetworkException",
    "RequestsHttpClient",
    "ValidationException",
]
