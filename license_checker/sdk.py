import json
import logging
from typing import Any, Optional
from urllib.parse import quote

from typing_extensions import Self

from .constants import (
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_ERROR_MESSAGE,
    DEFAULT_TIMEOUT_SECONDS,
    ENDPOINT_LICENSES_ACTIVATE,
    ENDPOINT_LICENSES_FEATURES,
    ENDPOINT_LICENSES_GET,
    ENDPOINT_LICENSES_VALIDATE,
    INVALID_JSON_MESSAGE,
    LICENSE_NOT_FOUND_MESSAGE,
    RESPONSE_KEY_CODE,
    RESPONSE_KEY_DATA,
    RESPONSE_KEY_ERROR,
    RESPONSE_KEY_MESSAGE,
    RESPONSE_KEY_SUCCESS,
    ErrorCode,
    HttpStatus,
)
from .exceptions import (
    ActivationLimitReachedException,
    APIException,
    ExpiredLicenseKeyException,
    LicenseNotFoundException,
    MalformedResponseException,
    ValidationException,
)
from .http import HttpClient, HttpResponse, RequestsHttpClient

logger = logging.getLogger(__name__)


def _error_object(envelope: dict) -> Optional[dict]:
    error = envelope.get(RESPONSE_KEY_ERROR)
    return error if isinstance(error, dict) else None


def _error_field(error: Optional[dict], key: str, default: str) -> str:
    if error is None or error.get(key) is None:
        return default
    return str(error[key])


def _reject_constant(name: str):
    # NaN and Infinity are not part of JSON.
    raise ValueError(f"Invalid JSON constant: {name}")


class LicenseExceptionFactory:
    license_expired_code = ErrorCode.LICENSE_EXPIRED.value
    activation_limit_code = ErrorCode.ACTIVATION_LIMIT_EXCEEDED.value
    license_not_found_code = ErrorCode.LICENSE_NOT_FOUND.value

    # Checked in insertion order, before the HTTP status is looked at.
    error_code_map = {
        license_expired_code: ExpiredLicenseKeyException,
        activation_limit_code: ActivationLimitReachedException,
        license_not_found_code: LicenseNotFoundException,
    }

    @classmethod
    def get_exception(cls, envelope: dict, status_code: int) -> APIException:
        error = _error_object(envelope)
        error_code = _error_field(
            error, RESPONSE_KEY_CODE, ErrorCode.VALIDATION_ERROR.value
        )
        error_message = _error_field(error, RESPONSE_KEY_MESSAGE, DEFAULT_ERROR_MESSAGE)

        exception_class = cls.error_code_map.get(error_code)
        if exception_class is not None:
            return exception_class(error_message, error_code)

        if status_code == HttpStatus.BAD_REQUEST:
            return ValidationException(error_message, error_code)

        return APIException(error_message, error_code, error)

    @classmethod
    def get_not_found_exception(cls, envelope: dict) -> Optional[APIException]:
        error = _error_object(envelope)
        if error is None or error.get(RESPONSE_KEY_CODE) != cls.license_not_found_code:
            return None

        return LicenseNotFoundException(
            _error_field(error, RESPONSE_KEY_MESSAGE, LICENSE_NOT_FOUND_MESSAGE),
            cls.license_not_found_code,
        )


class LicenseChecker:
    """
    Client for the license server's public endpoints.

    Every operation returns the `data` object of a successful response as a
    plain dict and raises an `APIException` subclass otherwise.
    """

    def __init__(
        self,
        base_url: str,
        http_client: Optional[HttpClient] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url.rstrip("/")
        if http_client is None:
            http_client = RequestsHttpClient(
                self.base_url, timeout=timeout, connect_timeout=connect_timeout
            )
        self._http_client = http_client

    @staticmethod
    def _license_path(template: str, license_key: str) -> str:
        return template.format(license_key=quote(license_key, safe=""))

    def _parse_response(self, response: HttpResponse) -> dict:
        try:
            envelope = json.loads(response.body, parse_constant=_reject_constant)
        except (TypeError, ValueError, RecursionError):
            envelope = None

        if not isinstance(envelope, dict):
            raise MalformedResponseException(
                INVALID_JSON_MESSAGE,
                ErrorCode.VALIDATION_ERROR.value,
                {"body": response.body},
            )
        return envelope

    @staticmethod
    def _is_success(envelope: dict) -> bool:
        return bool(envelope.get(RESPONSE_KEY_SUCCESS))

    @staticmethod
    def _get_data(envelope: dict) -> dict[str, Any]:
        data = envelope.get(RESPONSE_KEY_DATA)
        return data if isinstance(data, dict) else {}

    def _handle_response(self, response: HttpResponse) -> dict[str, Any]:
        envelope = self._parse_response(response)
        if not self._is_success(envelope):
            raise LicenseExceptionFactory.get_exception(envelope, response.status)

        return self._get_data(envelope)

    def _post(self, path: str, data: dict) -> HttpResponse:
        logger.debug("POST %s", path)
        return self._http_client.post(path, data)

    def _get(self, path: str) -> HttpResponse:
        logger.debug("GET %s", path)
        return self._http_client.get(path)

    def activate(
        self, license_key: str, domain: str, site_name: Optional[str] = None
    ) -> dict[str, Any]:
        data = {"license_key": license_key, "domain": domain}
        if site_name is not None:
            data["site_name"] = site_name

        response = self._post(ENDPOINT_LICENSES_ACTIVATE, data)
        return self._handle_response(response)

    def validate(self, license_key: str, domain: str) -> dict[str, Any]:
        data = {"license_key": license_key, "domain": domain}

        response = self._post(ENDPOINT_LICENSES_VALIDATE, data)
        return self._handle_response(response)

    def get_license(self, license_key: str) -> dict[str, Any]:
        path = self._license_path(ENDPOINT_LICENSES_GET, license_key)
        response = self._get(path)
        envelope = self._parse_response(response)

        if not self._is_success(envelope):
            # LICENSE_NOT_FOUND wins over the HTTP status here.
            not_found = LicenseExceptionFactory.get_not_found_exception(envelope)
            if not_found is not None:
                raise not_found
            raise LicenseExceptionFactory.get_exception(envelope, response.status)

        return self._get_data(envelope)

    def get_features(self, license_key: str) -> dict[str, Any]:
        path = self._license_path(ENDPOINT_LICENSES_FEATURES, license_key)
        response = self._get(path)
        return self._handle_response(response)

    def close(self) -> None:
        close = getattr(self._http_client, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
