from enum import Enum, IntEnum


class HttpStatus(IntEnum):
    OK = 200
    CREATED = 201
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500


class ErrorCode(str, Enum):
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_LICENSE_FORMAT = "INVALID_LICENSE_FORMAT"
    LICENSE_NOT_FOUND = "LICENSE_NOT_FOUND"
    LICENSE_INACTIVE = "LICENSE_INACTIVE"
    LICENSE_EXPIRED = "LICENSE_EXPIRED"
    ACTIVATION_LIMIT_EXCEEDED = "ACTIVATION_LIMIT_EXCEEDED"
    NOT_ACTIVATED_ON_DOMAIN = "NOT_ACTIVATED_ON_DOMAIN"
    VALIDATION_ERROR = "VALIDATION_ERROR"


class LicenseStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    EXPIRED = "EXPIRED"
    REVOKED = "REVOKED"
    SUSPENDED = "SUSPENDED"


API_BASE_PATH = "/api/v1"

ENDPOINT_LICENSES_ACTIVATE = f"{API_BASE_PATH}/licenses/activate"
ENDPOINT_LICENSES_VALIDATE = f"{API_BASE_PATH}/licenses/validate"
ENDPOINT_LICENSES_GET = API_BASE_PATH + "/licenses/{license_key}"
ENDPOINT_LICENSES_FEATURES = API_BASE_PATH + "/licenses/{license_key}/features"

HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ACCEPT = "Accept"
HEADER_USER_AGENT = "User-Agent"
CONTENT_TYPE_JSON = "application/json"
USER_AGENT = "license_checker-sdk"

DEFAULT_TIMEOUT_SECONDS = 15
DEFAULT_CONNECT_TIMEOUT_SECONDS = 10

RESPONSE_KEY_SUCCESS = "success"
RESPONSE_KEY_DATA = "data"
RESPONSE_KEY_ERROR = "error"
RESPONSE_KEY_CODE = "code"
RESPONSE_KEY_MESSAGE = "message"

DEFAULT_ERROR_MESSAGE = "API error"
LICENSE_NOT_FOUND_MESSAGE = "License not found"
INVALID_JSON_MESSAGE = "Invalid JSON response from server"
