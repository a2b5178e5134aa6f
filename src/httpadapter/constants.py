"""
Package-wide constants for httpadapter.

Defaults, HTTP status codes and the parameter keys that carry redirect
chain metadata alongside a request or response.
"""

# Redirect defaults
DEFAULT_MAX_REDIRECTS = 5
DEFAULT_STRICT_REDIRECTS = False
DEFAULT_THROW_ON_MAX_REDIRECTS = True

# Network defaults
DEFAULT_TIMEOUT_SECONDS = 30.0
MAX_TIMEOUT_SECONDS = 600.0
DEFAULT_PROTOCOL_VERSION = "1.1"
SUPPORTED_PROTOCOL_VERSIONS = ("1.0", "1.1")

# Parameter keys for chain metadata
PARENT_REQUEST = "parent_request"
REDIRECT_COUNT = "redirect_count"
EFFECTIVE_URL = "effective_url"

# HTTP methods
METHOD_GET = "GET"
METHOD_HEAD = "HEAD"
METHOD_POST = "POST"
METHOD_PUT = "PUT"
METHOD_PATCH = "PATCH"
METHOD_DELETE = "DELETE"
METHOD_OPTIONS = "OPTIONS"
METHOD_TRACE = "TRACE"
METHOD_CONNECT = "CONNECT"
SUPPORTED_METHODS = (
    METHOD_GET,
    METHOD_HEAD,
    METHOD_POST,
    METHOD_PUT,
    METHOD_PATCH,
    METHOD_DELETE,
    METHOD_OPTIONS,
    METHOD_TRACE,
    METHOD_CONNECT,
)

# HTTP status codes
HTTP_STATUS_MULTIPLE_CHOICES = 300
HTTP_STATUS_FOUND = 302
HTTP_STATUS_SEE_OTHER = 303
HTTP_STATUS_BAD_REQUEST = 400

# Headers
HEADER_LOCATION = "Location"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CONTENT_LENGTH = "Content-Length"
PAYLOAD_HEADERS = (HEADER_CONTENT_TYPE, HEADER_CONTENT_LENGTH)

CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"

# Logging
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * 1024 * 1024
MIN_LOG_FILE_SIZE_BYTES = 1024
DEFAULT_LOG_BACKUP_COUNT = 5
SERVICE_NAME = "httpadapter"
DEFAULT_LOG_FILE = "logs/httpadapter.log"
