""" Module with project-wide constants. """
HTTPS_SCHEME = 'https'
# HTTP status codes at or above this value are treated as failures
ERROR_STATUS_MIN = 400
# Default timeout for HTTP requests, in seconds
DEFAULT_TIMEOUT = 8.0
