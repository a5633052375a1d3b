"""Canonical logging field names.

Structured log lines and context propagation use these keys so rendered
errors look the same wherever they are logged.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EXCEPTION = "exception"

# Classified error fields.
ERROR = "error"
ERROR_KIND = "error_kind"
ERRORS = "errors"
ERROR_ATTRS = "error_attrs"
ERROR_CAUSE = "error_cause"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
