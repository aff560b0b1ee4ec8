from typing import Dict, Optional


class FeedbackError(Exception):
    """Base exception class for feedback service errors"""

    status_code = 500

    def __init__(self, message: str, error_code: str, details: Optional[Dict] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class Unauthorized(FeedbackError):
    """The gateway identity headers are missing"""

    status_code = 401

    def __init__(self, message: str = "expected X-Smarta-Auth-* headers not present"):
        super().__init__(message, "UNAUTHORIZED")


class MalformedInput(FeedbackError):
    """The request body could not be decoded"""

    status_code = 400

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"malformed JSON request body: {detail}", "MALFORMED_INPUT", {"detail": detail})


class InvalidField(FeedbackError):
    """A decoded field holds a value outside its allowed set or format"""

    status_code = 400

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(
            f"invalid value `{value}` for `{field}`",
            "INVALID_FIELD",
            {"field": field, "value": value},
        )


class PersistenceFailure(FeedbackError):
    """The feedback store could not complete an operation"""

    status_code = 500

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(
            f"failed {operation}: {cause}",
            "PERSISTENCE_FAILURE",
            {"operation": operation, "exception_type": type(cause).__name__},
        )
