# storefront/core/errors.py
from fastapi import HTTPException, status


class ValidationError(HTTPException):
    """A required field is missing or malformed. Raised before any database call."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"field": field, "message": message},
        )


class StatusTransitionError(HTTPException):
    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Cannot change quotation status from '{current}' to '{requested}'",
        )


class RemoteOperationError(HTTPException):
    """A database write failed. The detail stays generic; the cause goes to the log."""

    def __init__(self, message: str = "The operation failed. Please try again."):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


class AuthorizationError(HTTPException):
    def __init__(self, message: str = "Access denied"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=message)
