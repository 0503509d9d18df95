"""
utils/errors.py
---------------
Error taxonomy shared by every layer.
Each error carries the HTTP status the API answers with; the message
is returned to the client unchanged as ``{"error": <message>}``.
"""


class CustomerAPIError(Exception):
    """Base class for all errors surfaced to API clients."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(CustomerAPIError):
    """The request does not satisfy the input contract. Raised before any store access."""

    status_code = 400


class NotFoundError(CustomerAPIError):
    """No row matched the addressed customer code."""

    status_code = 404


class StoreConnectionError(CustomerAPIError):
    """The pool is exhausted, not open, or the store is unreachable."""

    status_code = 500


class QueryError(CustomerAPIError):
    """The store rejected a statement."""

    status_code = 500
