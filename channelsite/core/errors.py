"""
Error taxonomy for backend calls and dashboard operations.

Backend failures come in three flavours and are all handled the same way by
the panels (log, then toast the raw message for user-initiated mutations):

- TransportError: the request never got a usable response (network, timeout)
- BackendRejectedError: the backend answered with a rejection (constraint
  violation, permission denial, auth admin error)
- EmbeddedQueryError: execute_sql answered successfully but carried an
  ``error`` key in its payload
"""


class BackendError(Exception):
    """Base class for every failure coming back from the backend."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(BackendError):
    pass


class BackendRejectedError(BackendError):
    pass


class EmbeddedQueryError(BackendError):
    pass


class UnsupportedOperation(Exception):
    """Raised when a section is asked to do something it does not offer."""

    def __init__(self, section_id: str, operation: str):
        super().__init__(f"Section '{section_id}' does not support '{operation}'")
        self.section_id = section_id
        self.operation = operation


class RowNotFound(Exception):
    def __init__(self, row_id: str):
        super().__init__(f"Row '{row_id}' is not in the current list")
        self.row_id = row_id
