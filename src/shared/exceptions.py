"""Error kinds raised by domain code alongside protean's own exceptions."""


class AccessDenied(Exception):
    """The requester is not allowed to perform the operation."""

    def __init__(self, message="Access denied"):
        super().__init__(message)
        self.message = message


class Unauthenticated(Exception):
    """The operation needs an authenticated requester."""

    def __init__(self, message="Authentication required"):
        super().__init__(message)
        self.message = message
