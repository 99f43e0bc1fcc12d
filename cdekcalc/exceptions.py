"""Hard failures raised by the CDEK client.

API-reported calculator errors are not exceptions: ``Client.calculate``
returns them as ``CDEKError`` values.
"""


class CDEKClientError(Exception):
    """Base exception for every hard failure of the client."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f'{operation}: {message}')


class CDEKTransportError(CDEKClientError):
    """Network failure, malformed response or request build failure."""


class CDEKAuthError(CDEKClientError):
    """The OAuth endpoint rejected the credentials."""

    def __init__(self, operation: str, error: str, error_description: str):
        self.error = error
        self.error_description = error_description
        super().__init__(operation, f"API error '{error}' ({error_description})")
