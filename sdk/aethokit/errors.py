from __future__ import annotations


class AethokitError(Exception):
    """Base exception for the Aethokit SDK"""
    pass


class MissingGasKeyError(AethokitError):
    """Raised when a client is built without a usable GAS KEY"""

    def __init__(self) -> None:
        super().__init__("GAS KEY is required to initialize the SDK")


class TransportError(AethokitError):
    """Raised when no response was obtained from the service"""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"http error: {cause}")


class UnexpectedStatusError(AethokitError):
    """Raised when the service answers with a non-2xx status"""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"unexpected response status: {status_code} - {body}")


class DecodeError(AethokitError):
    """Raised when a 2xx body does not match the expected shape"""

    def __init__(self, cause: Exception, body: str):
        self.cause = cause
        self.body = body
        super().__init__(f"serialization error: {cause}")
