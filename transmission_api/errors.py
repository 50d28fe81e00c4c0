"""
Exceptions raised by the Transmission RPC client.

Every failure surfaces as a TransmissionError subclass tagged with an
ErrorKind:
- TransportError: the HTTP request itself failed (connection, timeout)
- HandshakeError: a 409 reply did not carry exactly one session id
- DecodeError: the reply body was not a JSON object
- ApplicationError: the daemon answered with a result other than "success"
"""

from enum import Enum


class ErrorKind(Enum):
    TRANSPORT = "transport"
    HANDSHAKE = "handshake"
    DECODE = "decode"
    APPLICATION = "application"


class TransmissionError(Exception):
    """Base exception for all Transmission RPC errors."""
    kind: ErrorKind


class TransportError(TransmissionError):
    """Raised when the daemon cannot be reached."""
    kind = ErrorKind.TRANSPORT


class HandshakeError(TransmissionError):
    """Raised when the session id renewal cannot be completed."""
    kind = ErrorKind.HANDSHAKE


class DecodeError(TransmissionError):
    """Raised when a response body is not a valid envelope."""
    kind = ErrorKind.DECODE


class ApplicationError(TransmissionError):
    """Raised when the daemon reports a failed call.

    The message is the daemon's result string, unchanged.
    """
    kind = ErrorKind.APPLICATION

    def __init__(self, result: str):
        super().__init__(result)
        self.result = result

    def __str__(self):
        return self.result
