"""
Transmission API - Control a Transmission daemon over its JSON RPC protocol.

Provides a client that lists torrents and starts, stops, verifies,
reannounces or removes them, plus a small command-line front-end.
"""

from .client import TransmissionClient
from .config import Config
from .errors import (
    ApplicationError,
    DecodeError,
    ErrorKind,
    HandshakeError,
    TransmissionError,
    TransportError,
)
from .models import File, FileStats, Peer, Torrent, TorrentStatus

__version__ = "0.1.0"
__all__ = [
    "TransmissionClient",
    "Config",
    "TransmissionError",
    "TransportError",
    "HandshakeError",
    "DecodeError",
    "ApplicationError",
    "ErrorKind",
    "Torrent",
    "TorrentStatus",
    "File",
    "FileStats",
    "Peer",
]
