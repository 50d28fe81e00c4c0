"""
Transmission RPC client for listing and controlling torrents.

Provides the TransmissionClient class, which speaks the daemon's JSON RPC
protocol directly over HTTP. The daemon guards its endpoint with a session
id: a request carrying a missing or stale id is answered with 409 Conflict
and the current id in the X-Transmission-Session-Id header. The client
stores that id and repeats the request once.

Usage:
    from transmission_api import TransmissionClient

    with TransmissionClient("localhost:9091") as client:
        for torrent in client.list_all():
            print(torrent.id, torrent.name)
        client.stop([1, 2])
"""

import itertools
import threading
from typing import Any, Dict, Iterable, List, Optional, Sequence

import requests

from .config import Config
from .errors import HandshakeError, TransportError
from .fields import requested_fields
from .logger import logger
from .models import Torrent
from .rpc import SESSION_HEADER, SUCCESS, build_request, check_result, decode_response, normalize_address


TRANSMISSION_TIMEOUT = Config.TRANSMISSION_TIMEOUT


def torrents_to_ids(torrents: Iterable[Torrent]) -> List[int]:
    return [torrent.id for torrent in torrents]


class TransmissionClient:
    def __init__(
        self,
        address: str,
        username: Optional[str] = "",
        password: Optional[str] = "",
        timeout: Optional[float] = TRANSMISSION_TIMEOUT,
        omit_fields: Optional[Iterable[str]] = None,
    ):
        self.address = normalize_address(address)
        self.username = username or ""
        self.password = password or ""
        self.timeout = timeout
        self.fields = requested_fields(omit_fields)
        self.session_id = ""
        self.session = requests.Session()
        self._lock = threading.Lock()
        self._tags = itertools.count(1)
        logger.info(f"Using {self.address} as Transmission address")

    def close(self) -> None:
        """Release the pooled HTTP connections."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def _auth(self):
        if self.username and self.password:
            return (self.username, self.password)
        return None

    def _post(self, body: str) -> requests.Response:
        with self._lock:
            session_id = self.session_id

        headers = {
            SESSION_HEADER: session_id,
            "Content-Type": "application/json",
        }
        try:
            response = self.session.post(
                self.address,
                data=body,
                headers=headers,
                auth=self._auth(),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to reach Transmission at {self.address}: {e}")
            raise TransportError(str(e)) from e

        logger.debug(f"Transmission response {response.status_code}: {response.text}")
        return response

    def _renew_session(self, response: requests.Response) -> None:
        session_id = response.headers.get(SESSION_HEADER)
        if session_id is None:
            logger.error(f"409 response without {SESSION_HEADER}")
            raise HandshakeError(f"409 response without {SESSION_HEADER}")
        # Repeated headers are folded into one comma separated value
        if not session_id.strip() or "," in session_id:
            logger.error(f"409 response with invalid {SESSION_HEADER}: {session_id!r}")
            raise HandshakeError(f"409 response with invalid {SESSION_HEADER}: {session_id!r}")

        with self._lock:
            self.session_id = session_id
        logger.info("Renewed Transmission session id")

    def _rpc(self, method: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """
        Perform one RPC call and return the arguments of its response.

        A 409 reply renews the session id and the request is sent once more.
        A second 409 is not retried; its body is decoded like any other.

        Raises:
            TransportError: If the HTTP request fails
            HandshakeError: If a 409 reply lacks a usable session id
            DecodeError: If the body is not a JSON envelope
            ApplicationError: If the daemon's result is not "success"
        """
        body = build_request(method, arguments, next(self._tags))
        logger.debug(f"Transmission request: {body}")

        response = self._post(body)
        if response.status_code == 409:
            self._renew_session(response)
            response = self._post(body)

        result, _, response_arguments = decode_response(response)
        if result != SUCCESS:
            logger.warning(f"{method} failed: {result}")
        check_result(result)
        return response_arguments

    # -------------------------------------------------------------------------
    # Torrent Accessors
    # -------------------------------------------------------------------------

    def list_all(self, fields: Optional[Sequence[str]] = None) -> List[Torrent]:
        """Return a snapshot of every torrent, in the daemon's order."""
        arguments = self._rpc("torrent-get", {
            "fields": list(self.fields if fields is None else fields),
        })
        return [Torrent.from_dict(item) for item in arguments.get("torrents") or []]

    # -------------------------------------------------------------------------
    # Torrent Actions
    # -------------------------------------------------------------------------

    def _torrent_action(self, method: str, ids: Sequence[int], **extra) -> None:
        # Without ids the daemon would apply the action to every torrent
        if not ids:
            return
        arguments = {"ids": list(ids)}
        arguments.update(extra)
        self._rpc(method, arguments)

    def start(self, ids: Sequence[int]) -> None:
        self._torrent_action("torrent-start", ids)

    def start_now(self, ids: Sequence[int]) -> None:
        """Start torrents immediately, bypassing the download queue."""
        self._torrent_action("torrent-start-now", ids)

    def stop(self, ids: Sequence[int]) -> None:
        self._torrent_action("torrent-stop", ids)

    def verify(self, ids: Sequence[int]) -> None:
        self._torrent_action("torrent-verify", ids)

    def reannounce(self, ids: Sequence[int]) -> None:
        self._torrent_action("torrent-reannounce", ids)

    def remove(self, ids: Sequence[int], delete_local_data: bool = False) -> None:
        """Remove torrents, optionally deleting their downloaded data."""
        if delete_local_data:
            self._torrent_action("torrent-remove", ids, **{"delete-local-data": True})
        else:
            self._torrent_action("torrent-remove", ids)

    def start_torrents(self, torrents: Iterable[Torrent]) -> None:
        self.start(torrents_to_ids(torrents))

    def start_now_torrents(self, torrents: Iterable[Torrent]) -> None:
        self.start_now(torrents_to_ids(torrents))

    def stop_torrents(self, torrents: Iterable[Torrent]) -> None:
        self.stop(torrents_to_ids(torrents))

    def verify_torrents(self, torrents: Iterable[Torrent]) -> None:
        self.verify(torrents_to_ids(torrents))

    def reannounce_torrents(self, torrents: Iterable[Torrent]) -> None:
        self.reannounce(torrents_to_ids(torrents))

    def remove_torrents(self, torrents: Iterable[Torrent], delete_local_data: bool = False) -> None:
        self.remove(torrents_to_ids(torrents), delete_local_data=delete_local_data)
