"""
Request and response envelopes of the Transmission RPC protocol.

Every call is a POST of {"method", "tag", "arguments"} to the daemon's
single RPC endpoint, answered by {"result", "tag", "arguments"}. Only a
result of "success" means the call worked; any other value is the error.
"""

import json
from typing import Any, Dict, Tuple

from .errors import ApplicationError, DecodeError


SESSION_HEADER = "X-Transmission-Session-Id"
RPC_PATH = "/transmission/rpc"
SUCCESS = "success"


def normalize_address(address: str) -> str:
    """Add the http:// scheme and the RPC path to an address when missing."""
    if not address.startswith("http"):
        address = f"http://{address}"
    if not address.endswith(RPC_PATH):
        address = f"{address}{RPC_PATH}"
    return address


def build_request(method: str, arguments: Dict[str, Any], tag: int) -> str:
    return json.dumps({
        "method": method,
        "tag": tag,
        "arguments": arguments,
    })


def decode_response(response) -> Tuple[str, int, Dict[str, Any]]:
    """
    Decode a response body into its (result, tag, arguments) parts.

    Args:
        response: requests.Response holding the full body

    Returns:
        The result string, the echoed tag (0 if absent) and the arguments
        object ({} if absent)

    Raises:
        DecodeError: If the body is not a JSON object of the envelope shape
    """
    try:
        payload = response.json()
    except ValueError as e:
        raise DecodeError(f"Invalid JSON in response: {e}") from e

    if not isinstance(payload, dict):
        raise DecodeError(f"Expected a JSON object, got {type(payload).__name__}")

    result = payload.get("result", "")
    if not isinstance(result, str):
        raise DecodeError(f"Invalid result value: {result!r}")

    arguments = payload.get("arguments") or {}
    if not isinstance(arguments, dict):
        raise DecodeError(f"Invalid arguments value: {arguments!r}")

    return result, payload.get("tag", 0), arguments


def check_result(result: str) -> None:
    if result != SUCCESS:
        raise ApplicationError(result)
