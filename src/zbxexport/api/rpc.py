"""JSON-RPC transport shared by authentication and the API client."""

import logging

import httpx
from pydantic import ValidationError

from .exceptions import APIError, MalformedResponseError, NetworkError, TimeoutError
from ..models.rpc import RPCRequest, RPCResponse

logger = logging.getLogger(__name__)

HEADERS = {"Content-Type": "application/json-rpc"}


async def call(client: httpx.AsyncClient, url: str, request: RPCRequest) -> RPCResponse:
    """Post one JSON-RPC request and decode the response envelope.

    The envelope is returned as-is; callers decide what an error object means.

    Args:
        client: HTTP client
        url: JSON-RPC endpoint
        request: Request to send

    Returns:
        Decoded response envelope

    Raises:
        TimeoutError: On timeout
        NetworkError: On transport errors
        APIError: On HTTP error status
        MalformedResponseError: If the body is not a JSON-RPC envelope
    """
    method = request.method
    try:
        response = await client.post(url, json=request.to_body(), headers=HEADERS)
    except httpx.TimeoutException:
        raise TimeoutError(f"Request {method} to {url} timed out")
    except (httpx.RequestError, httpx.InvalidURL) as e:
        raise NetworkError(f"Network error during {method}: {e}")

    logger.debug("%s response: %s", method, response.text)

    if response.status_code >= 400:
        raise APIError(
            f"{method} failed with HTTP {response.status_code}",
            status_code=response.status_code,
        )

    try:
        payload = response.json()
    except ValueError as e:
        raise MalformedResponseError(f"Invalid JSON in {method} response: {e}")

    try:
        return RPCResponse.model_validate(payload)
    except ValidationError as e:
        raise MalformedResponseError(f"Invalid {method} response envelope: {e}")
