"""Authentication handling for the Zabbix API."""

import logging

import httpx

from . import rpc
from .exceptions import APIError, AuthenticationError, NetworkError, TimeoutError
from ..models.rpc import RPCRequest

logger = logging.getLogger(__name__)


class AuthHandler:
    """Exchange credentials for a session token."""

    def __init__(
        self,
        url: str,
        user: str,
        verify_ssl: bool = True,
        timeout: float = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize auth handler.

        Args:
            url: JSON-RPC endpoint
            user: Username
            verify_ssl: Whether to verify SSL certificates
            timeout: Request timeout in seconds
            transport: Optional HTTP transport (used by tests)
        """
        self.url = url
        self.user = user
        self.verify_ssl = verify_ssl
        self.timeout = timeout
        self.transport = transport

    async def login(self, password: str) -> str:
        """Authenticate with ``user.login`` and return the session token.

        Credentials are sent as given; empty values are rejected by the server.

        Args:
            password: User password

        Returns:
            Session token

        Raises:
            AuthenticationError: If the exchange fails or no token is returned
        """
        request = RPCRequest(
            method="user.login",
            params={"user": self.user, "password": password},
        )

        async with httpx.AsyncClient(
            verify=self.verify_ssl, timeout=self.timeout, transport=self.transport
        ) as client:
            try:
                envelope = await rpc.call(client, self.url, request)
            except (NetworkError, TimeoutError) as e:
                raise AuthenticationError(f"Connection failed: {e}")
            except APIError as e:
                raise AuthenticationError(f"Invalid response from server: {e}")

        if envelope.failed:
            error = envelope.error
            message = error.message
            if error.data:
                message = f"{message} {error.data}"
            raise AuthenticationError(f"Authentication failed: {message}")

        token = envelope.result
        if not isinstance(token, str) or not token:
            raise AuthenticationError("Authentication token not received")

        logger.debug("Authenticated as %s", self.user)
        return token
