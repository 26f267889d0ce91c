"""Zabbix API client."""

from typing import Any

import httpx

from . import rpc
from .auth import AuthHandler
from .exceptions import MalformedResponseError, RPCError
from ..models.config import Settings
from ..models.rpc import RPCRequest

INTERFACE_FIELDS = ["interfaceid", "ip", "port", "type", "available"]


class ZabbixClient:
    """Async client for the Zabbix JSON-RPC API.

    Requests are sent one at a time; there is no retry.
    """

    def __init__(
        self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None
    ) -> None:
        """Initialize Zabbix client.

        Args:
            settings: Export settings
            transport: Optional HTTP transport (used by tests)
        """
        self.settings = settings
        self.url = settings.url
        self.transport = transport
        self.auth_handler = AuthHandler(
            url=settings.url,
            user=settings.user,
            verify_ssl=settings.verify_ssl,
            timeout=settings.timeout,
            transport=transport,
        )
        self._token: str | None = None
        self._client: httpx.AsyncClient | None = None
        self._request_id = 1

    async def __aenter__(self) -> "ZabbixClient":
        """Async context manager entry.

        Returns:
            Self
        """
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def connect(self) -> None:
        """Authenticate and open the HTTP client."""
        self._token = await self.auth_handler.login(self.settings.password)
        self._client = httpx.AsyncClient(
            verify=self.settings.verify_ssl,
            timeout=self.settings.timeout,
            transport=self.transport,
        )

    async def close(self) -> None:
        """Close the client connection."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def token(self) -> str | None:
        """Session token, set once connected."""
        return self._token

    def _ensure_connected(self) -> httpx.AsyncClient:
        """Ensure client is connected.

        Returns:
            HTTP client

        Raises:
            RuntimeError: If not connected
        """
        if not self._client or not self._token:
            raise RuntimeError("Client not connected. Use async with or call connect().")
        return self._client

    async def _request(self, method: str, params: dict[str, Any]) -> Any:
        """Call an authenticated API method.

        Args:
            method: JSON-RPC method
            params: Method parameters

        Returns:
            The envelope's ``result``

        Raises:
            RPCError: If the envelope carries an error
            APIError: On HTTP or envelope errors
            NetworkError: On network errors
            TimeoutError: On timeout
        """
        client = self._ensure_connected()
        self._request_id += 1
        request = RPCRequest(
            method=method, params=params, auth=self._token, id=self._request_id
        )

        envelope = await rpc.call(client, self.url, request)
        if envelope.failed:
            error = envelope.error
            raise RPCError(method, error.code, error.message, error.data)
        return envelope.result

    async def _get_list(self, method: str, params: dict[str, Any]) -> list[Any]:
        """Call a ``*.get`` method whose result must be a list.

        A null result is treated as an empty list.
        """
        result = await self._request(method, params)
        if result is None:
            return []
        if not isinstance(result, list):
            raise MalformedResponseError(
                f"{method} returned {type(result).__name__}, expected a list"
            )
        return result

    async def get_hosts(self) -> list[Any]:
        """Get all hosts with groups, parent templates and interfaces.

        Returns:
            Raw host records
        """
        return await self._get_list(
            "host.get",
            {
                "output": "extend",
                "selectGroups": "extend",
                "selectParentTemplates": "extend",
                "selectInterfaces": INTERFACE_FIELDS,
            },
        )

    async def get_items(self, hostid: str) -> list[Any]:
        """Get all items of a host.

        Args:
            hostid: Host ID

        Returns:
            Raw item records
        """
        return await self._get_list("item.get", {"output": "extend", "hostids": [hostid]})

    async def get_triggers(self, hostid: str) -> list[Any]:
        """Get all triggers of a host.

        Args:
            hostid: Host ID

        Returns:
            Raw trigger records
        """
        return await self._get_list("trigger.get", {"output": "extend", "hostids": [hostid]})
