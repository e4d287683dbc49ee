"""
Client for the cmon RPC v2 API.

Only the two calls needed for service discovery are implemented: password
login and ``getAllClusterInfo``. The login session lives in the ``cmon-sid``
cookie held by the shared http client.
"""

from __future__ import annotations

from typing import Any, Protocol

import structlog

from cmon_sd.clients.base import BaseHTTPClient
from cmon_sd.clients.errors import AuthenticationError, CmonRequestError, FetchError
from cmon_sd.topology.models import Cluster

logger = structlog.get_logger()

AUTH_PATH = "/v2/auth"
CLUSTERS_PATH = "/v2/clusters"

REQUEST_STATUS_OK = "Ok"


class ControllerClient(Protocol):
    """What the discovery endpoint needs from a controller client."""

    async def authenticate(self) -> None: ...

    def controller_id(self) -> str: ...

    async def get_all_cluster_info(self, *, with_hosts: bool = True) -> list[Cluster]: ...


def _reply_error(reply: dict[str, Any]) -> str | None:
    """Return the controller's error text, or None for a successful reply."""
    status = reply.get("request_status")
    if status == REQUEST_STATUS_OK:
        return None
    return reply.get("error_string") or f"request status {status or 'missing'}"


class CmonClient(BaseHTTPClient):
    """cmon RPC v2 client authenticating with username and password."""

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        *,
        timeout: float = 30.0,
        verify: bool = False,
    ) -> None:
        super().__init__(base_url, timeout=timeout, verify=verify)
        self._username = username
        self._password = password
        self._controller_id = ""

    def _remember_controller(self, reply: dict[str, Any]) -> None:
        controller_id = reply.get("controller_id")
        if controller_id:
            self._controller_id = str(controller_id)

    def controller_id(self) -> str:
        """ID of the controller, as reported in its most recent reply."""
        return self._controller_id

    async def authenticate(self) -> None:
        """Log in; raises AuthenticationError when the controller refuses."""
        try:
            reply = await self.post(
                AUTH_PATH,
                json={
                    "operation": "authenticateWithPassword",
                    "user_name": self._username,
                    "password": self._password,
                },
            )
        except CmonRequestError as exc:
            raise AuthenticationError(str(exc)) from exc

        self._remember_controller(reply)
        error = _reply_error(reply)
        if error is not None:
            raise AuthenticationError(error)

        logger.debug("cmon_authenticated", user=self._username, controller_id=self._controller_id)

    async def get_all_cluster_info(self, *, with_hosts: bool = True) -> list[Cluster]:
        """Fetch every cluster visible to the user, with hosts when requested."""
        try:
            reply = await self.post(
                CLUSTERS_PATH,
                json={"operation": "getAllClusterInfo", "with_hosts": with_hosts},
            )
        except CmonRequestError as exc:
            raise FetchError(str(exc)) from exc

        self._remember_controller(reply)
        error = _reply_error(reply)
        if error is not None:
            raise FetchError(error)

        clusters = reply.get("clusters")
        if clusters is None:
            return []
        if not isinstance(clusters, list):
            raise FetchError(f"unexpected clusters field: {type(clusters).__name__}")
        return [Cluster.from_dict(c) for c in clusters if isinstance(c, dict)]
