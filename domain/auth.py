"""Forwards credentials to the remote login service.

Nothing is stored. When the remote cannot be reached at all a single demo
account still works so the site can be shown off offline.
"""

import logging
import time
from typing import Any, Self

import httpx

from domain.errors import UpstreamUnavailable
from domain.models import Credential, Session
from domain.remote import RemoteEndpoint, post_json, remote_client_factory


logger = logging.getLogger(__name__)


INVALID_CREDENTIALS = "Invalid credentials"
INVALID_DEMO_CREDENTIALS = "Invalid username or password"


def timestamp_ms() -> int:
    return int(time.time() * 1000)


class LoginResult:
    def __init__(self, status_code: int, body: dict[str, Any]) -> None:
        self.status_code = status_code
        self.body = body

    def __repr__(self) -> str:
        return f"<LoginResult(status_code={self.status_code})>"

    @property
    def ok(self) -> bool:
        return self.status_code == 200

    @classmethod
    def accepted(cls, session: Session) -> Self:
        return cls(200, session.to_dict())

    @classmethod
    def rejected(cls, message: str = INVALID_CREDENTIALS) -> Self:
        return cls(401, {"success": False, "message": message})


class AuthService:
    def __init__(
        self,
        endpoint: RemoteEndpoint,
        *,
        http_client: httpx.AsyncClient | None = None,
        demo_username: str = "demouser",
        demo_password: str = "demo123",
    ) -> None:
        self.endpoint = endpoint
        self.http_client = (
            remote_client_factory(endpoint.timeout)
            if http_client is None
            else http_client
        )
        self.demo_username = demo_username
        self.demo_password = demo_password

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def login(self, credential: Credential) -> LoginResult:
        logger.info("Login attempt for %s", credential.username)
        try:
            resp = await post_json(
                self.http_client,
                self.endpoint,
                {"username": credential.username, "password": credential.password},
            )
        except UpstreamUnavailable as e:
            if not e.unreachable:
                logger.info("Remote rejected %s: %s", credential.username, e)
                return LoginResult.rejected()
            logger.warning("Auth service unreachable, trying demo account: %s", e)
            return self.demo_login(credential)

        return self.remote_result(credential, resp)

    def remote_result(
        self, credential: Credential, resp: httpx.Response
    ) -> LoginResult:
        try:
            data = resp.json()
        except ValueError:
            data = None

        if isinstance(data, dict) and not data.get("success"):
            logger.info("Authentication failed for %s", credential.username)
            return LoginResult.rejected()

        # A 2xx we cannot read is still a yes from the remote.
        data = data if isinstance(data, dict) else {}
        token = data.get("token")
        user = data.get("user")
        if not (isinstance(token, str) and token):
            token = f"lambda-token-{timestamp_ms()}"
        if not isinstance(user, dict):
            user = {"username": credential.username, "name": "User"}
        session = Session(token=token, user=user)
        logger.info("Authentication successful for %s", credential.username)
        return LoginResult.accepted(session)

    def demo_login(self, credential: Credential) -> LoginResult:
        if (
            credential.username == self.demo_username
            and credential.password == self.demo_password
        ):
            logger.info("Demo login successful for %s", credential.username)
            return LoginResult.accepted(
                Session(
                    token=f"demo-token-{timestamp_ms()}",
                    user={
                        "id": "demo-user",
                        "username": credential.username,
                        "name": "Demo Chef",
                    },
                    message="Login successful (demo mode)",
                )
            )
        return LoginResult.rejected(INVALID_DEMO_CREDENTIALS)

    async def logout(self) -> dict[str, Any]:
        return {"success": True, "message": "Logout successful"}
