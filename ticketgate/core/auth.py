# ticketgate/core/auth.py
"""Client-credentials gate in front of ticket issuance.

The caller presents a client id/secret pair; we exchange it with the token
authority and only care whether the exchange succeeds. No scopes are checked.
"""
import logging
from dataclasses import dataclass

import httpx
from fastapi import Depends

from ticketgate.core.config import Settings, get_settings
from ticketgate.core.errors import Unauthorized

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerifiedIdentity:
    client_id: str
    access_token: str
    token_type: str | None = None
    expires_in: int | None = None
    scope: str | None = None


class IdentityVerifier:
    def __init__(
        self,
        domain: str | None,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.domain = domain
        self.timeout = timeout
        self.transport = transport

    @property
    def token_endpoint(self) -> str:
        return f"https://{self.domain}/oauth/token"

    @property
    def audience(self) -> str:
        return f"https://{self.domain}/api/v2/"

    def verify(self, client_id: str | None, client_secret: str | None) -> VerifiedIdentity:
        if not client_id or not client_secret:
            raise Unauthorized("Unauthorized: Missing client credentials")
        if not self.domain:
            logger.error("AUTH_DOMAIN is not configured, rejecting credentials")
            raise Unauthorized()

        data = {
            "audience": self.audience,
            "grant_type": "client_credentials",
            "client_id": client_id,
            "client_secret": client_secret,
        }
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(self.token_endpoint, data=data)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Token exchange rejected for client %s: %s %s",
                client_id, exc.response.status_code, exc.response.text,
            )
            raise Unauthorized() from exc
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Token exchange failed for client %s: %s", client_id, exc)
            raise Unauthorized() from exc

        return VerifiedIdentity(
            client_id=client_id,
            access_token=payload.get("access_token", ""),
            token_type=payload.get("token_type"),
            expires_in=payload.get("expires_in"),
            scope=payload.get("scope"),
        )


def get_verifier(settings: Settings = Depends(get_settings)) -> IdentityVerifier:
    return IdentityVerifier(settings.AUTH_DOMAIN, timeout=settings.AUTH_TIMEOUT)
