from __future__ import annotations

import logging
import webbrowser
import urllib.parse
from typing import Tuple, Iterable

import httpx
from typing_extensions import override

from ._host import AuthorizationService
from ._types import TokenInfoConfig, AuthorizationInfo, AuthorizationStatus

log: logging.Logger = logging.getLogger(__name__)


def build_reauthorization_url(scopes: Iterable[str], config: TokenInfoConfig) -> str:
    """Build a consent URL that asks only for ``scopes`` and keeps earlier grants."""
    params = {
        "client_id": config.client_id,
        "response_type": "code",
        "redirect_uri": config.redirect_uri,
        "scope": " ".join(scopes),
        "access_type": "offline",
        "include_granted_scopes": "true",
        "prompt": "consent",
    }
    return f"{config.authorize_url}?{urllib.parse.urlencode(params)}"


def fetch_granted_scopes(
    access_token: str,
    config: TokenInfoConfig,
    http_client: httpx.Client | None = None,
) -> Tuple[str, ...]:
    """Ask the token introspection endpoint which scopes ``access_token`` carries.

    HTTP failures are raised as ``httpx.HTTPStatusError``.
    """
    params = {"access_token": access_token}
    if http_client is not None:
        resp = http_client.get(config.tokeninfo_url, params=params, timeout=config.timeout)
    else:
        with httpx.Client() as client:
            resp = client.get(config.tokeninfo_url, params=params, timeout=config.timeout)
    resp.raise_for_status()
    data = resp.json()
    return tuple(str(data.get("scope", "")).split())


class TokenInfoAuthorization(AuthorizationService):
    """Authorization service for running outside the scripting host.

    Compares the scopes carried by an access token against the scopes the project
    declares, using an OAuth 2.0 tokeninfo endpoint.
    """

    def __init__(
        self,
        access_token: str,
        required_scopes: Iterable[str],
        config: TokenInfoConfig,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._access_token = access_token
        self._required_scopes = tuple(required_scopes)
        self._config = config
        self._http_client = http_client

    @property
    def required_scopes(self) -> Tuple[str, ...]:
        return self._required_scopes

    @override
    def get_authorization_info(self) -> AuthorizationInfo:
        granted = fetch_granted_scopes(self._access_token, self._config, self._http_client)
        missing = [scope for scope in self._required_scopes if scope not in granted]
        if not missing:
            return AuthorizationInfo(status=AuthorizationStatus.NOT_REQUIRED, granted_scopes=granted)

        log.debug("Missing scope grants: %s", ", ".join(missing))
        return AuthorizationInfo(
            status=AuthorizationStatus.REQUIRED,
            granted_scopes=granted,
            authorization_url=build_reauthorization_url(missing, self._config),
        )


def open_browser(url: str) -> bool:
    """Open a URL in the default web browser."""
    return webbrowser.open(url)
