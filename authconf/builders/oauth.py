"""
OAuth client builder.

Providers are configured with scalar keys (``facebook.id``,
``facebook.secret``, ...). The generic OAuth 2.0 client needs id, secret,
authorization URL and token URL.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..clients import Client, OAuth2Client, OAuthClient
from ..constants import (
    DROPBOX_ID,
    DROPBOX_SECRET,
    FACEBOOK_FIELDS,
    FACEBOOK_ID,
    FACEBOOK_SCOPE,
    FACEBOOK_SECRET,
    FOURSQUARE_ID,
    FOURSQUARE_SECRET,
    GITHUB_ID,
    GITHUB_SCOPE,
    GITHUB_SECRET,
    GOOGLE_ID,
    GOOGLE_SCOPE,
    GOOGLE_SECRET,
    LINKEDIN_ID,
    LINKEDIN_SCOPE,
    LINKEDIN_SECRET,
    OAUTH2_AUTH_URL,
    OAUTH2_CLIENT_AUTHENTICATION_METHOD,
    OAUTH2_CUSTOM_PARAMS,
    OAUTH2_ID,
    OAUTH2_PROFILE_ATTRS,
    OAUTH2_PROFILE_ID,
    OAUTH2_PROFILE_PATH,
    OAUTH2_PROFILE_URL,
    OAUTH2_PROFILE_VERB,
    OAUTH2_SCOPE,
    OAUTH2_SECRET,
    OAUTH2_TOKEN_URL,
    OAUTH2_WITH_STATE,
    TWITTER_ID,
    TWITTER_INCLUDE_EMAIL,
    TWITTER_SECRET,
    WINDOWSLIVE_ID,
    WINDOWSLIVE_SECRET,
    YAHOO_ID,
    YAHOO_SECRET,
)
from ..faults import ConfigInvalidFault
from .base import AbstractBuilder

logger = logging.getLogger("authconf.builders.oauth")

_PROFILE_VERBS = ("GET", "POST")


class OAuthBuilder(AbstractBuilder):
    """One ``try_create_<provider>_client`` per provider."""

    def _credentials(self, id_key: str, secret_key: str) -> Optional[tuple[str, str]]:
        key = self.properties.get_str(id_key)
        secret = self.properties.get_str(secret_key)
        if key is None or secret is None:
            return None
        return key, secret

    def _add(
        self,
        clients: list[Client],
        provider: str,
        id_key: str,
        secret_key: str,
        scope_key: Optional[str] = None,
        **options: Any,
    ) -> None:
        credentials = self._credentials(id_key, secret_key)
        if credentials is None:
            return
        client = OAuthClient(
            name=provider,
            provider=provider,
            key=credentials[0],
            secret=credentials[1],
            scope=self.properties.get_str(scope_key) if scope_key else None,
            options={k: v for k, v in options.items() if v is not None},
        )
        logger.debug("Built OAuth client %s", client.name)
        clients.append(client)

    # ------------------------------------------------------------------------
    # Providers
    # ------------------------------------------------------------------------

    def try_create_facebook_client(self, clients: list[Client]) -> None:
        self._add(
            clients, "facebook", FACEBOOK_ID, FACEBOOK_SECRET, FACEBOOK_SCOPE,
            fields=self.properties.get_str(FACEBOOK_FIELDS),
        )

    def try_create_twitter_client(self, clients: list[Client]) -> None:
        self._add(
            clients, "twitter", TWITTER_ID, TWITTER_SECRET,
            include_email=self.properties.get_bool(TWITTER_INCLUDE_EMAIL, default=False),
        )

    def try_create_dropbox_client(self, clients: list[Client]) -> None:
        self._add(clients, "dropbox", DROPBOX_ID, DROPBOX_SECRET)

    def try_create_github_client(self, clients: list[Client]) -> None:
        self._add(clients, "github", GITHUB_ID, GITHUB_SECRET, GITHUB_SCOPE)

    def try_create_yahoo_client(self, clients: list[Client]) -> None:
        self._add(clients, "yahoo", YAHOO_ID, YAHOO_SECRET)

    def try_create_google_client(self, clients: list[Client]) -> None:
        self._add(clients, "google", GOOGLE_ID, GOOGLE_SECRET, GOOGLE_SCOPE)

    def try_create_foursquare_client(self, clients: list[Client]) -> None:
        self._add(clients, "foursquare", FOURSQUARE_ID, FOURSQUARE_SECRET)

    def try_create_windowslive_client(self, clients: list[Client]) -> None:
        self._add(clients, "windowslive", WINDOWSLIVE_ID, WINDOWSLIVE_SECRET)

    def try_create_linkedin_client(self, clients: list[Client]) -> None:
        self._add(clients, "linkedin", LINKEDIN_ID, LINKEDIN_SECRET, LINKEDIN_SCOPE)

    # ------------------------------------------------------------------------
    # Generic OAuth 2.0
    # ------------------------------------------------------------------------

    def try_create_generic_oauth2_client(self, clients: list[Client]) -> None:
        """
        Generic OAuth 2.0 client.

        ``oauth2.profileAttrs`` and ``oauth2.customParams`` are comma
        separated ``name:value`` pairs.
        """
        props = self.properties
        credentials = self._credentials(OAUTH2_ID, OAUTH2_SECRET)
        auth_url = props.get_str(OAUTH2_AUTH_URL)
        token_url = props.get_str(OAUTH2_TOKEN_URL)
        if credentials is None or auth_url is None or token_url is None:
            return

        verb = props.get_str(OAUTH2_PROFILE_VERB, default="GET").upper()
        if verb not in _PROFILE_VERBS:
            raise ConfigInvalidFault(OAUTH2_PROFILE_VERB, f"expected GET or POST, got {verb!r}")

        client = OAuth2Client(
            name="oauth2",
            key=credentials[0],
            secret=credentials[1],
            auth_url=auth_url,
            token_url=token_url,
            profile_url=props.get_str(OAUTH2_PROFILE_URL),
            profile_path=props.get_str(OAUTH2_PROFILE_PATH),
            profile_id=props.get_str(OAUTH2_PROFILE_ID),
            profile_verb=verb,
            scope=props.get_str(OAUTH2_SCOPE),
            with_state=props.get_bool(OAUTH2_WITH_STATE, default=False),
            client_authentication_method=props.get_str(OAUTH2_CLIENT_AUTHENTICATION_METHOD),
            profile_attrs=self._pairs(OAUTH2_PROFILE_ATTRS),
            custom_params=self._pairs(OAUTH2_CUSTOM_PARAMS),
        )
        logger.debug("Built generic OAuth2 client")
        clients.append(client)

    def _pairs(self, key: str) -> dict[str, str]:
        pairs: dict[str, str] = {}
        for item in self.properties.get_list(key):
            name, sep, value = item.partition(":")
            if not sep or not name.strip():
                raise ConfigInvalidFault(key, f"expected name:value pairs, got {item!r}")
            pairs[name.strip()] = value.strip()
        return pairs
