"""
OpenID Connect client builder.

``oidc.type.<i>`` selects the provider flavour; google, azure and keycloak
derive the discovery URI when ``oidc.discoveryUri.<i>`` is not given.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..clients import Client, OidcClient, OidcProvider
from ..constants import (
    MAX_NUM_CLIENTS,
    MAX_NUM_CUSTOM_PROPERTIES,
    OIDC_AZURE_TENANT,
    OIDC_CLIENT_AUTHENTICATION_METHOD,
    OIDC_CUSTOM_PARAM_KEY,
    OIDC_CUSTOM_PARAM_VALUE,
    OIDC_DISCOVERY_URI,
    OIDC_ID,
    OIDC_KEYCLOAK_BASE_URI,
    OIDC_KEYCLOAK_REALM,
    OIDC_LOGOUT_URL,
    OIDC_MAX_CLOCK_SKEW,
    OIDC_PREFERRED_JWS_ALGORITHM,
    OIDC_RESPONSE_MODE,
    OIDC_RESPONSE_TYPE,
    OIDC_SCOPE,
    OIDC_SECRET,
    OIDC_TYPE,
    OIDC_USE_NONCE,
)
from ..properties import indexed_key
from .base import AbstractBuilder

logger = logging.getLogger("authconf.builders.oidc")

GOOGLE_DISCOVERY_URI = "https://accounts.google.com/.well-known/openid-configuration"
AZURE_DISCOVERY_URI = "https://login.microsoftonline.com/{tenant}/v2.0/.well-known/openid-configuration"
KEYCLOAK_DISCOVERY_URI = "{base_uri}/realms/{realm}/.well-known/openid-configuration"


class OidcClientBuilder(AbstractBuilder):
    """Builds ``oidc.<i>`` clients for indices with both id and secret."""

    def try_create_oidc_client(self, clients: list[Client]) -> None:
        for i in range(MAX_NUM_CLIENTS + 1):
            client_id = self.properties.get_str(OIDC_ID, i)
            secret = self.properties.get_str(OIDC_SECRET, i)
            if client_id is None or secret is None:
                continue
            client = self._build(i, client_id, secret)
            logger.debug("Built OIDC client %s (%s)", client.name, client.provider.value)
            clients.append(client)

    def _build(self, i: int, client_id: str, secret: str) -> OidcClient:
        props = self.properties
        provider = self.choice(OIDC_TYPE, i, OidcProvider, default=OidcProvider.GENERIC)
        return OidcClient(
            name=indexed_key("oidc", i),
            client_id=client_id,
            secret=secret,
            provider=provider,
            discovery_uri=self._discovery_uri(i, provider),
            use_nonce=props.get_bool(OIDC_USE_NONCE, i),
            preferred_jws_algorithm=props.get_str(OIDC_PREFERRED_JWS_ALGORITHM, i),
            max_clock_skew=props.get_int(OIDC_MAX_CLOCK_SKEW, i),
            client_authentication_method=props.get_str(OIDC_CLIENT_AUTHENTICATION_METHOD, i),
            scope=props.get_str(OIDC_SCOPE, i),
            response_type=props.get_str(OIDC_RESPONSE_TYPE, i),
            response_mode=props.get_str(OIDC_RESPONSE_MODE, i),
            logout_url=props.get_str(OIDC_LOGOUT_URL, i),
            custom_params=self._custom_params(i),
        )

    def _discovery_uri(self, i: int, provider: OidcProvider) -> Optional[str]:
        explicit = self.properties.get_str(OIDC_DISCOVERY_URI, i)
        if explicit is not None:
            return explicit
        if provider is OidcProvider.GOOGLE:
            return GOOGLE_DISCOVERY_URI
        if provider is OidcProvider.AZURE:
            tenant = self.properties.get_str(OIDC_AZURE_TENANT, i, default="common")
            return AZURE_DISCOVERY_URI.format(tenant=tenant)
        if provider is OidcProvider.KEYCLOAK:
            realm = self.require(OIDC_KEYCLOAK_REALM, i)
            base_uri = self.require(OIDC_KEYCLOAK_BASE_URI, i).rstrip("/")
            return KEYCLOAK_DISCOVERY_URI.format(base_uri=base_uri, realm=realm)
        return None

    def _custom_params(self, i: int) -> dict[str, str]:
        # oidc.customParamKey<j>.<i> / oidc.customParamValue<j>.<i>, j = 1..5
        params: dict[str, str] = {}
        for j in range(1, MAX_NUM_CUSTOM_PROPERTIES + 1):
            key = self.properties.get_str(f"{OIDC_CUSTOM_PARAM_KEY}{j}", i)
            value = self.properties.get_str(f"{OIDC_CUSTOM_PARAM_VALUE}{j}", i)
            if key is not None and value is not None:
                params[key] = value
        return params
