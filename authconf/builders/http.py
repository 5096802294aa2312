"""
HTTP authenticator and client builders.

- RestAuthenticatorBuilder: ``rest.<i>`` authenticators
- IndirectHttpClientBuilder: form clients and indirect basic-auth clients
- DirectClientBuilder: the anonymous client and direct basic-auth clients

Clients reference authenticators by name (``formClient.authenticator.<i>``
etc.); the name must resolve in the authenticator registry.
"""

from __future__ import annotations

import logging

from ..authenticators import RestAuthenticator
from ..clients import (
    AnonymousClient,
    Client,
    DirectBasicAuthClient,
    FormClient,
    IndirectBasicAuthClient,
)
from ..constants import (
    ANONYMOUS,
    DIRECTBASICAUTH_AUTHENTICATOR,
    FORMCLIENT_AUTHENTICATOR,
    FORMCLIENT_LOGIN_URL,
    FORMCLIENT_PASSWORD_PARAMETER,
    FORMCLIENT_USERNAME_PARAMETER,
    INDIRECTBASICAUTH_AUTHENTICATOR,
    INDIRECTBASICAUTH_REALM_NAME,
    MAX_NUM_AUTHENTICATORS,
    MAX_NUM_CLIENTS,
    REST_URL,
)
from ..properties import Properties, indexed_key
from ..registry import AuthenticatorRegistry
from .base import AbstractBuilder

logger = logging.getLogger("authconf.builders.http")


class RestAuthenticatorBuilder(AbstractBuilder):

    def try_build_rest_authenticator(self, authenticators: AuthenticatorRegistry) -> None:
        for i in range(MAX_NUM_AUTHENTICATORS + 1):
            url = self.properties.get_str(REST_URL, i)
            if url is None:
                continue
            authenticator = RestAuthenticator(name=indexed_key("rest", i), url=url)
            logger.debug("Built REST authenticator %s -> %s", authenticator.name, url)
            authenticators.add(authenticator.name, authenticator)


class IndirectHttpClientBuilder(AbstractBuilder):
    """Form and indirect basic-auth clients."""

    def __init__(self, properties: Properties, authenticators: AuthenticatorRegistry):
        super().__init__(properties)
        self.authenticators = authenticators

    def try_create_login_form_client(self, clients: list[Client]) -> None:
        props = self.properties
        for i in range(MAX_NUM_CLIENTS + 1):
            login_url = props.get_str(FORMCLIENT_LOGIN_URL, i)
            authenticator_name = props.get_str(FORMCLIENT_AUTHENTICATOR, i)
            if login_url is None or authenticator_name is None:
                continue
            client = FormClient(
                name=indexed_key("form", i),
                login_url=login_url,
                authenticator=self.get_authenticator(
                    authenticator_name,
                    self.authenticators,
                    referenced_by=indexed_key(FORMCLIENT_AUTHENTICATOR, i),
                ),
                username_parameter=props.get_str(FORMCLIENT_USERNAME_PARAMETER, i, default="username"),
                password_parameter=props.get_str(FORMCLIENT_PASSWORD_PARAMETER, i, default="password"),
            )
            logger.debug("Built form client %s (authenticator=%s)", client.name, authenticator_name)
            clients.append(client)

    def try_create_indirect_basic_auth_client(self, clients: list[Client]) -> None:
        props = self.properties
        for i in range(MAX_NUM_CLIENTS + 1):
            authenticator_name = props.get_str(INDIRECTBASICAUTH_AUTHENTICATOR, i)
            if authenticator_name is None:
                continue
            client = IndirectBasicAuthClient(
                name=indexed_key("indirectBasicAuth", i),
                authenticator=self.get_authenticator(
                    authenticator_name,
                    self.authenticators,
                    referenced_by=indexed_key(INDIRECTBASICAUTH_AUTHENTICATOR, i),
                ),
                realm_name=props.get_str(
                    INDIRECTBASICAUTH_REALM_NAME, i, default="authentication required"
                ),
            )
            logger.debug("Built indirect basic auth client %s", client.name)
            clients.append(client)


class DirectClientBuilder(AbstractBuilder):
    """Anonymous and direct basic-auth clients."""

    def __init__(self, properties: Properties, authenticators: AuthenticatorRegistry):
        super().__init__(properties)
        self.authenticators = authenticators

    def try_create_anonymous_client(self, clients: list[Client]) -> None:
        if self.properties.is_set(ANONYMOUS):
            logger.debug("Built anonymous client")
            clients.append(AnonymousClient(name="anonymous"))

    def try_create_direct_basic_auth_client(self, clients: list[Client]) -> None:
        for i in range(MAX_NUM_CLIENTS + 1):
            authenticator_name = self.properties.get_str(DIRECTBASICAUTH_AUTHENTICATOR, i)
            if authenticator_name is None:
                continue
            client = DirectBasicAuthClient(
                name=indexed_key("directBasicAuth", i),
                authenticator=self.get_authenticator(
                    authenticator_name,
                    self.authenticators,
                    referenced_by=indexed_key(DIRECTBASICAUTH_AUTHENTICATOR, i),
                ),
            )
            logger.debug("Built direct basic auth client %s", client.name)
            clients.append(client)
