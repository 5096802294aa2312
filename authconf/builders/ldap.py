"""
LDAP authenticator builder.
"""

from __future__ import annotations

import logging

from ..authenticators import LdapAuthenticator, LdapType
from ..constants import (
    LDAP,
    LDAP_BIND_CREDENTIAL,
    LDAP_BIND_DN,
    LDAP_CONNECT_TIMEOUT,
    LDAP_DN_FORMAT,
    LDAP_MAX_POOL_SIZE,
    LDAP_MIN_POOL_SIZE,
    LDAP_PRINCIPAL_ATTRIBUTE_ID,
    LDAP_PRINCIPAL_ATTRIBUTE_PASSWORD,
    LDAP_PRINCIPAL_ATTRIBUTES,
    LDAP_RESPONSE_TIMEOUT,
    LDAP_SUBTREE_SEARCH,
    LDAP_TYPE,
    LDAP_URL,
    LDAP_USE_START_TLS,
    LDAP_USERS_DN,
    MAX_NUM_AUTHENTICATORS,
)
from ..properties import indexed_key
from ..registry import AuthenticatorRegistry
from .base import AbstractBuilder

logger = logging.getLogger("authconf.builders.ldap")


class LdapAuthenticatorBuilder(AbstractBuilder):
    """Builds ``ldap.<i>`` authenticators."""

    def try_build_ldap_authenticator(self, authenticators: AuthenticatorRegistry) -> None:
        for i in range(MAX_NUM_AUTHENTICATORS + 1):
            if not self.properties.is_set(LDAP_TYPE, i):
                continue
            authenticator = self._build(i)
            logger.debug("Built LDAP authenticator %s (%s)", authenticator.name, authenticator.type.value)
            authenticators.add(authenticator.name, authenticator)

    def _build(self, i: int) -> LdapAuthenticator:
        props = self.properties
        ldap_type = self.choice(LDAP_TYPE, i, LdapType)
        ldap_url = self.require(LDAP_URL, i)

        dn_format = props.get_str(LDAP_DN_FORMAT, i)
        bind_dn = props.get_str(LDAP_BIND_DN, i)
        bind_credential = props.get_str(LDAP_BIND_CREDENTIAL, i)

        if ldap_type in (LdapType.DIRECT, LdapType.AD):
            dn_format = self.require(LDAP_DN_FORMAT, i)
        elif ldap_type is LdapType.AUTHENTICATED:
            bind_dn = self.require(LDAP_BIND_DN, i)
            bind_credential = self.require(LDAP_BIND_CREDENTIAL, i)

        return LdapAuthenticator(
            name=indexed_key(LDAP, i),
            type=ldap_type,
            ldap_url=ldap_url,
            users_dn=props.get_str(LDAP_USERS_DN, i),
            dn_format=dn_format,
            principal_attribute_id=props.get_str(LDAP_PRINCIPAL_ATTRIBUTE_ID, i),
            principal_attribute_password=props.get_str(LDAP_PRINCIPAL_ATTRIBUTE_PASSWORD, i),
            principal_attributes=tuple(props.get_list(LDAP_PRINCIPAL_ATTRIBUTES, i)),
            subtree_search=props.get_bool(LDAP_SUBTREE_SEARCH, i, default=True),
            bind_dn=bind_dn,
            bind_credential=bind_credential,
            connect_timeout=props.get_int(LDAP_CONNECT_TIMEOUT, i),
            response_timeout=props.get_int(LDAP_RESPONSE_TIMEOUT, i),
            use_start_tls=props.get_bool(LDAP_USE_START_TLS, i, default=False),
            min_pool_size=props.get_int(LDAP_MIN_POOL_SIZE, i),
            max_pool_size=props.get_int(LDAP_MAX_POOL_SIZE, i),
        )
