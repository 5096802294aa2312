"""
SAML 2 client builder.
"""

from __future__ import annotations

import logging

from ..clients import Client, Saml2Client
from ..constants import (
    MAX_NUM_CLIENTS,
    SAML_ATTRIBUTE_AS_ID,
    SAML_AUTHN_REQUEST_BINDING_TYPE,
    SAML_AUTHN_REQUEST_SIGNED,
    SAML_FORCE_AUTH,
    SAML_IDENTITY_PROVIDER_METADATA_PATH,
    SAML_KEYSTORE_ALIAS,
    SAML_KEYSTORE_PASSWORD,
    SAML_KEYSTORE_PATH,
    SAML_LOGOUT_REQUEST_BINDING_TYPE,
    SAML_MAXIMUM_AUTHENTICATION_LIFETIME,
    SAML_NAME_ID_POLICY_FORMAT,
    SAML_PASSIVE,
    SAML_PRIVATE_KEY_PASSWORD,
    SAML_RESPONSE_BINDING_TYPE,
    SAML_SERVICE_PROVIDER_ENTITY_ID,
    SAML_SERVICE_PROVIDER_METADATA_PATH,
    SAML_WANTS_ASSERTIONS_SIGNED,
)
from ..properties import indexed_key
from .base import AbstractBuilder

logger = logging.getLogger("authconf.builders.saml")

_REQUIRED = (
    SAML_KEYSTORE_PASSWORD,
    SAML_PRIVATE_KEY_PASSWORD,
    SAML_KEYSTORE_PATH,
    SAML_IDENTITY_PROVIDER_METADATA_PATH,
)


class Saml2ClientBuilder(AbstractBuilder):
    """Builds ``saml2.<i>`` clients; an index needs all four required keys."""

    def try_create_saml2_client(self, clients: list[Client]) -> None:
        props = self.properties
        for i in range(MAX_NUM_CLIENTS + 1):
            if not all(props.is_set(key, i) for key in _REQUIRED):
                continue
            client = Saml2Client(
                name=indexed_key("saml2", i),
                keystore_path=props.get_str(SAML_KEYSTORE_PATH, i),
                keystore_password=props.get_str(SAML_KEYSTORE_PASSWORD, i),
                private_key_password=props.get_str(SAML_PRIVATE_KEY_PASSWORD, i),
                identity_provider_metadata_path=props.get_str(SAML_IDENTITY_PROVIDER_METADATA_PATH, i),
                keystore_alias=props.get_str(SAML_KEYSTORE_ALIAS, i),
                service_provider_entity_id=props.get_str(SAML_SERVICE_PROVIDER_ENTITY_ID, i),
                service_provider_metadata_path=props.get_str(SAML_SERVICE_PROVIDER_METADATA_PATH, i),
                maximum_authentication_lifetime=props.get_int(SAML_MAXIMUM_AUTHENTICATION_LIFETIME, i),
                authn_request_binding_type=props.get_str(SAML_AUTHN_REQUEST_BINDING_TYPE, i),
                response_binding_type=props.get_str(SAML_RESPONSE_BINDING_TYPE, i),
                logout_request_binding_type=props.get_str(SAML_LOGOUT_REQUEST_BINDING_TYPE, i),
                force_auth=props.get_bool(SAML_FORCE_AUTH, i, default=False),
                passive=props.get_bool(SAML_PASSIVE, i, default=False),
                wants_assertions_signed=props.get_bool(SAML_WANTS_ASSERTIONS_SIGNED, i),
                authn_request_signed=props.get_bool(SAML_AUTHN_REQUEST_SIGNED, i),
                name_id_policy_format=props.get_str(SAML_NAME_ID_POLICY_FORMAT, i),
                attribute_as_id=props.get_str(SAML_ATTRIBUTE_AS_ID, i),
            )
            logger.debug("Built SAML2 client %s", client.name)
            clients.append(client)
