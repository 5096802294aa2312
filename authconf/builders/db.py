"""
Database authenticator builder.
"""

from __future__ import annotations

import logging
from typing import Any

from ..authenticators import DbAuthenticator
from ..constants import (
    DB,
    DB_ATTRIBUTES,
    DB_AUTO_COMMIT,
    DB_CONNECTION_TEST_QUERY,
    DB_CONNECTION_TIMEOUT,
    DB_CUSTOM_PARAM_NAME,
    DB_CUSTOM_PARAM_VALUE,
    DB_DATASOURCE_CLASS_NAME,
    DB_IDLE_TIMEOUT,
    DB_JDBC_URL,
    DB_MAX_LIFETIME,
    DB_MAXIMUM_POOL_SIZE,
    DB_MINIMUM_IDLE,
    DB_PASSWORD,
    DB_PASSWORD_ENCODER,
    DB_POOL_NAME,
    DB_READ_ONLY,
    DB_USER_ID_ATTRIBUTE,
    DB_USER_PASSWORD_ATTRIBUTE,
    DB_USERNAME,
    DB_USERNAME_ATTRIBUTE,
    DB_USERS_TABLE,
    MAX_NUM_AUTHENTICATORS,
    MAX_NUM_CUSTOM_PROPERTIES,
)
from ..properties import indexed_key
from ..registry import AuthenticatorRegistry, EncoderRegistry
from .base import AbstractBuilder

logger = logging.getLogger("authconf.builders.db")


class DbAuthenticatorBuilder(AbstractBuilder):
    """
    Builds ``db.<i>`` authenticators.

    ``db.passwordEncoder.<i>`` must name an encoder already in the encoder
    registry, so encoder builders have to run first.
    """

    def try_build_db_authenticator(
        self,
        authenticators: AuthenticatorRegistry,
        encoders: EncoderRegistry,
    ) -> None:
        for i in range(MAX_NUM_AUTHENTICATORS + 1):
            props = self.properties
            if not (props.is_set(DB_DATASOURCE_CLASS_NAME, i) or props.is_set(DB_JDBC_URL, i)):
                continue
            authenticator = self._build(i, encoders)
            logger.debug(
                "Built DB authenticator %s (encoder=%s)",
                authenticator.name, authenticator.password_encoder_name,
            )
            authenticators.add(authenticator.name, authenticator)

    def _build(self, i: int, encoders: EncoderRegistry) -> DbAuthenticator:
        props = self.properties
        name = indexed_key(DB, i)

        encoder_name = props.get_str(DB_PASSWORD_ENCODER, i)
        encoder = None
        if encoder_name is not None:
            encoder = encoders.require(encoder_name, referenced_by=indexed_key(DB_PASSWORD_ENCODER, i))

        return DbAuthenticator(
            name=name,
            data_source_class_name=props.get_str(DB_DATASOURCE_CLASS_NAME, i),
            jdbc_url=props.get_str(DB_JDBC_URL, i),
            username=props.get_str(DB_USERNAME, i),
            password=props.get_str(DB_PASSWORD, i),
            users_table=props.get_str(DB_USERS_TABLE, i, default="users"),
            attributes=tuple(props.get_list(DB_ATTRIBUTES, i)),
            user_id_attribute=props.get_str(DB_USER_ID_ATTRIBUTE, i, default="id"),
            username_attribute=props.get_str(DB_USERNAME_ATTRIBUTE, i, default="username"),
            user_password_attribute=props.get_str(DB_USER_PASSWORD_ATTRIBUTE, i, default="password"),
            password_encoder_name=encoder_name,
            password_encoder=encoder,
            pool=self._pool_settings(i),
            data_source_properties=self._custom_params(i),
        )

    def _pool_settings(self, i: int) -> dict[str, Any]:
        props = self.properties
        pool = {
            "auto_commit": props.get_bool(DB_AUTO_COMMIT, i),
            "read_only": props.get_bool(DB_READ_ONLY, i),
            "pool_name": props.get_str(DB_POOL_NAME, i),
            "minimum_idle": props.get_int(DB_MINIMUM_IDLE, i),
            "maximum_pool_size": props.get_int(DB_MAXIMUM_POOL_SIZE, i),
            "connection_timeout": props.get_int(DB_CONNECTION_TIMEOUT, i),
            "idle_timeout": props.get_int(DB_IDLE_TIMEOUT, i),
            "max_lifetime": props.get_int(DB_MAX_LIFETIME, i),
            "connection_test_query": props.get_str(DB_CONNECTION_TEST_QUERY, i),
        }
        return {key: value for key, value in pool.items() if value is not None}

    def _custom_params(self, i: int) -> dict[str, str]:
        # db.customParamName<j>.<i> / db.customParamValue<j>.<i>, j = 1..5
        params: dict[str, str] = {}
        for j in range(1, MAX_NUM_CUSTOM_PROPERTIES + 1):
            key = self.properties.get_str(f"{DB_CUSTOM_PARAM_NAME}{j}", i)
            value = self.properties.get_str(f"{DB_CUSTOM_PARAM_VALUE}{j}", i)
            if key is not None and value is not None:
                params[key] = value
        return params
