"""
authconf - Detection predicates.

One pure function per protocol family answering "is at least one instance of
this family configured?". Each predicate scans ``0..MAX`` (inclusive) for the
family's required keys and returns on the first hit. Predicates never raise;
blank values count as absent.

A positive answer does not mean every index is valid: builders re-check each
index on their own.
"""

from __future__ import annotations

from .constants import (
    ANONYMOUS,
    CAS_LOGIN_URL,
    CRYPT_ENCODER_TYPE,
    DB_DATASOURCE_CLASS_NAME,
    DB_JDBC_URL,
    DIGEST_ENCODER,
    DIGEST_ENCODER_GENERATE_PUBLIC_SALT,
    DIGEST_ENCODER_HASH_ALGORITHM_NAME,
    DIGEST_ENCODER_HASH_ITERATIONS,
    DIGEST_ENCODER_PRIVATE_SALT,
    DIRECTBASICAUTH_AUTHENTICATOR,
    FORMCLIENT_AUTHENTICATOR,
    FORMCLIENT_LOGIN_URL,
    INDIRECTBASICAUTH_AUTHENTICATOR,
    LDAP_TYPE,
    MAX_NUM_AUTHENTICATORS,
    MAX_NUM_CLIENTS,
    MAX_NUM_ENCODERS,
    OAUTH2_AUTH_URL,
    OAUTH2_ID,
    OAUTH2_SECRET,
    OAUTH2_TOKEN_URL,
    OAUTH_PROVIDERS,
    OIDC_ID,
    OIDC_SECRET,
    REST_URL,
    SAML_IDENTITY_PROVIDER_METADATA_PATH,
    SAML_KEYSTORE_PASSWORD,
    SAML_KEYSTORE_PATH,
    SAML_PRIVATE_KEY_PASSWORD,
)
from .properties import Properties

DIGEST_ENCODER_OPTIONS = (
    DIGEST_ENCODER_GENERATE_PUBLIC_SALT,
    DIGEST_ENCODER_HASH_ALGORITHM_NAME,
    DIGEST_ENCODER_HASH_ITERATIONS,
    DIGEST_ENCODER_PRIVATE_SALT,
)


def _any_index(maximum: int, check) -> bool:
    return any(check(i) for i in range(maximum + 1))


# ============================================================================
# Encoders
# ============================================================================

def has_crypt_encoder(properties: Properties) -> bool:
    return _any_index(MAX_NUM_ENCODERS, lambda i: properties.is_set(CRYPT_ENCODER_TYPE, i))


def has_digest_encoder(properties: Properties) -> bool:
    """``digest.encoder`` set, or any digest option key present as a marker."""
    def check(i: int) -> bool:
        if properties.is_set(DIGEST_ENCODER, i):
            return True
        return any(properties.exists(key, i) for key in DIGEST_ENCODER_OPTIONS)

    return _any_index(MAX_NUM_ENCODERS, check)


# ============================================================================
# Authenticators
# ============================================================================

def has_ldap_authenticator(properties: Properties) -> bool:
    return _any_index(MAX_NUM_AUTHENTICATORS, lambda i: properties.is_set(LDAP_TYPE, i))


def has_db_authenticator(properties: Properties) -> bool:
    return _any_index(
        MAX_NUM_AUTHENTICATORS,
        lambda i: properties.is_set(DB_DATASOURCE_CLASS_NAME, i) or properties.is_set(DB_JDBC_URL, i),
    )


# ============================================================================
# Clients
# ============================================================================

def has_oauth_clients(properties: Properties) -> bool:
    """Scalar id+secret for a known provider, or a complete generic OAuth2 block."""
    for _name, id_key, secret_key in OAUTH_PROVIDERS:
        if properties.is_set(id_key) and properties.is_set(secret_key):
            return True
    return all(
        properties.is_set(key)
        for key in (OAUTH2_ID, OAUTH2_SECRET, OAUTH2_AUTH_URL, OAUTH2_TOKEN_URL)
    )


def has_saml2_clients(properties: Properties) -> bool:
    required = (
        SAML_KEYSTORE_PASSWORD,
        SAML_PRIVATE_KEY_PASSWORD,
        SAML_KEYSTORE_PATH,
        SAML_IDENTITY_PROVIDER_METADATA_PATH,
    )
    return _any_index(
        MAX_NUM_CLIENTS, lambda i: all(properties.is_set(key, i) for key in required)
    )


def has_cas_clients(properties: Properties) -> bool:
    return _any_index(MAX_NUM_CLIENTS, lambda i: properties.is_set(CAS_LOGIN_URL, i))


def has_oidc_clients(properties: Properties) -> bool:
    return _any_index(
        MAX_NUM_CLIENTS,
        lambda i: properties.is_set(OIDC_ID, i) and properties.is_set(OIDC_SECRET, i),
    )


def has_http_authenticators_or_clients(properties: Properties) -> bool:
    """
    Anonymous marker, a REST authenticator, or any form / basic-auth client.

    The scalar ``anonymous`` key is checked before any index scan.
    """
    if properties.is_set(ANONYMOUS):
        return True
    if _any_index(MAX_NUM_AUTHENTICATORS, lambda i: properties.is_set(REST_URL, i)):
        return True

    def client_check(i: int) -> bool:
        if properties.is_set(FORMCLIENT_LOGIN_URL, i) and properties.is_set(FORMCLIENT_AUTHENTICATOR, i):
            return True
        return (
            properties.is_set(INDIRECTBASICAUTH_AUTHENTICATOR, i)
            or properties.is_set(DIRECTBASICAUTH_AUTHENTICATOR, i)
        )

    return _any_index(MAX_NUM_CLIENTS, client_check)
