"""
Detection predicates (detection.py)
"""

import pytest

from authconf import detection
from authconf.constants import MAX_NUM_AUTHENTICATORS, MAX_NUM_CLIENTS, MAX_NUM_ENCODERS
from authconf.properties import Properties


ALL_PREDICATES = [
    detection.has_crypt_encoder,
    detection.has_digest_encoder,
    detection.has_ldap_authenticator,
    detection.has_db_authenticator,
    detection.has_oauth_clients,
    detection.has_saml2_clients,
    detection.has_cas_clients,
    detection.has_oidc_clients,
    detection.has_http_authenticators_or_clients,
]


# ============================================================================
# General behaviour
# ============================================================================

class TestEmpty:

    @pytest.mark.parametrize("predicate", ALL_PREDICATES)
    def test_empty_properties(self, predicate):
        assert predicate(Properties()) is False

    @pytest.mark.parametrize("predicate", ALL_PREDICATES)
    def test_blank_values_never_detect(self, predicate):
        blank = {
            "crypt.encoder.type.0": " ",
            "ldap.type.0": "",
            "db.jdbcUrl.0": "",
            "facebook.id": "",
            "facebook.secret": "",
            "cas.loginUrl.0": "  ",
            "oidc.id.0": "",
            "oidc.secret.0": "",
            "anonymous": "",
        }
        assert predicate(Properties(blank)) is False


# ============================================================================
# Encoders
# ============================================================================

class TestEncoderDetection:

    def test_crypt(self):
        assert detection.has_crypt_encoder(Properties({"crypt.encoder.type.0": "bcrypt"}))

    def test_crypt_last_index(self):
        key = f"crypt.encoder.type.{MAX_NUM_ENCODERS}"
        assert detection.has_crypt_encoder(Properties({key: "noop"}))

    def test_crypt_beyond_ceiling(self):
        key = f"crypt.encoder.type.{MAX_NUM_ENCODERS + 1}"
        assert not detection.has_crypt_encoder(Properties({key: "noop"}))

    def test_digest_marker(self):
        assert detection.has_digest_encoder(Properties({"digest.encoder.0": "true"}))

    @pytest.mark.parametrize("option", [
        "digest.encoder.generatePublicSalt",
        "digest.encoder.hashAlgorithmName",
        "digest.encoder.hashIterations",
        "digest.encoder.privateSalt",
    ])
    def test_digest_option_presence(self, option):
        # presence is enough, even with an empty value
        assert detection.has_digest_encoder(Properties({f"{option}.4": ""}))


# ============================================================================
# Authenticators
# ============================================================================

class TestAuthenticatorDetection:

    def test_ldap(self):
        assert detection.has_ldap_authenticator(Properties({"ldap.type.2": "direct"}))

    def test_ldap_beyond_ceiling(self):
        key = f"ldap.type.{MAX_NUM_AUTHENTICATORS + 1}"
        assert not detection.has_ldap_authenticator(Properties({key: "direct"}))

    @pytest.mark.parametrize("key", ["db.dataSourceClassName.0", "db.jdbcUrl.0"])
    def test_db(self, key):
        assert detection.has_db_authenticator(Properties({key: "x"}))

    def test_db_username_alone(self):
        assert not detection.has_db_authenticator(Properties({"db.username.0": "sa"}))


# ============================================================================
# Clients
# ============================================================================

class TestOAuthDetection:

    @pytest.mark.parametrize("provider", [
        "linkedin", "facebook", "windowslive", "foursquare",
        "google", "yahoo", "dropbox", "github", "twitter",
    ])
    def test_provider(self, provider):
        props = Properties({f"{provider}.id": "id", f"{provider}.secret": "secret"})
        assert detection.has_oauth_clients(props)

    def test_provider_needs_secret(self):
        assert not detection.has_oauth_clients(Properties({"github.id": "id"}))

    def test_provider_keys_are_scalar(self):
        props = Properties({"github.id.0": "id", "github.secret.0": "secret"})
        assert not detection.has_oauth_clients(props)

    def test_generic_oauth2(self):
        props = Properties({
            "oauth2.id": "id",
            "oauth2.secret": "secret",
            "oauth2.authUrl": "https://idp/authorize",
            "oauth2.tokenUrl": "https://idp/token",
        })
        assert detection.has_oauth_clients(props)

    def test_generic_oauth2_incomplete(self):
        props = Properties({"oauth2.id": "id", "oauth2.secret": "secret"})
        assert not detection.has_oauth_clients(props)


class TestSamlDetection:

    REQUIRED = {
        "saml.keystorePassword.1": "ks",
        "saml.privateKeyPassword.1": "pk",
        "saml.keystorePath.1": "keystore.jks",
        "saml.identityProviderMetadataPath.1": "idp.xml",
    }

    def test_all_required(self):
        assert detection.has_saml2_clients(Properties(self.REQUIRED))

    @pytest.mark.parametrize("missing", list(REQUIRED))
    def test_missing_one(self, missing):
        data = {k: v for k, v in self.REQUIRED.items() if k != missing}
        assert not detection.has_saml2_clients(Properties(data))

    def test_split_across_indices(self):
        data = {k.replace(".1", ".0") if "Path" in k else k: v for k, v in self.REQUIRED.items()}
        assert not detection.has_saml2_clients(Properties(data))


class TestCasOidcDetection:

    def test_cas(self):
        assert detection.has_cas_clients(Properties({"cas.loginUrl.0": "https://cas/login"}))

    def test_cas_last_client_index(self):
        key = f"cas.loginUrl.{MAX_NUM_CLIENTS}"
        assert detection.has_cas_clients(Properties({key: "https://cas/login"}))

    def test_oidc_same_index(self):
        props = Properties({"oidc.id.7": "client", "oidc.secret.7": "secret"})
        assert detection.has_oidc_clients(props)

    def test_oidc_different_indices(self):
        props = Properties({"oidc.id.0": "client", "oidc.secret.1": "secret"})
        assert not detection.has_oidc_clients(props)


class TestHttpDetection:

    def test_anonymous_marker(self):
        assert detection.has_http_authenticators_or_clients(Properties({"anonymous": "true"}))

    def test_indexed_anonymous_ignored(self):
        assert not detection.has_http_authenticators_or_clients(Properties({"anonymous.0": "true"}))

    def test_rest(self):
        props = Properties({"rest.url.3": "https://auth/check"})
        assert detection.has_http_authenticators_or_clients(props)

    def test_form_needs_both_keys(self):
        assert not detection.has_http_authenticators_or_clients(
            Properties({"formClient.loginUrl.0": "/login"})
        )
        assert detection.has_http_authenticators_or_clients(Properties({
            "formClient.loginUrl.0": "/login",
            "formClient.authenticator.0": "testUsernamePassword",
        }))

    @pytest.mark.parametrize("key", [
        "indirectBasicAuth.authenticator.5",
        "directBasicAuth.authenticator.5",
    ])
    def test_basic_auth(self, key):
        assert detection.has_http_authenticators_or_clients(Properties({key: "testUsernamePassword"}))
