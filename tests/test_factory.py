"""
Configuration factory (factory.py, core.py)

Stage order, detection, build scenarios and the resulting Configuration.
"""

import logging

import pytest

from authconf.authenticators import DbAuthenticator
from authconf.clients import CasClient, OAuthClient
from authconf.core import Configuration
from authconf.factory import (
    DEFAULT_STAGES,
    FAMILIES,
    BuildContext,
    PropertiesConfigFactory,
    Stage,
)
from authconf.faults import (
    AuthenticatorNotFoundFault,
    ConfigInvalidFault,
    EncoderNotFoundFault,
)


CAS = {"cas.loginUrl.0": "https://cas.example.org/login"}


# ============================================================================
# Stages
# ============================================================================

class TestStages:

    def test_default_order(self):
        assert FAMILIES == (
            "crypt_encoder",
            "digest_encoder",
            "ldap",
            "db",
            "oauth",
            "saml",
            "cas",
            "oidc",
            "http",
        )

    def test_encoders_precede_db(self):
        assert FAMILIES.index("crypt_encoder") < FAMILIES.index("db")
        assert FAMILIES.index("digest_encoder") < FAMILIES.index("db")

    def test_authenticators_precede_http(self):
        assert FAMILIES.index("ldap") < FAMILIES.index("http")
        assert FAMILIES.index("db") < FAMILIES.index("http")

    def test_stage_fields(self):
        stage = DEFAULT_STAGES[0]
        assert isinstance(stage, Stage)
        assert callable(stage.detect) and callable(stage.build)


# ============================================================================
# Detection
# ============================================================================

class TestDetect:

    def test_cas_only(self):
        result = PropertiesConfigFactory(CAS).detect()
        assert list(result) == list(FAMILIES)
        assert result["cas"] is True
        assert [family for family, hit in result.items() if hit] == ["cas"]

    def test_anonymous_only(self):
        result = PropertiesConfigFactory({"anonymous": "true"}).detect()
        assert [family for family, hit in result.items() if hit] == ["http"]

    def test_detect_builds_nothing(self):
        # an unresolvable reference only fails when building
        factory = PropertiesConfigFactory({"directBasicAuth.authenticator.0": "ldap.9"})
        assert factory.detect()["http"] is True
        with pytest.raises(AuthenticatorNotFoundFault):
            factory.build()


# ============================================================================
# Build scenarios
# ============================================================================

class TestBuild:

    def test_empty(self):
        config = PropertiesConfigFactory({}).build()
        assert config.clients == ()
        assert dict(config.authenticators) == {}
        assert dict(config.encoders) == {}
        assert config.is_empty()

    def test_cas_scenario(self):
        config = PropertiesConfigFactory(CAS).build()
        [client] = config.clients
        assert isinstance(client, CasClient)
        assert client.family == "cas"
        assert len(config.authenticators) == 0
        assert len(config.encoders) == 0

    def test_anonymous_scenario(self):
        config = PropertiesConfigFactory({"anonymous": "true"}).build()
        assert config.client_names() == ["anonymous"]

    def test_oidc_one_client_per_index(self):
        props = {f"oidc.id.{i}": f"client{i}" for i in (0, 3, 9)}
        props.update({f"oidc.secret.{i}": "secret" for i in (0, 3, 9)})
        config = PropertiesConfigFactory(props).build()
        assert config.client_names() == ["oidc.0", "oidc.3", "oidc.9"]

    def test_family_order(self):
        props = {
            **CAS,
            "linkedin.id": "lid",
            "linkedin.secret": "lsecret",
            "db.jdbcUrl.0": "jdbc:h2:mem:test",
            "anonymous": "true",
            "oidc.id.0": "c",
            "oidc.secret.0": "s",
        }
        config = PropertiesConfigFactory(props).build()
        assert config.client_names() == ["linkedin", "cas.0", "oidc.0", "anonymous"]
        assert isinstance(config.authenticators["db.0"], DbAuthenticator)
        assert not any(isinstance(c, DbAuthenticator) for c in config.clients)

    def test_oauth_provider_order(self):
        props = {}
        for provider in ("linkedin", "github", "facebook", "twitter"):
            props[f"{provider}.id"] = "id"
            props[f"{provider}.secret"] = "secret"
        config = PropertiesConfigFactory(props).build()
        assert config.client_names() == ["facebook", "twitter", "github", "linkedin"]
        assert all(isinstance(c, OAuthClient) for c in config.clients)

    def test_db_sees_encoder(self):
        props = {
            "crypt.encoder.type.0": "bcrypt",
            "db.jdbcUrl.0": "jdbc:h2:mem:test",
            "db.passwordEncoder.0": "crypt.encoder.0",
        }
        config = PropertiesConfigFactory(props).build()
        assert config.authenticators["db.0"].password_encoder is config.encoders["crypt.encoder.0"]

    def test_db_sees_digest_encoder(self):
        props = {
            "digest.encoder.hashIterations.1": "10",
            "db.jdbcUrl.0": "jdbc:h2:mem:test",
            "db.passwordEncoder.0": "digest.encoder.1",
        }
        config = PropertiesConfigFactory(props).build()
        assert config.authenticators["db.0"].password_encoder.iterations == 10

    def test_db_missing_encoder_aborts(self):
        props = {**CAS, "db.jdbcUrl.0": "jdbc:h2:mem:test", "db.passwordEncoder.0": "crypt.encoder.0"}
        with pytest.raises(EncoderNotFoundFault):
            PropertiesConfigFactory(props).build()

    def test_form_client_uses_rest_authenticator(self):
        props = {
            "rest.url.0": "https://auth.example.org/check",
            "formClient.loginUrl.0": "/login",
            "formClient.authenticator.0": "rest.0",
        }
        config = PropertiesConfigFactory(props).build()
        form = config.find_client("form.0")
        assert form.authenticator is config.authenticators["rest.0"]

    def test_basic_auth_uses_ldap_authenticator(self):
        props = {
            "ldap.type.0": "anonymous",
            "ldap.ldapUrl.0": "ldap://localhost",
            "indirectBasicAuth.authenticator.0": "ldap.0",
        }
        config = PropertiesConfigFactory(props).build()
        assert config.find_client("indirectBasicAuth.0").authenticator.ldap_url == "ldap://localhost"

    def test_http_client_order(self):
        props = {
            "anonymous": "true",
            "directBasicAuth.authenticator.0": "testUsernamePassword",
            "indirectBasicAuth.authenticator.0": "testUsernamePassword",
            "formClient.loginUrl.0": "/login",
            "formClient.authenticator.0": "testUsernamePassword",
        }
        config = PropertiesConfigFactory(props).build()
        assert config.client_names() == [
            "form.0", "indirectBasicAuth.0", "anonymous", "directBasicAuth.0",
        ]

    def test_detected_family_may_produce_nothing(self, caplog):
        props = {
            "saml.keystorePassword.0": "ks",
            "saml.privateKeyPassword.0": "pk",
            "saml.keystorePath.0": "k.jks",
            "saml.identityProviderMetadataPath.0": "idp.xml",
        }

        def noop_build(properties, ctx):
            pass

        stages = (Stage("saml", DEFAULT_STAGES[5].detect, noop_build),)
        with caplog.at_level(logging.DEBUG, logger="authconf.factory"):
            config = PropertiesConfigFactory(props, stages=stages).build()
        assert config.is_empty()
        assert "produced nothing" in caplog.text

    def test_idempotent(self):
        props = {**CAS, "google.id": "g", "google.secret": "s", "anonymous": "true"}
        factory = PropertiesConfigFactory(props)
        first = factory.build()
        second = factory.build()
        assert first.client_names() == second.client_names()
        assert [c.family for c in first.clients] == [c.family for c in second.clients]
        assert first.clients == second.clients

    def test_summary_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="authconf.factory"):
            PropertiesConfigFactory(CAS).build()
        assert "Built configuration: 1 clients" in caplog.text


# ============================================================================
# Families filter / custom stages
# ============================================================================

class TestFamilies:

    def test_excluded_family_builds_nothing(self):
        props = {**CAS, "anonymous": "true"}
        config = PropertiesConfigFactory(props, families=["http"]).build()
        assert config.client_names() == ["anonymous"]

    def test_empty_family_list(self):
        assert PropertiesConfigFactory(CAS, families=[]).build().is_empty()

    def test_unknown_family(self):
        with pytest.raises(ConfigInvalidFault):
            PropertiesConfigFactory(CAS, families=["kerberos"])

    def test_is_enabled(self):
        factory = PropertiesConfigFactory({}, families=("cas",))
        assert factory.is_enabled("cas")
        assert not factory.is_enabled("oidc")
        assert PropertiesConfigFactory({}).is_enabled("oidc")

    def test_crypt_schemes_override(self):
        from authconf.encoders import DigestPasswordEncoder

        schemes = {"fast": lambda properties, i: DigestPasswordEncoder(iterations=1)}
        props = {"crypt.encoder.type.0": "fast"}
        config = PropertiesConfigFactory(props, crypt_schemes=schemes).build()
        assert config.encoders["crypt.encoder.0"].iterations == 1

    def test_custom_stage(self):
        seen = []

        def record(properties, ctx):
            seen.append(len(ctx.clients))

        stages = DEFAULT_STAGES + (Stage("audit", lambda properties: True, record),)
        PropertiesConfigFactory(CAS, stages=stages).build()
        assert seen == [1]


# ============================================================================
# Configuration
# ============================================================================

class TestConfiguration:

    def test_immutable(self):
        config = PropertiesConfigFactory(CAS).build()
        with pytest.raises(AttributeError):
            config.callback_url = "x"
        with pytest.raises(TypeError):
            config.authenticators["x"] = None

    def test_callback_url_for(self):
        config = Configuration(callback_url="https://app/callback")
        assert config.callback_url_for("cas.0") == "https://app/callback?client_name=cas.0"
        config = Configuration(callback_url="https://app/callback?force=true")
        assert config.callback_url_for("cas.0") == "https://app/callback?force=true&client_name=cas.0"
        assert Configuration().callback_url_for("cas.0") is None

    def test_callback_url_encodes_client_name(self):
        config = Configuration(callback_url="https://app/callback")
        assert config.callback_url_for("a b&c") == "https://app/callback?client_name=a+b%26c"

    def test_nested_settings_are_read_only(self):
        props = {
            "facebook.id": "fbid",
            "facebook.secret": "fbsecret",
            "facebook.fields": "id,name",
            "db.jdbcUrl.0": "jdbc:h2:mem:test",
            "db.maximumPoolSize.0": "20",
        }
        config = PropertiesConfigFactory(props).build()
        [client] = config.clients
        with pytest.raises(TypeError):
            client.options["x"] = 1
        assert "x" not in client.options
        db = config.authenticators["db.0"]
        with pytest.raises(TypeError):
            db.pool["maximum_pool_size"] = 1
        with pytest.raises(TypeError):
            db.data_source_properties["sslmode"] = "disable"
        assert db.pool["maximum_pool_size"] == 20

    def test_find_client_case_insensitive(self):
        config = PropertiesConfigFactory({"facebook.id": "i", "facebook.secret": "s"}).build()
        assert config.find_client("Facebook").name == "facebook"
        assert config.find_client("twitter") is None

    def test_to_dict_masks_secrets(self):
        props = {**CAS, "facebook.id": "fbid", "facebook.secret": "fbsecret", "cas.protocol.0": "SAML"}
        data = PropertiesConfigFactory(props, "https://app/callback").build().to_dict()
        assert data["callback_url"] == "https://app/callback"
        facebook, cas = data["clients"]
        assert facebook["secret"] == "********"
        assert facebook["key"] == "fbid"
        assert cas["protocol"] == "SAML"

    def test_build_context(self):
        ctx = BuildContext()
        config = ctx.to_configuration("https://app/callback")
        assert config.callback_url == "https://app/callback"
        assert config.is_empty()
