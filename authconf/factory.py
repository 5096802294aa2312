"""
authconf - Configuration factory.

Runs an ordered tuple of stages over a property set. Each stage pairs a
detection predicate with the builders of one family; a stage whose predicate
is true runs its builders against a shared ``BuildContext``.

Stage order:

    crypt_encoder -> digest_encoder -> ldap -> db
      -> oauth -> saml -> cas -> oidc -> http

Encoders come first because DB authenticators resolve them by name;
authenticators come before HTTP clients for the same reason.

Example:
    >>> factory = PropertiesConfigFactory({"cas.loginUrl.0": "https://cas/login"})
    >>> factory.build().client_names()
    ['cas.0']
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Mapping, NamedTuple, Optional

from . import detection
from .builders import (
    CasClientBuilder,
    CryptEncoderBuilder,
    DbAuthenticatorBuilder,
    DigestEncoderBuilder,
    DirectClientBuilder,
    IndirectHttpClientBuilder,
    LdapAuthenticatorBuilder,
    OAuthBuilder,
    OidcClientBuilder,
    RestAuthenticatorBuilder,
    Saml2ClientBuilder,
)
from .builders.encoders import EncoderFactory
from .clients import Client
from .core import Configuration
from .faults import ConfigInvalidFault
from .properties import Properties
from .registry import AuthenticatorRegistry, EncoderRegistry

logger = logging.getLogger("authconf.factory")


# ============================================================================
# Build context
# ============================================================================

@dataclass
class BuildContext:
    """
    Mutable state shared by the stages of a single ``build()``.

    Attributes:
        clients: Clients in construction order
        encoders: Append-only password encoder registry
        authenticators: Append-only authenticator registry
        crypt_schemes: Optional ``type -> factory`` override for crypt encoders
    """

    clients: list[Client] = field(default_factory=list)
    encoders: EncoderRegistry = field(default_factory=EncoderRegistry)
    authenticators: AuthenticatorRegistry = field(default_factory=AuthenticatorRegistry)
    crypt_schemes: Optional[Mapping[str, EncoderFactory]] = None

    def to_configuration(self, callback_url: Optional[str] = None) -> Configuration:
        return Configuration(
            callback_url=callback_url,
            clients=tuple(self.clients),
            authenticators=self.authenticators.snapshot(),
            encoders=self.encoders.snapshot(),
        )


# ============================================================================
# Stages
# ============================================================================

class Stage(NamedTuple):
    """One family of the ordered build: predicate plus builder invocation."""

    family: str
    detect: Callable[[Properties], bool]
    build: Callable[[Properties, BuildContext], None]


def _build_crypt_encoders(properties: Properties, ctx: BuildContext) -> None:
    CryptEncoderBuilder(properties, schemes=ctx.crypt_schemes).try_create_password_encoder(ctx.encoders)


def _build_digest_encoders(properties: Properties, ctx: BuildContext) -> None:
    DigestEncoderBuilder(properties).try_create_password_encoder(ctx.encoders)


def _build_ldap(properties: Properties, ctx: BuildContext) -> None:
    LdapAuthenticatorBuilder(properties).try_build_ldap_authenticator(ctx.authenticators)


def _build_db(properties: Properties, ctx: BuildContext) -> None:
    DbAuthenticatorBuilder(properties).try_build_db_authenticator(ctx.authenticators, ctx.encoders)


def _build_oauth(properties: Properties, ctx: BuildContext) -> None:
    builder = OAuthBuilder(properties)
    builder.try_create_facebook_client(ctx.clients)
    builder.try_create_twitter_client(ctx.clients)
    builder.try_create_dropbox_client(ctx.clients)
    builder.try_create_github_client(ctx.clients)
    builder.try_create_yahoo_client(ctx.clients)
    builder.try_create_google_client(ctx.clients)
    builder.try_create_foursquare_client(ctx.clients)
    builder.try_create_windowslive_client(ctx.clients)
    builder.try_create_linkedin_client(ctx.clients)
    builder.try_create_generic_oauth2_client(ctx.clients)


def _build_saml(properties: Properties, ctx: BuildContext) -> None:
    Saml2ClientBuilder(properties).try_create_saml2_client(ctx.clients)


def _build_cas(properties: Properties, ctx: BuildContext) -> None:
    CasClientBuilder(properties).try_create_cas_client(ctx.clients)


def _build_oidc(properties: Properties, ctx: BuildContext) -> None:
    OidcClientBuilder(properties).try_create_oidc_client(ctx.clients)


def _build_http(properties: Properties, ctx: BuildContext) -> None:
    # REST authenticators must exist before clients that reference them
    RestAuthenticatorBuilder(properties).try_build_rest_authenticator(ctx.authenticators)

    indirect = IndirectHttpClientBuilder(properties, ctx.authenticators)
    indirect.try_create_login_form_client(ctx.clients)
    indirect.try_create_indirect_basic_auth_client(ctx.clients)

    direct = DirectClientBuilder(properties, ctx.authenticators)
    direct.try_create_anonymous_client(ctx.clients)
    direct.try_create_direct_basic_auth_client(ctx.clients)


DEFAULT_STAGES: tuple[Stage, ...] = (
    Stage("crypt_encoder", detection.has_crypt_encoder, _build_crypt_encoders),
    Stage("digest_encoder", detection.has_digest_encoder, _build_digest_encoders),
    Stage("ldap", detection.has_ldap_authenticator, _build_ldap),
    Stage("db", detection.has_db_authenticator, _build_db),
    Stage("oauth", detection.has_oauth_clients, _build_oauth),
    Stage("saml", detection.has_saml2_clients, _build_saml),
    Stage("cas", detection.has_cas_clients, _build_cas),
    Stage("oidc", detection.has_oidc_clients, _build_oidc),
    Stage("http", detection.has_http_authenticators_or_clients, _build_http),
)

#: Family names in build order
FAMILIES: tuple[str, ...] = tuple(stage.family for stage in DEFAULT_STAGES)


# ============================================================================
# Factory
# ============================================================================

class PropertiesConfigFactory:
    """
    Builds a ``Configuration`` from flat properties.

    Args:
        properties: ``str -> str`` mapping or ``Properties``
        callback_url: Base callback URL for indirect clients
        families: Families allowed to build; ``None`` allows every stage.
            Detected families outside the list are skipped.
        stages: Ordered stages to run
        crypt_schemes: ``type -> factory`` override for crypt encoders
    """

    def __init__(
        self,
        properties,
        callback_url: Optional[str] = None,
        *,
        families: Optional[Iterable[str]] = None,
        stages: tuple[Stage, ...] = DEFAULT_STAGES,
        crypt_schemes: Optional[Mapping[str, EncoderFactory]] = None,
    ):
        self.properties = Properties.of(properties)
        self.callback_url = callback_url
        self.stages = tuple(stages)
        self.crypt_schemes = crypt_schemes

        if families is None:
            self.families = None
        else:
            self.families = frozenset(families)
            known = {stage.family for stage in self.stages}
            unknown = self.families - known
            if unknown:
                raise ConfigInvalidFault(
                    "families",
                    f"unknown families {sorted(unknown)} (expected any of {sorted(known)})",
                )

    def is_enabled(self, family: str) -> bool:
        return self.families is None or family in self.families

    def detect(self) -> dict[str, bool]:
        """Detection result for every stage, in stage order. Builds nothing."""
        return {stage.family: stage.detect(self.properties) for stage in self.stages}

    def build(self) -> Configuration:
        """
        Run every detected and enabled stage in order.

        Faults raised by a builder propagate and no configuration is
        returned. A detected family that yields nothing is not an error.
        """
        ctx = BuildContext(crypt_schemes=self.crypt_schemes)

        for stage in self.stages:
            if not stage.detect(self.properties):
                logger.debug("Stage %s: not configured", stage.family)
                continue
            if not self.is_enabled(stage.family):
                logger.debug("Stage %s: detected but disabled, skipping", stage.family)
                continue

            before = (len(ctx.clients), len(ctx.authenticators), len(ctx.encoders))
            stage.build(self.properties, ctx)
            after = (len(ctx.clients), len(ctx.authenticators), len(ctx.encoders))

            if after == before:
                logger.debug("Stage %s: detected but produced nothing", stage.family)
            else:
                logger.debug(
                    "Stage %s: +%d clients, +%d authenticators, +%d encoders",
                    stage.family,
                    after[0] - before[0], after[1] - before[1], after[2] - before[2],
                )

        config = ctx.to_configuration(self.callback_url)
        logger.info(
            "Built configuration: %d clients, %d authenticators, %d encoders",
            len(config.clients), len(config.authenticators), len(config.encoders),
        )
        return config
