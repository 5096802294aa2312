"""
authconf - Client Definitions

Immutable descriptions of the authentication clients a build produces:

- OAuthClient / OAuth2Client: OAuth providers and the generic OAuth 2.0 client
- Saml2Client: SAML 2 service provider
- CasClient: CAS server login
- OidcClient: OpenID Connect relying party
- FormClient / IndirectBasicAuthClient: indirect HTTP clients
- AnonymousClient / DirectBasicAuthClient: direct HTTP clients
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Mapping, Optional

from .core import Definition, secret_field


class Client(Definition):
    """Base class for client definitions."""

    #: True when the client redirects the user agent and needs a callback URL
    indirect: ClassVar[bool] = True


# ============================================================================
# OAuth
# ============================================================================

@dataclass(frozen=True)
class OAuthClient(Client):
    """
    Client for a well-known OAuth provider.

    ``options`` holds provider-specific extras (facebook ``fields``,
    twitter ``include_email``, ...).
    """

    family: ClassVar[str] = "oauth"

    provider: str = ""
    key: str = ""
    secret: str = secret_field("")
    scope: Optional[str] = None
    options: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class OAuth2Client(Client):
    """Generic OAuth 2.0 client configured with explicit endpoints."""

    family: ClassVar[str] = "oauth"

    key: str = ""
    secret: str = secret_field("")
    auth_url: str = ""
    token_url: str = ""
    profile_url: Optional[str] = None
    profile_path: Optional[str] = None
    profile_id: Optional[str] = None
    profile_verb: str = "GET"
    scope: Optional[str] = None
    with_state: bool = False
    client_authentication_method: Optional[str] = None
    profile_attrs: Mapping[str, str] = field(default_factory=dict)
    custom_params: Mapping[str, str] = field(default_factory=dict)


# ============================================================================
# SAML 2
# ============================================================================

@dataclass(frozen=True)
class Saml2Client(Client):
    """SAML 2 service provider settings."""

    family: ClassVar[str] = "saml"

    keystore_path: str = ""
    keystore_password: str = secret_field("")
    private_key_password: str = secret_field("")
    identity_provider_metadata_path: str = ""
    keystore_alias: Optional[str] = None
    service_provider_entity_id: Optional[str] = None
    service_provider_metadata_path: Optional[str] = None
    maximum_authentication_lifetime: Optional[int] = None
    authn_request_binding_type: Optional[str] = None
    response_binding_type: Optional[str] = None
    logout_request_binding_type: Optional[str] = None
    force_auth: bool = False
    passive: bool = False
    wants_assertions_signed: Optional[bool] = None
    authn_request_signed: Optional[bool] = None
    name_id_policy_format: Optional[str] = None
    attribute_as_id: Optional[str] = None


# ============================================================================
# CAS
# ============================================================================

class CasProtocol(str, Enum):
    """CAS validation protocol."""
    CAS10 = "CAS10"
    CAS20 = "CAS20"
    CAS20_PROXY = "CAS20_PROXY"
    CAS30 = "CAS30"
    CAS30_PROXY = "CAS30_PROXY"
    SAML = "SAML"


@dataclass(frozen=True)
class CasClient(Client):
    """CAS login client."""

    family: ClassVar[str] = "cas"

    login_url: str = ""
    protocol: CasProtocol = CasProtocol.CAS30

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["protocol"] = self.protocol.value
        return data


# ============================================================================
# OpenID Connect
# ============================================================================

class OidcProvider(str, Enum):
    """OpenID Connect provider flavour."""
    GENERIC = "generic"
    GOOGLE = "google"
    AZURE = "azure"
    KEYCLOAK = "keycloak"


@dataclass(frozen=True)
class OidcClient(Client):
    """OpenID Connect relying party."""

    family: ClassVar[str] = "oidc"

    client_id: str = ""
    secret: str = secret_field("")
    provider: OidcProvider = OidcProvider.GENERIC
    discovery_uri: Optional[str] = None
    use_nonce: Optional[bool] = None
    preferred_jws_algorithm: Optional[str] = None
    max_clock_skew: Optional[int] = None
    client_authentication_method: Optional[str] = None
    scope: Optional[str] = None
    response_type: Optional[str] = None
    response_mode: Optional[str] = None
    logout_url: Optional[str] = None
    custom_params: Mapping[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["provider"] = self.provider.value
        return data


# ============================================================================
# HTTP
# ============================================================================

@dataclass(frozen=True)
class FormClient(Client):
    """Login form posting username and password."""

    family: ClassVar[str] = "http"

    login_url: str = ""
    authenticator: Any = None
    username_parameter: str = "username"
    password_parameter: str = "password"


@dataclass(frozen=True)
class IndirectBasicAuthClient(Client):
    """HTTP basic auth challenge issued after a redirect."""

    family: ClassVar[str] = "http"

    authenticator: Any = None
    realm_name: str = "authentication required"


@dataclass(frozen=True)
class AnonymousClient(Client):
    """Client that always yields an anonymous profile."""

    family: ClassVar[str] = "http"
    indirect: ClassVar[bool] = False


@dataclass(frozen=True)
class DirectBasicAuthClient(Client):
    """HTTP basic auth on every request."""

    family: ClassVar[str] = "http"
    indirect: ClassVar[bool] = False

    authenticator: Any = None
