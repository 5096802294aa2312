"""
authconf - Authenticator Definitions

Immutable descriptions of the credential authenticators a build produces.
Connection settings are recorded as given; nothing here opens a socket or a
database connection.

- LdapAuthenticator: LDAP directory bind/search settings
- DbAuthenticator: relational user table settings plus an optional encoder
- RestAuthenticator: remote REST endpoint
- SimpleTestUsernamePasswordAuthenticator / SimpleTestTokenAuthenticator:
  built-in authenticators for tests and demos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Mapping, Optional

from .core import Definition, secret_field


class Authenticator(Definition):
    """Base class for authenticator definitions."""


# ============================================================================
# LDAP
# ============================================================================

class LdapType(str, Enum):
    """LDAP authentication mode."""
    ANONYMOUS = "anonymous"
    DIRECT = "direct"
    AUTHENTICATED = "authenticated"
    AD = "ad"


@dataclass(frozen=True)
class LdapAuthenticator(Authenticator):
    """
    LDAP authenticator settings.

    Modes:
    - anonymous: anonymous search for the user entry, then bind as the user
    - direct: bind with a DN built from ``dn_format``
    - authenticated: search bound as ``bind_dn``, then bind as the user
    - ad: Active Directory UPN bind using ``dn_format``
    """

    family: ClassVar[str] = "ldap"

    type: LdapType = LdapType.ANONYMOUS
    ldap_url: str = ""
    users_dn: Optional[str] = None
    dn_format: Optional[str] = None
    principal_attribute_id: Optional[str] = None
    principal_attribute_password: Optional[str] = None
    principal_attributes: tuple[str, ...] = ()
    subtree_search: bool = True
    bind_dn: Optional[str] = None
    bind_credential: Optional[str] = secret_field(None)
    connect_timeout: Optional[int] = None
    response_timeout: Optional[int] = None
    use_start_tls: bool = False
    min_pool_size: Optional[int] = None
    max_pool_size: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["type"] = self.type.value
        return data


# ============================================================================
# Database
# ============================================================================

@dataclass(frozen=True)
class DbAuthenticator(Authenticator):
    """
    Database authenticator settings.

    ``password_encoder`` is the encoder object resolved from the encoder
    registry; ``password_encoder_name`` records the name it was resolved by.
    """

    family: ClassVar[str] = "db"

    data_source_class_name: Optional[str] = None
    jdbc_url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = secret_field(None)
    users_table: str = "users"
    attributes: tuple[str, ...] = ()
    user_id_attribute: str = "id"
    username_attribute: str = "username"
    user_password_attribute: str = "password"
    password_encoder_name: Optional[str] = None
    password_encoder: Any = field(default=None, repr=False, compare=False)
    pool: Mapping[str, Any] = field(default_factory=dict)
    data_source_properties: Mapping[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["password_encoder"] = self.password_encoder_name
        return data


# ============================================================================
# REST
# ============================================================================

@dataclass(frozen=True)
class RestAuthenticator(Authenticator):
    """Authenticator delegating to a remote REST endpoint."""

    family: ClassVar[str] = "rest"

    url: str = ""


# ============================================================================
# Built-in test authenticators
# ============================================================================

@dataclass(frozen=True)
class SimpleTestUsernamePasswordAuthenticator(Authenticator):
    """Accepts any non-blank username whose password equals the username."""

    family: ClassVar[str] = "test"

    def validate(self, username: Optional[str], password: Optional[str]) -> bool:
        if not username or not username.strip():
            return False
        return username == password


@dataclass(frozen=True)
class SimpleTestTokenAuthenticator(Authenticator):
    """Accepts any non-blank token."""

    family: ClassVar[str] = "test"

    def validate(self, token: Optional[str]) -> bool:
        return bool(token and token.strip())
