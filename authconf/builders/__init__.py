"""
authconf builders - Construct definitions and encoders from properties.

Each builder exposes ``try_*`` methods that scan the indices of one family
and append what they build to the list or registry they are given.
"""

from .base import AbstractBuilder
from .encoders import (
    DEFAULT_CRYPT_SCHEMES,
    CryptEncoderBuilder,
    DigestEncoderBuilder,
)
from .ldap import LdapAuthenticatorBuilder
from .db import DbAuthenticatorBuilder
from .oauth import OAuthBuilder
from .saml import Saml2ClientBuilder
from .cas import CasClientBuilder
from .oidc import OidcClientBuilder
from .http import (
    DirectClientBuilder,
    IndirectHttpClientBuilder,
    RestAuthenticatorBuilder,
)

__all__ = [
    "AbstractBuilder",
    "DEFAULT_CRYPT_SCHEMES",
    "CryptEncoderBuilder",
    "DigestEncoderBuilder",
    "LdapAuthenticatorBuilder",
    "DbAuthenticatorBuilder",
    "OAuthBuilder",
    "Saml2ClientBuilder",
    "CasClientBuilder",
    "OidcClientBuilder",
    "RestAuthenticatorBuilder",
    "IndirectHttpClientBuilder",
    "DirectClientBuilder",
]
