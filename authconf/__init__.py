"""
authconf - Authentication configuration from flat properties.

Scans a ``str -> str`` property set, detects which protocol families are
configured, and builds clients, authenticators and password encoders in a
fixed order into one immutable ``Configuration``.

Example:
    >>> from authconf import PropertiesConfigFactory
    >>> config = PropertiesConfigFactory({"anonymous": "true"}).build()
    >>> config.client_names()
    ['anonymous']
"""

__version__ = "0.1.0"

from .properties import Properties
from .config import PropertiesLoader
from .core import Configuration, Definition
from .clients import (
    Client,
    OAuthClient,
    OAuth2Client,
    Saml2Client,
    CasClient,
    CasProtocol,
    OidcClient,
    OidcProvider,
    FormClient,
    IndirectBasicAuthClient,
    AnonymousClient,
    DirectBasicAuthClient,
)
from .authenticators import (
    Authenticator,
    LdapAuthenticator,
    LdapType,
    DbAuthenticator,
    RestAuthenticator,
    SimpleTestUsernamePasswordAuthenticator,
    SimpleTestTokenAuthenticator,
)
from .encoders import (
    PasswordEncoder,
    CryptPasswordEncoder,
    Argon2PasswordEncoder,
    DigestPasswordEncoder,
)
from .registry import AuthenticatorRegistry, EncoderRegistry
from .factory import (
    BuildContext,
    DEFAULT_STAGES,
    FAMILIES,
    PropertiesConfigFactory,
    Stage,
)
from .matching import ExcludedPathMatcher, PathMatcher
from .faults import (
    Fault,
    ConfigMissingFault,
    ConfigInvalidFault,
    EncoderNotFoundFault,
    AuthenticatorNotFoundFault,
    PatternInvalidFault,
    ExcludedPathConflictFault,
)

__all__ = [
    "__version__",
    # Properties
    "Properties",
    "PropertiesLoader",
    # Result
    "Configuration",
    "Definition",
    # Clients
    "Client",
    "OAuthClient",
    "OAuth2Client",
    "Saml2Client",
    "CasClient",
    "CasProtocol",
    "OidcClient",
    "OidcProvider",
    "FormClient",
    "IndirectBasicAuthClient",
    "AnonymousClient",
    "DirectBasicAuthClient",
    # Authenticators
    "Authenticator",
    "LdapAuthenticator",
    "LdapType",
    "DbAuthenticator",
    "RestAuthenticator",
    "SimpleTestUsernamePasswordAuthenticator",
    "SimpleTestTokenAuthenticator",
    # Encoders
    "PasswordEncoder",
    "CryptPasswordEncoder",
    "Argon2PasswordEncoder",
    "DigestPasswordEncoder",
    # Registries
    "EncoderRegistry",
    "AuthenticatorRegistry",
    # Factory
    "BuildContext",
    "DEFAULT_STAGES",
    "FAMILIES",
    "PropertiesConfigFactory",
    "Stage",
    # Matching
    "PathMatcher",
    "ExcludedPathMatcher",
    # Faults
    "Fault",
    "ConfigMissingFault",
    "ConfigInvalidFault",
    "EncoderNotFoundFault",
    "AuthenticatorNotFoundFault",
    "PatternInvalidFault",
    "ExcludedPathConflictFault",
]
