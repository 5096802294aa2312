"""
Shared builder base.
"""

from __future__ import annotations

from typing import Optional

from ..authenticators import Authenticator
from ..faults import ConfigInvalidFault, ConfigMissingFault
from ..properties import Properties, indexed_key
from ..registry import AuthenticatorRegistry


class AbstractBuilder:
    """
    Base class for every builder.

    Builders read the property set, construct definitions or encoders, and
    append them to the list or registry they are handed. They never perform
    I/O.
    """

    def __init__(self, properties: Properties):
        self.properties = Properties.of(properties)

    def get_authenticator(
        self,
        name: str,
        authenticators: AuthenticatorRegistry,
        referenced_by: Optional[str] = None,
    ) -> Authenticator:
        """Resolve an authenticator by name or raise ``AuthenticatorNotFoundFault``."""
        return authenticators.require(name, referenced_by=referenced_by)

    def require(self, key: str, index: Optional[int] = None) -> str:
        """Non-blank stripped value or ``ConfigMissingFault``."""
        value = self.properties.get_str(key, index)
        if value is None:
            raise ConfigMissingFault(indexed_key(key, index))
        return value

    def choice(self, key: str, index: Optional[int], allowed, default=None):
        """Value parsed into the enum ``allowed`` or ``ConfigInvalidFault``."""
        value = self.properties.get_str(key, index)
        if value is None:
            return default
        for member in allowed:
            if member.value.lower() == value.lower():
                return member
        raise ConfigInvalidFault(
            indexed_key(key, index),
            f"expected one of {', '.join(m.value for m in allowed)}, got {value!r}",
        )
