"""
authconf - Name-keyed registries.

Append-only stores shared by the stages of one build:

- EncoderRegistry: password encoders keyed by ``crypt.encoder.<i>`` /
  ``digest.encoder.<i>``
- AuthenticatorRegistry: authenticators keyed by ``ldap.<i>``, ``db.<i>``,
  ``rest.<i>``; also resolves the built-in test authenticators

A second write under an existing name is ignored and logged.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Generic, Iterator, Mapping, Optional, TypeVar

from .authenticators import (
    Authenticator,
    SimpleTestTokenAuthenticator,
    SimpleTestUsernamePasswordAuthenticator,
)
from .constants import AUTHENTICATOR_TEST_TOKEN, AUTHENTICATOR_TEST_USERNAME_PASSWORD
from .encoders import PasswordEncoder
from .faults import AuthenticatorNotFoundFault, EncoderNotFoundFault

logger = logging.getLogger("authconf.registry")

T = TypeVar("T")


class NamedRegistry(Generic[T]):
    """Append-only ``name -> object`` map."""

    kind = "object"

    def __init__(self):
        self._items: dict[str, T] = {}

    def add(self, name: str, item: T) -> bool:
        """
        Register ``item`` under ``name``.

        Returns:
            True if stored, False if ``name`` was already taken (first wins)
        """
        if name in self._items:
            logger.warning(
                "Ignoring duplicate %s '%s': %r already registered",
                self.kind, name, self._items[name],
            )
            return False
        self._items[name] = item
        logger.debug("Registered %s '%s'", self.kind, name)
        return True

    def get(self, name: str) -> Optional[T]:
        return self._items.get(name)

    def require(self, name: str, referenced_by: Optional[str] = None) -> T:
        item = self.get(name)
        if item is None:
            raise KeyError(name)
        return item

    def names(self) -> list[str]:
        return list(self._items)

    def snapshot(self) -> Mapping[str, T]:
        """Read-only copy of the current entries."""
        return MappingProxyType(dict(self._items))

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.names()!r})"


class EncoderRegistry(NamedRegistry[PasswordEncoder]):
    """Password encoders by name."""

    kind = "password encoder"

    def require(self, name: str, referenced_by: Optional[str] = None) -> PasswordEncoder:
        encoder = self.get(name)
        if encoder is None:
            raise EncoderNotFoundFault(name, referenced_by=referenced_by)
        return encoder


class AuthenticatorRegistry(NamedRegistry[Authenticator]):
    """
    Authenticators by name.

    ``testUsernamePassword`` and ``testToken`` always resolve to fresh simple
    test authenticators and are never stored.
    """

    kind = "authenticator"

    _BUILTINS: dict[str, Any] = {
        AUTHENTICATOR_TEST_USERNAME_PASSWORD: SimpleTestUsernamePasswordAuthenticator,
        AUTHENTICATOR_TEST_TOKEN: SimpleTestTokenAuthenticator,
    }

    def get(self, name: str) -> Optional[Authenticator]:
        builtin = self._BUILTINS.get(name)
        if builtin is not None:
            return builtin(name=name)
        return super().get(name)

    def require(self, name: str, referenced_by: Optional[str] = None) -> Authenticator:
        authenticator = self.get(name)
        if authenticator is None:
            raise AuthenticatorNotFoundFault(name, referenced_by=referenced_by)
        return authenticator
