"""
Password encoder builders.

- CryptEncoderBuilder: ``crypt.encoder.type.<i>`` selects a passlib scheme or
  Argon2id
- DigestEncoderBuilder: iterated hashlib digest from ``digest.encoder.*.<i>``
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

from ..constants import (
    CRYPT_ENCODER,
    CRYPT_ENCODER_ARGON2_MEMORY_COST,
    CRYPT_ENCODER_ARGON2_PARALLELISM,
    CRYPT_ENCODER_ARGON2_TIME_COST,
    CRYPT_ENCODER_BCRYPT_ROUNDS,
    CRYPT_ENCODER_PBKDF2_ROUNDS,
    CRYPT_ENCODER_PBKDF2_SALT_SIZE,
    CRYPT_ENCODER_SCRYPT_BLOCK_SIZE,
    CRYPT_ENCODER_SCRYPT_PARALLELISM,
    CRYPT_ENCODER_SCRYPT_ROUNDS,
    CRYPT_ENCODER_STANDARD_ROUNDS,
    CRYPT_ENCODER_TYPE,
    DIGEST_ENCODER,
    DIGEST_ENCODER_GENERATE_PUBLIC_SALT,
    DIGEST_ENCODER_HASH_ALGORITHM_NAME,
    DIGEST_ENCODER_HASH_ITERATIONS,
    DIGEST_ENCODER_PRIVATE_SALT,
    MAX_NUM_ENCODERS,
)
from ..detection import DIGEST_ENCODER_OPTIONS
from ..encoders import (
    Argon2PasswordEncoder,
    CryptPasswordEncoder,
    DigestPasswordEncoder,
    PasswordEncoder,
)
from ..faults import ConfigInvalidFault
from ..properties import Properties, indexed_key
from ..registry import EncoderRegistry
from .base import AbstractBuilder

logger = logging.getLogger("authconf.builders.encoders")

#: Factory signature: (properties, index) -> encoder
EncoderFactory = Callable[[Properties, int], PasswordEncoder]


# ============================================================================
# Crypt schemes
# ============================================================================

def _noop(properties: Properties, i: int) -> PasswordEncoder:
    return CryptPasswordEncoder("plaintext")


def _bcrypt(properties: Properties, i: int) -> PasswordEncoder:
    return CryptPasswordEncoder("bcrypt", rounds=properties.get_int(CRYPT_ENCODER_BCRYPT_ROUNDS, i))


def _pbkdf2(properties: Properties, i: int) -> PasswordEncoder:
    return CryptPasswordEncoder(
        "pbkdf2_sha256",
        rounds=properties.get_int(CRYPT_ENCODER_PBKDF2_ROUNDS, i),
        salt_size=properties.get_int(CRYPT_ENCODER_PBKDF2_SALT_SIZE, i),
    )


def _scrypt(properties: Properties, i: int) -> PasswordEncoder:
    return CryptPasswordEncoder(
        "scrypt",
        rounds=properties.get_int(CRYPT_ENCODER_SCRYPT_ROUNDS, i),
        block_size=properties.get_int(CRYPT_ENCODER_SCRYPT_BLOCK_SIZE, i),
        parallelism=properties.get_int(CRYPT_ENCODER_SCRYPT_PARALLELISM, i),
    )


def _standard(properties: Properties, i: int) -> PasswordEncoder:
    return CryptPasswordEncoder(
        "sha256_crypt", rounds=properties.get_int(CRYPT_ENCODER_STANDARD_ROUNDS, i)
    )


def _argon2(properties: Properties, i: int) -> PasswordEncoder:
    return Argon2PasswordEncoder(
        time_cost=properties.get_int(CRYPT_ENCODER_ARGON2_TIME_COST, i),
        memory_cost=properties.get_int(CRYPT_ENCODER_ARGON2_MEMORY_COST, i),
        parallelism=properties.get_int(CRYPT_ENCODER_ARGON2_PARALLELISM, i),
    )


DEFAULT_CRYPT_SCHEMES: dict[str, EncoderFactory] = {
    "noop": _noop,
    "bcrypt": _bcrypt,
    "pbkdf2": _pbkdf2,
    "scrypt": _scrypt,
    "standard": _standard,
    "argon2": _argon2,
}


class CryptEncoderBuilder(AbstractBuilder):
    """
    Builds type-selected password encoders.

    Args:
        properties: Property set
        schemes: ``type -> factory`` mapping; defaults to
            ``DEFAULT_CRYPT_SCHEMES``. Keys are matched case-insensitively.
    """

    def __init__(
        self,
        properties: Properties,
        schemes: Optional[Mapping[str, EncoderFactory]] = None,
    ):
        super().__init__(properties)
        source = DEFAULT_CRYPT_SCHEMES if schemes is None else schemes
        self.schemes = {name.lower(): factory for name, factory in source.items()}

    def try_create_password_encoder(self, encoders: EncoderRegistry) -> None:
        for i in range(MAX_NUM_ENCODERS + 1):
            encoder_type = self.properties.get_str(CRYPT_ENCODER_TYPE, i)
            if encoder_type is None:
                continue
            factory = self.schemes.get(encoder_type.lower())
            if factory is None:
                raise ConfigInvalidFault(
                    indexed_key(CRYPT_ENCODER_TYPE, i),
                    f"unknown encoder type {encoder_type!r} "
                    f"(expected one of {', '.join(sorted(self.schemes))})",
                )
            encoder = factory(self.properties, i)
            logger.debug("Built %s encoder at index %d: %r", encoder_type, i, encoder)
            encoders.add(indexed_key(CRYPT_ENCODER, i), encoder)


# ============================================================================
# Digest
# ============================================================================

class DigestEncoderBuilder(AbstractBuilder):
    """
    Builds iterated digest encoders.

    An index is configured when ``digest.encoder.<i>`` is set or any digest
    option key is present. With no option values the encoder uses the
    defaults (sha256, 500000 iterations, public salt on).
    """

    def try_create_password_encoder(self, encoders: EncoderRegistry) -> None:
        for i in range(MAX_NUM_ENCODERS + 1):
            has_options = any(self.properties.exists(key, i) for key in DIGEST_ENCODER_OPTIONS)
            if has_options:
                encoder = self._build(i)
            elif self.properties.is_set(DIGEST_ENCODER, i):
                encoder = DigestPasswordEncoder()
            else:
                continue
            logger.debug("Built digest encoder at index %d: %r", i, encoder)
            encoders.add(indexed_key(DIGEST_ENCODER, i), encoder)

    def _build(self, i: int) -> DigestPasswordEncoder:
        props = self.properties
        options: dict[str, Any] = {
            "algorithm": props.get_str(DIGEST_ENCODER_HASH_ALGORITHM_NAME, i),
            "iterations": props.get_int(DIGEST_ENCODER_HASH_ITERATIONS, i),
            "private_salt": props.get_str(DIGEST_ENCODER_PRIVATE_SALT, i),
            "generate_public_salt": props.get_bool(DIGEST_ENCODER_GENERATE_PUBLIC_SALT, i, default=True),
        }
        try:
            return DigestPasswordEncoder(**options)
        except ValueError as exc:
            key = (
                DIGEST_ENCODER_HASH_ITERATIONS
                if "iterations" in str(exc)
                else DIGEST_ENCODER_HASH_ALGORITHM_NAME
            )
            raise ConfigInvalidFault(indexed_key(key, i), str(exc)) from exc
