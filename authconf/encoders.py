"""
authconf - Password Encoders

Encoders produced by the encoder builders and consumed by database
authenticators:

- CryptPasswordEncoder: any passlib scheme (bcrypt, pbkdf2_sha256, scrypt,
  sha256_crypt, plaintext)
- Argon2PasswordEncoder: Argon2id through argon2-cffi
- DigestPasswordEncoder: iterated hashlib digest with optional private salt
  and generated public salt
"""

from __future__ import annotations

import base64
import hashlib
import secrets
from typing import Any, Protocol, runtime_checkable

from argon2 import PasswordHasher as Argon2PasswordHasher
from argon2.exceptions import InvalidHash, VerificationError, VerifyMismatchError
from passlib.registry import get_crypt_handler


@runtime_checkable
class PasswordEncoder(Protocol):
    """Hash and verify passwords."""

    def hash(self, password: str) -> str: ...

    def verify(self, password_hash: str, password: str) -> bool: ...


class CryptPasswordEncoder:
    """
    Password encoder backed by a passlib crypt handler.

    Args:
        scheme: passlib scheme name (``bcrypt``, ``pbkdf2_sha256``, ...)
        **settings: handler settings passed to ``handler.using()``
            (``rounds``, ``salt_size``, ``block_size``, ``parallelism``)
    """

    def __init__(self, scheme: str, **settings: Any):
        self.scheme = scheme
        self.settings = {k: v for k, v in settings.items() if v is not None}
        handler = get_crypt_handler(scheme)
        self._handler = handler.using(**self.settings) if self.settings else handler

    def hash(self, password: str) -> str:
        return self._handler.hash(password)

    def verify(self, password_hash: str, password: str) -> bool:
        """
        Verify password against hash.

        Returns False for malformed hashes or hashes of another scheme.
        """
        try:
            return self._handler.verify(password, password_hash)
        except (ValueError, TypeError):
            return False

    def __repr__(self) -> str:
        return f"CryptPasswordEncoder(scheme={self.scheme!r})"


class Argon2PasswordEncoder:
    """
    Argon2id password encoder.

    Argon2id is memory-hard and GPU-resistant.

    Security parameters default to time_cost=2, memory_cost=65536 (64MB),
    parallelism=4.
    """

    scheme = "argon2"

    def __init__(
        self,
        time_cost: int | None = None,
        memory_cost: int | None = None,
        parallelism: int | None = None,
        hash_len: int = 32,
        salt_len: int = 16,
    ):
        self.time_cost = time_cost if time_cost is not None else 2
        self.memory_cost = memory_cost if memory_cost is not None else 65536
        self.parallelism = parallelism if parallelism is not None else 4
        self.hasher = Argon2PasswordHasher(
            time_cost=self.time_cost,
            memory_cost=self.memory_cost,
            parallelism=self.parallelism,
            hash_len=hash_len,
            salt_len=salt_len,
        )

    def hash(self, password: str) -> str:
        """
        Hash password.

        Example output:
            $argon2id$v=19$m=65536,t=2,p=4$saltbase64$hashbase64
        """
        return self.hasher.hash(password)

    def verify(self, password_hash: str, password: str) -> bool:
        try:
            return self.hasher.verify(password_hash, password)
        except (VerifyMismatchError, VerificationError, InvalidHash):
            return False

    def check_needs_rehash(self, password_hash: str) -> bool:
        """True if the hash was produced with other parameters."""
        try:
            return self.hasher.check_needs_rehash(password_hash)
        except (InvalidHash, ValueError):
            return True

    def __repr__(self) -> str:
        return (
            f"Argon2PasswordEncoder(time_cost={self.time_cost}, "
            f"memory_cost={self.memory_cost}, parallelism={self.parallelism})"
        )


class DigestPasswordEncoder:
    """
    Iterated message-digest password encoder.

    The first round digests ``public_salt + private_salt + password``; each
    further round digests the previous output. The private salt is never
    stored in the encoded value.

    Encoded format:
        $digest$<algorithm>$<iterations>$<salt_b64>$<hash_b64>
    """

    DEFAULT_ALGORITHM = "sha256"
    DEFAULT_ITERATIONS = 500000

    def __init__(
        self,
        algorithm: str | None = None,
        iterations: int | None = None,
        private_salt: str | None = None,
        generate_public_salt: bool = True,
        salt_len: int = 16,
    ):
        algorithm = self._normalize_algorithm(algorithm or self.DEFAULT_ALGORITHM)
        if algorithm not in hashlib.algorithms_available:
            raise ValueError(f"Unknown hash algorithm: {algorithm}")
        if hashlib.new(algorithm).digest_size == 0:
            # shake_128 / shake_256 need an explicit output length
            raise ValueError(f"Hash algorithm has no fixed digest size: {algorithm}")
        iterations = iterations if iterations is not None else self.DEFAULT_ITERATIONS
        if iterations < 1:
            raise ValueError("Hash iterations must be at least 1")

        self.algorithm = algorithm
        self.iterations = iterations
        self.private_salt = private_salt.encode() if private_salt else b""
        self.generate_public_salt = generate_public_salt
        self.salt_len = salt_len

    @staticmethod
    def _normalize_algorithm(name: str) -> str:
        # "SHA-256" and "sha256" name the same digest
        return name.strip().lower().replace("-", "")

    def hash(self, password: str) -> str:
        salt = secrets.token_bytes(self.salt_len) if self.generate_public_salt else b""
        digest = self._digest(password, salt, self.iterations)
        salt_b64 = base64.b64encode(salt).decode()
        hash_b64 = base64.b64encode(digest).decode()
        return f"$digest${self.algorithm}${self.iterations}${salt_b64}${hash_b64}"

    def verify(self, password_hash: str, password: str) -> bool:
        """Constant-time verification; False for malformed hashes."""
        try:
            parts = password_hash.split("$")
            if len(parts) != 6 or parts[1] != "digest":
                return False
            if parts[2] != self.algorithm:
                return False
            iterations = int(parts[3])
            salt = base64.b64decode(parts[4])
            stored_hash = base64.b64decode(parts[5])
        except (AttributeError, ValueError):
            return False

        computed_hash = self._digest(password, salt, iterations)
        return secrets.compare_digest(computed_hash, stored_hash)

    def _digest(self, password: str, salt: bytes, iterations: int) -> bytes:
        digest = hashlib.new(self.algorithm)
        digest.update(salt + self.private_salt + password.encode())
        result = digest.digest()
        for _ in range(iterations - 1):
            result = hashlib.new(self.algorithm, result).digest()
        return result

    def __repr__(self) -> str:
        return (
            f"DigestPasswordEncoder(algorithm={self.algorithm!r}, iterations={self.iterations}, "
            f"generate_public_salt={self.generate_public_salt})"
        )
