"""
Password encoders (encoders.py)

Hashing parameters are kept tiny so the suite stays fast.
"""

import pytest

from authconf.encoders import (
    Argon2PasswordEncoder,
    CryptPasswordEncoder,
    DigestPasswordEncoder,
    PasswordEncoder,
)


# ============================================================================
# CryptPasswordEncoder
# ============================================================================

class TestCryptPasswordEncoder:

    def test_pbkdf2_round_trip(self):
        encoder = CryptPasswordEncoder("pbkdf2_sha256", rounds=1000)
        hashed = encoder.hash("secret")
        assert hashed.startswith("$pbkdf2-sha256$1000$")
        assert encoder.verify(hashed, "secret")
        assert not encoder.verify(hashed, "wrong")

    def test_bcrypt_round_trip(self):
        encoder = CryptPasswordEncoder("bcrypt", rounds=4)
        hashed = encoder.hash("secret")
        assert hashed.startswith("$2b$04$")
        assert encoder.verify(hashed, "secret")
        assert not encoder.verify(hashed, "wrong")

    def test_none_settings_dropped(self):
        encoder = CryptPasswordEncoder("pbkdf2_sha256", rounds=None, salt_size=None)
        assert encoder.settings == {}

    def test_plaintext(self):
        encoder = CryptPasswordEncoder("plaintext")
        assert encoder.hash("secret") == "secret"
        assert encoder.verify("secret", "secret")

    def test_verify_malformed_hash(self):
        encoder = CryptPasswordEncoder("pbkdf2_sha256", rounds=1000)
        assert encoder.verify("not-a-hash", "secret") is False

    def test_protocol(self):
        assert isinstance(CryptPasswordEncoder("plaintext"), PasswordEncoder)

    def test_unknown_scheme(self):
        with pytest.raises(KeyError):
            CryptPasswordEncoder("rot13")


# ============================================================================
# Argon2PasswordEncoder
# ============================================================================

class TestArgon2PasswordEncoder:

    @pytest.fixture
    def encoder(self):
        return Argon2PasswordEncoder(time_cost=1, memory_cost=8, parallelism=1)

    def test_round_trip(self, encoder):
        hashed = encoder.hash("secret")
        assert hashed.startswith("$argon2id$")
        assert encoder.verify(hashed, "secret")
        assert not encoder.verify(hashed, "wrong")

    def test_invalid_hash(self, encoder):
        assert encoder.verify("garbage", "secret") is False

    def test_defaults(self):
        encoder = Argon2PasswordEncoder()
        assert (encoder.time_cost, encoder.memory_cost, encoder.parallelism) == (2, 65536, 4)

    def test_needs_rehash(self, encoder):
        other = Argon2PasswordEncoder(time_cost=2, memory_cost=8, parallelism=1)
        assert other.check_needs_rehash(encoder.hash("secret"))
        assert not encoder.check_needs_rehash(encoder.hash("secret"))


# ============================================================================
# DigestPasswordEncoder
# ============================================================================

class TestDigestPasswordEncoder:

    def test_defaults(self):
        encoder = DigestPasswordEncoder()
        assert encoder.algorithm == "sha256"
        assert encoder.iterations == 500000
        assert encoder.generate_public_salt is True

    def test_round_trip(self):
        encoder = DigestPasswordEncoder(iterations=10)
        hashed = encoder.hash("secret")
        assert hashed.startswith("$digest$sha256$10$")
        assert encoder.verify(hashed, "secret")
        assert not encoder.verify(hashed, "wrong")

    def test_public_salt_varies(self):
        encoder = DigestPasswordEncoder(iterations=2)
        assert encoder.hash("secret") != encoder.hash("secret")

    def test_without_public_salt_is_deterministic(self):
        encoder = DigestPasswordEncoder(iterations=2, generate_public_salt=False)
        assert encoder.hash("secret") == encoder.hash("secret")

    def test_private_salt_required_to_verify(self):
        salted = DigestPasswordEncoder(iterations=3, private_salt="pepper")
        unsalted = DigestPasswordEncoder(iterations=3)
        hashed = salted.hash("secret")
        assert salted.verify(hashed, "secret")
        assert not unsalted.verify(hashed, "secret")

    def test_algorithm_normalized(self):
        assert DigestPasswordEncoder(algorithm="SHA-512", iterations=1).algorithm == "sha512"

    def test_algorithm_mismatch(self):
        hashed = DigestPasswordEncoder(algorithm="sha512", iterations=1).hash("secret")
        assert not DigestPasswordEncoder(iterations=1).verify(hashed, "secret")

    def test_unknown_algorithm(self):
        with pytest.raises(ValueError):
            DigestPasswordEncoder(algorithm="md42")

    @pytest.mark.parametrize("algorithm", ["shake_128", "shake_256"])
    def test_variable_length_algorithm(self, algorithm):
        with pytest.raises(ValueError):
            DigestPasswordEncoder(algorithm=algorithm)

    def test_invalid_iterations(self):
        with pytest.raises(ValueError):
            DigestPasswordEncoder(iterations=0)

    def test_malformed_hash(self):
        encoder = DigestPasswordEncoder(iterations=1)
        assert encoder.verify("$digest$sha256$x$y", "secret") is False
        assert encoder.verify("plain", "secret") is False
