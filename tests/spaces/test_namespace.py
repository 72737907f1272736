"""Tests for namespace key derivation."""

import hashlib

from hypothesis import assume, given, strategies as st

from youpick.spaces.namespace import (
    NAMESPACE_KEY_LENGTH,
    derive_namespace_key,
    namespace_fragment,
)


class TestDeriveNamespaceKey:
    def test_known_value(self) -> None:
        # First 16 hex chars of sha256("hello"), the key stored for that secret.
        assert derive_namespace_key("hello") == "2cf24dba5fb0a30e"

    def test_matches_truncated_sha256(self) -> None:
        secret = "pizza night"
        expected = hashlib.sha256(secret.encode("utf-8")).hexdigest()[:16]
        assert derive_namespace_key(secret) == expected

    def test_empty_secret_is_accepted(self) -> None:
        key = derive_namespace_key("")
        assert len(key) == NAMESPACE_KEY_LENGTH

    def test_key_is_lowercase_hex(self) -> None:
        key = derive_namespace_key("Ünïcødé ✓")
        assert len(key) == NAMESPACE_KEY_LENGTH
        assert all(c in "0123456789abcdef" for c in key)

    def test_key_does_not_contain_secret(self) -> None:
        assert "secret" not in derive_namespace_key("secret")

    @given(st.text())
    def test_deterministic(self, secret: str) -> None:
        assert derive_namespace_key(secret) == derive_namespace_key(secret)

    @given(st.text(), st.text())
    def test_distinct_secrets_give_distinct_keys(self, a: str, b: str) -> None:
        assume(a != b)
        assert derive_namespace_key(a) != derive_namespace_key(b)

    @given(st.text())
    def test_fixed_length(self, secret: str) -> None:
        assert len(derive_namespace_key(secret)) == NAMESPACE_KEY_LENGTH


class TestNamespaceFragment:
    def test_first_eight_characters(self) -> None:
        assert namespace_fragment("2cf24dba5fb0a30e") == "2cf24dba"
