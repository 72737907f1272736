"""Namespace key derivation.

A namespace key is the first 16 hex characters of the SHA-256 digest of the
shared secret. The secret itself is never stored.
"""

import hashlib

NAMESPACE_KEY_LENGTH = 16
NAMESPACE_FRAGMENT_LENGTH = 8


def derive_namespace_key(secret: str) -> str:
    """Map a secret to its fixed-length namespace key.

    Deterministic and one-way. The empty string is accepted here; callers
    that require a secret reject empty values before calling.
    """
    digest = hashlib.sha256(secret.encode("utf-8")).hexdigest()
    return digest[:NAMESPACE_KEY_LENGTH]


def namespace_fragment(key: str) -> str:
    """Short prefix of a namespace key, safe to log and to show in pick records."""
    return key[:NAMESPACE_FRAGMENT_LENGTH]
