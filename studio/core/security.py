"""Credential helpers (hashing and verification)."""

from __future__ import annotations

import hashlib
import secrets

DIGEST_LENGTH = 64


def hash_password(password: str) -> str:
    """Return the SHA-256 hex digest stored for *password*."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def verify_password(password: str, stored_hash: str | None) -> bool:
    stored = stored_hash or ""
    return secrets.compare_digest(hash_password(password), stored)
