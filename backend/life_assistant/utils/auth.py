"""Shared-secret authentication utilities."""
import secrets
from typing import Optional


def auth_enabled(expected_secret: str) -> bool:
    """An empty secret leaves the API open."""
    return bool(expected_secret)


def verify_access_key(provided: Optional[str], expected_secret: str) -> bool:
    """Constant-time comparison of the caller's key against the shared secret."""
    if not auth_enabled(expected_secret):
        return True
    if not provided:
        return False
    return secrets.compare_digest(provided.encode("utf-8"), expected_secret.encode("utf-8"))
