"""Utility functions."""
from life_assistant.utils.auth import auth_enabled, verify_access_key
from life_assistant.utils.audio import (
    SUPPORTED_AUDIO_TYPES,
    is_supported_audio,
    normalize_content_type,
    upload_filename,
)

__all__ = [
    "auth_enabled",
    "verify_access_key",
    "SUPPORTED_AUDIO_TYPES",
    "is_supported_audio",
    "normalize_content_type",
    "upload_filename",
]
