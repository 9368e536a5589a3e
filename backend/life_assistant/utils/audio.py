"""Audio upload utilities."""
import os
from typing import Optional

# MediaRecorder output plus the formats Whisper accepts
SUPPORTED_AUDIO_TYPES = {
    "audio/webm": ".webm",
    "audio/ogg": ".ogg",
    "audio/wav": ".wav",
    "audio/x-wav": ".wav",
    "audio/wave": ".wav",
    "audio/mpeg": ".mp3",
    "audio/mp3": ".mp3",
    "audio/mp4": ".mp4",
    "audio/m4a": ".m4a",
    "audio/x-m4a": ".m4a",
    "video/webm": ".webm",
}


def normalize_content_type(content_type: Optional[str]) -> str:
    """Drop parameters such as ``;codecs=opus`` and lower-case the type."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def is_supported_audio(content_type: Optional[str]) -> bool:
    return normalize_content_type(content_type) in SUPPORTED_AUDIO_TYPES


def upload_filename(filename: Optional[str], content_type: Optional[str]) -> str:
    """
    Filename to send to the transcription provider.

    Whisper detects the format from the extension, so keep the caller's
    name when it has one and derive one from the content type otherwise.
    """
    if filename and os.path.splitext(filename)[1]:
        return os.path.basename(filename)
    suffix = SUPPORTED_AUDIO_TYPES.get(normalize_content_type(content_type), ".webm")
    return f"recording{suffix}"
