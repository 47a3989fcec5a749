"""
Speech synthesizers.

A synthesizer owns the single speech channel: `speak` starts an utterance,
`cancel` stops whatever is playing. The browser plays whatever utterance is
current on the channel.
"""

from __future__ import annotations

import io
import itertools
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from gtts import gTTS
from gtts.tts import gTTSError

from core.errors import SpeechError

logger = logging.getLogger(__name__)


class SpeechSynthesizer(Protocol):
    """Runtime interface of a speech backend."""

    def speak(self, text: str, locale: str) -> None:
        ...

    def cancel(self) -> None:
        ...


@dataclass(frozen=True)
class Utterance:
    """One rendered utterance on the speech channel."""
    seq: int
    text: str
    locale: str
    audio: bytes
    audio_format: str = "audio/mp3"


def gtts_lang(locale: str) -> str:
    """
    Map a locale such as 'en-US' to the gTTS language code 'en'.
    """
    return (locale or "en").split("-")[0].lower()


class GTTSSynthesizer:
    """
    Synthesizer that renders utterances to MP3 with Google Text-to-Speech.

    Only the most recent utterance is kept; `cancel` empties the channel.
    """

    def __init__(self, slow: bool = False):
        self.slow = slow
        self.current: Optional[Utterance] = None
        self.last_error: Optional[str] = None
        self._seq = itertools.count(1)

    def render(self, text: str, locale: str) -> bytes:
        """
        Render `text` to MP3 bytes.

        Raises:
            SpeechError: gTTS could not produce audio
        """
        buffer = io.BytesIO()
        try:
            gTTS(text=text, lang=gtts_lang(locale), slow=self.slow).write_to_fp(buffer)
        except (gTTSError, ValueError, AssertionError) as exc:
            raise SpeechError(f"Speech synthesis failed: {exc}") from exc
        return buffer.getvalue()

    def speak(self, text: str, locale: str) -> None:
        try:
            audio = self.render(text, locale)
        except SpeechError as exc:
            logger.warning("%s", exc)
            self.last_error = str(exc)
            return
        self.last_error = None
        self.current = Utterance(seq=next(self._seq), text=text, locale=locale, audio=audio)

    def cancel(self) -> None:
        self.current = None
