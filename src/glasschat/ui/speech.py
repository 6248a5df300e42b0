"""Text-to-speech playback through the platform speech command.

Uses ``say`` on macOS and ``espeak`` (or ``espeak-ng``) on Linux. Only one
utterance plays at a time: starting a new one stops the current one.
"""

import shutil
import subprocess
import sys
from typing import Any


def find_speech_command(platform: str | None = None) -> list[str] | None:
    """Return the command prefix used to speak text, or None if unavailable."""
    platform = platform or sys.platform
    if platform == "darwin":
        candidates = ["say"]
    elif platform.startswith("linux"):
        candidates = ["espeak-ng", "espeak"]
    else:
        candidates = []

    for name in candidates:
        path = shutil.which(name)
        if path:
            return [path]
    return None


class Speaker:
    """Holds at most one active utterance."""

    def __init__(self, command: list[str] | None = None) -> None:
        self._command = command if command is not None else find_speech_command()
        self._process: subprocess.Popen | None = None
        self._debug_callback: Any | None = None

    @property
    def available(self) -> bool:
        return self._command is not None

    @property
    def is_speaking(self) -> bool:
        return self._process is not None and self._process.poll() is None

    def set_debug_callback(self, callback: Any) -> None:
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Speech", message)

    def speak(self, text: str) -> bool:
        """Start reading ``text`` aloud. Returns False if speech is unavailable."""
        self.stop()
        if self._command is None:
            self._debug("warning", "No speech command found")
            return False
        try:
            self._process = subprocess.Popen(
                [*self._command, text],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            self._debug("error", f"Speech command failed: {e}")
            self._process = None
            return False
        self._debug("debug", f"Speaking {len(text)} chars")
        return True

    def stop(self) -> None:
        """Stop the current utterance, if any."""
        if self.is_speaking:
            self._process.terminate()
        self._process = None
