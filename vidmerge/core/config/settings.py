# File: vidmerge/core/config/settings.py

import os
import shutil
from pathlib import Path


class Settings:
    # --- Paths ---
    @property
    def DATA_DIR(self) -> Path:
        # Per-user, outside the installed package
        return Path(os.getenv("VIDMERGE_DATA_DIR", str(Path.home() / ".vidmerge")))

    # --- Database (run history) ---
    @property
    def DATABASE_URL(self) -> str:
        # Read lazily so tests can point at a throwaway SQLite file.
        return os.getenv("VIDMERGE_DATABASE_URL", f"sqlite:///{self.DATA_DIR / 'vidmerge.db'}")

    # --- External Tools ---
    # Auto-detect ffmpeg or use env var
    FFMPEG_BINARY: str = os.getenv("FFMPEG_BINARY_PATH", shutil.which("ffmpeg") or "ffmpeg")

    # --- Mixing ---
    DEFAULT_VOLUME: float = 0.70
    VOICEOVER_VOLUME: float = 1.0
    BACKGROUND_TRACK_INDEX: int = 0
    VOICEOVER_TRACK_INDEX: int = 1

    # --- Codecs ---
    EXTRACT_AUDIO_CODEC: str = "libvorbis"
    MUX_AUDIO_CODEC: str = "aac"

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    def ensure_dirs(self):
        """Creates necessary data directories if they don't exist."""
        self.DATA_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
