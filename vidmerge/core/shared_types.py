from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True)
class MediaFile:
    """
    Entity representing a media file on the filesystem.
    Encapsulates path validation and the derived-name conventions.
    """
    path: Path

    def __post_init__(self):
        if str(self.path).strip() == "." or str(self.path).strip() == "":
             raise ValueError("File path cannot be empty.")

    @property
    def stem_path(self) -> Path:
        """The path with its last extension stripped, directory kept."""
        return self.path.with_suffix("") if self.path.suffix else self.path

    def derive(self, suffix: str) -> Path:
        """
        Builds a sibling path from the stem, e.g.
        /videos/clip1.mp4 + "_merged_audio.ogg" -> /videos/clip1_merged_audio.ogg
        """
        return Path(f"{self.stem_path}{suffix}")
