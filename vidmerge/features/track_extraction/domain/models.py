from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from vidmerge.core.shared_types import MediaFile

def track_output_path(input_file: Path, track_index: int) -> Path:
    """clip1.mp4, 0 -> clip1_track-0.ogg"""
    return MediaFile(Path(input_file)).derive(f"_track-{track_index}.ogg")

@dataclass(frozen=True)
class TrackSelector:
    """
    Picks the Nth audio stream of the first input: "0:a:<index>".
    """
    track_index: int
    input_index: int = 0

    def __post_init__(self):
        if self.track_index < 0:
            raise ValueError(f"Track index cannot be negative: {self.track_index}")

    def to_map_spec(self) -> str:
        return f"{self.input_index}:a:{self.track_index}"

@dataclass
class ExtractionResult:
    """
    The extracted single-track audio file, plus every path the call produced.
    The caller owns cleanup of produced_paths.
    """
    output_path: Path
    produced_paths: List[Path] = field(default_factory=list)
