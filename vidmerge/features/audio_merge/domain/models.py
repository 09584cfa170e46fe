from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from vidmerge.core.shared_types import MediaFile

def merged_audio_path(input_file: Path) -> Path:
    """clip1.mp4 -> clip1_merged_audio.ogg"""
    return MediaFile(Path(input_file)).derive("_merged_audio.ogg")

@dataclass(frozen=True)
class MergeRequest:
    audio_files: Tuple[Path, ...]
    output_file: Path

    def __post_init__(self):
        if not self.audio_files:
            raise ValueError("At least one audio file is required to merge.")

    @property
    def channel_count(self) -> int:
        # One output channel per input file; real layouts are not inspected
        return len(self.audio_files)
