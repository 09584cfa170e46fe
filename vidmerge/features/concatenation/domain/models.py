from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from vidmerge.core.common.enums import StreamFilterMode
from vidmerge.core.shared_types import MediaFile

def concatenated_video_path(output_file: Path) -> Path:
    """out.mkv -> out_concatenated_video.mkv"""
    return MediaFile(Path(output_file)).derive("_concatenated_video.mkv")

def final_audio_path(output_file: Path) -> Path:
    """out.mkv -> out_final_audio.ogg"""
    return MediaFile(Path(output_file)).derive("_final_audio.ogg")

def quote_manifest_path(path: Path) -> str:
    """
    Concat demuxer quoting: wrap in single quotes, and close/escape/reopen
    around any quote inside the path ('it'\\''s.mp4').
    """
    return "'" + str(path).replace("'", "'\\''") + "'"

@dataclass(frozen=True)
class ConcatRequest:
    """
    Ordered list of same-format files to be joined without re-encoding.
    Compatible codecs across inputs are the producer's responsibility.
    """
    files: Tuple[Path, ...]
    output_file: Path
    mode: StreamFilterMode

    def __post_init__(self):
        if not self.files:
            raise ValueError("At least one file is required to concatenate.")

    def manifest_lines(self) -> List[str]:
        # Absolute paths: the demuxer resolves relative entries against the manifest's own directory
        return [f"file {quote_manifest_path(f.resolve())}" for f in self.files]
