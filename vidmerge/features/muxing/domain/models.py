from dataclasses import dataclass

from vidmerge.core.shared_types import MediaFile

@dataclass(frozen=True)
class MuxRequest:
    video_file: MediaFile
    audio_file: MediaFile
    output_file: MediaFile
