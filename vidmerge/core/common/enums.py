# File: vidmerge/core/common/enums.py

from enum import Enum, unique

@unique
class StreamFilterMode(str, Enum):
    """Which elementary streams survive a concatenation."""
    AUDIO_ONLY = "audio_only"
    VIDEO_ONLY = "video_only"

@unique
class ArtifactStage(str, Enum):
    TRACK_EXTRACTION = "track_extraction"
    PER_FILE_MERGE = "per_file_merge"
    CONCATENATION = "concatenation"
    MUXING = "muxing"

@unique
class PipelineState(str, Enum):
    IDLE = "idle"
    EXTRACTING_TRACKS = "extracting_tracks"
    MERGING_PER_FILE_AUDIO = "merging_per_file_audio"
    CONCATENATING_VIDEO = "concatenating_video"
    CONCATENATING_AUDIO = "concatenating_audio"
    MUXING = "muxing"
    DONE = "done"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (PipelineState.DONE, PipelineState.FAILED)
