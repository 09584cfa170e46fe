# File: vidmerge/core/errors.py

from pathlib import Path
from typing import Iterable, Optional

from vidmerge.core.common.enums import StreamFilterMode


class PipelineError(Exception):
    """
    Base error for a combine run.
    Every failure names the stage it came from and the offending path(s).
    """
    stage: str = "pipeline"

    def __init__(self, message: str, paths: Iterable[Path] = (), stderr: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.paths = tuple(Path(p) for p in paths)
        self.stderr = stderr

    def to_dict(self) -> dict:
        return {
            "kind": type(self).__name__,
            "stage": self.stage,
            "message": self.message,
            "paths": [str(p) for p in self.paths],
        }


class InsufficientInputs(PipelineError):
    """Raised before any ffmpeg call when fewer than two clips are selected."""
    stage = "validation"


class ExternalCapabilityUnavailable(PipelineError):
    """ffmpeg could not be launched at all (missing binary, permission denied)."""
    stage = "launch"


class ExtractionFailure(PipelineError):
    stage = "track_extraction"

    def __init__(self, input_file: Path, track_index: int, stderr: Optional[str] = None):
        super().__init__(
            f"Failed to extract audio track {track_index} from {input_file}",
            paths=[input_file],
            stderr=stderr,
        )
        self.input_file = Path(input_file)
        self.track_index = track_index

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["track_index"] = self.track_index
        return data


class MergeFailure(PipelineError):
    stage = "audio_merge"

    def __init__(self, audio_files: Iterable[Path], output_file: Path, stderr: Optional[str] = None):
        audio_files = [Path(f) for f in audio_files]
        super().__init__(
            f"Failed to merge audio into {output_file}",
            paths=[*audio_files, output_file],
            stderr=stderr,
        )
        self.output_file = Path(output_file)


class ConcatenationFailure(PipelineError):
    stage = "concatenation"

    def __init__(self, mode: StreamFilterMode, output_file: Path, stderr: Optional[str] = None):
        label = "video" if mode == StreamFilterMode.VIDEO_ONLY else "audio"
        super().__init__(
            f"Failed to concatenate {label} into {output_file}",
            paths=[output_file],
            stderr=stderr,
        )
        self.mode = mode
        self.output_file = Path(output_file)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["mode"] = self.mode.value
        return data


class MuxFailure(PipelineError):
    stage = "muxing"

    def __init__(self, video_file: Path, audio_file: Path, output_file: Path, stderr: Optional[str] = None):
        super().__init__(
            f"Failed to combine video and audio into {output_file}",
            paths=[video_file, audio_file, output_file],
            stderr=stderr,
        )
        self.output_file = Path(output_file)


class TempFileWriteFailure(PipelineError):
    """Manifest or intermediate file could not be written."""
    stage = "temp_io"
