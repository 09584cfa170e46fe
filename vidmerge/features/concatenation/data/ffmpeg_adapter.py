import logging
from pathlib import Path
from typing import Optional, Sequence

from vidmerge.core.common.enums import StreamFilterMode
from vidmerge.core.errors import ConcatenationFailure
from vidmerge.core.ffmpeg.runner import FFmpegRunner
from vidmerge.features.temp_artifacts.data.local_fs import LocalFileSystem
from vidmerge.features.temp_artifacts.domain.interfaces import IFileSystem
from ..domain.interfaces import IConcatenator
from ..domain.models import ConcatRequest
from .manifest import concat_manifest

logger = logging.getLogger(__name__)

class FFmpegConcatenator(IConcatenator):
    """
    Concrete implementation of IConcatenator using the FFmpeg concat demuxer.
    Streams are copied, never re-encoded.
    """

    def __init__(self, runner: Optional[FFmpegRunner] = None, fs: Optional[IFileSystem] = None):
        self.runner = runner or FFmpegRunner()
        self.fs = fs or LocalFileSystem()

    def concatenate(self, files: Sequence[Path], output_file: Path, mode: StreamFilterMode) -> Path:
        request = ConcatRequest(tuple(Path(f) for f in files), Path(output_file), StreamFilterMode(mode))

        with concat_manifest(request.manifest_lines()) as manifest:
            # -f concat -safe 0: read the list, allow absolute paths
            # -c copy: stream-copy, no re-encode
            args = [
                "-f", "concat",
                "-safe", "0",
                "-i", manifest,
                "-c", "copy",
            ]
            if request.mode == StreamFilterMode.VIDEO_ONLY:
                # -an: drop audio from the video concatenation
                args.append("-an")
            args.append(request.output_file)

            logger.info(f"Concatenating {len(request.files)} file(s) [{request.mode.value}] into {request.output_file}")
            outcome = self.runner.run(args)

        if not outcome.ok:
            self.fs.remove_if_exists(request.output_file)
            raise ConcatenationFailure(request.mode, request.output_file, stderr=outcome.stderr)

        return request.output_file
