import logging
from pathlib import Path
from typing import Optional

from vidmerge.core.config.settings import settings
from vidmerge.core.errors import MuxFailure
from vidmerge.core.ffmpeg.runner import FFmpegRunner
from vidmerge.core.shared_types import MediaFile
from ..domain.interfaces import IMuxer
from ..domain.models import MuxRequest

logger = logging.getLogger(__name__)

class FFmpegMuxer(IMuxer):

    def __init__(self, runner: Optional[FFmpegRunner] = None):
        self.runner = runner or FFmpegRunner()

    def combine(self, video_file: Path, audio_file: Path, output_file: Path) -> None:
        request = MuxRequest(
            video_file=MediaFile(Path(video_file)),
            audio_file=MediaFile(Path(audio_file)),
            output_file=MediaFile(Path(output_file)),
        )

        # -c:v copy: video passes through untouched
        # -c:a aac: re-encode the Vorbis mix for the container
        # -strict experimental: Often required for AAC in older FFmpeg versions
        args = [
            "-i", request.video_file.path,
            "-i", request.audio_file.path,
            "-c:v", "copy",
            "-c:a", settings.MUX_AUDIO_CODEC,
            "-strict", "experimental",
            request.output_file.path,
        ]

        logger.info(f"Muxing {request.video_file.path} + {request.audio_file.path} -> {request.output_file.path}")
        outcome = self.runner.run(args)

        if not outcome.ok:
            raise MuxFailure(
                request.video_file.path,
                request.audio_file.path,
                request.output_file.path,
                stderr=outcome.stderr,
            )
