import logging
from pathlib import Path
from typing import List, Optional, Sequence

from vidmerge.core.config.settings import settings
from vidmerge.core.errors import MergeFailure
from vidmerge.core.ffmpeg.runner import FFmpegRunner
from vidmerge.features.temp_artifacts.data.local_fs import LocalFileSystem
from vidmerge.features.temp_artifacts.domain.interfaces import IFileSystem
from ..domain.interfaces import IAudioMerger
from ..domain.models import MergeRequest

logger = logging.getLogger(__name__)

class FFmpegAudioMerger(IAudioMerger):

    def __init__(self, runner: Optional[FFmpegRunner] = None, fs: Optional[IFileSystem] = None):
        self.runner = runner or FFmpegRunner()
        self.fs = fs or LocalFileSystem()

    def merge(self, audio_files: Sequence[Path], output_file: Path) -> Path:
        request = MergeRequest(tuple(Path(f) for f in audio_files), Path(output_file))

        inputs: List[str] = []
        for audio_file in request.audio_files:
            inputs += ["-i", str(audio_file)]

        args = [
            *inputs,
            "-filter_complex", "amerge",
            "-ac", str(request.channel_count),
            "-c:a", settings.EXTRACT_AUDIO_CODEC,
            request.output_file,
        ]

        logger.info(f"Merging {request.channel_count} audio file(s) into {request.output_file}")
        outcome = self.runner.run(args)

        if not outcome.ok:
            self.fs.remove_if_exists(request.output_file)
            raise MergeFailure(request.audio_files, request.output_file, stderr=outcome.stderr)

        return request.output_file
