import logging
from pathlib import Path
from typing import Optional

from vidmerge.core.config.settings import settings
from vidmerge.core.errors import ExtractionFailure
from vidmerge.core.ffmpeg.runner import FFmpegRunner
from vidmerge.features.temp_artifacts.data.local_fs import LocalFileSystem
from vidmerge.features.temp_artifacts.domain.interfaces import IFileSystem
from ..domain.interfaces import ITrackExtractor
from ..domain.models import ExtractionResult, TrackSelector, track_output_path

logger = logging.getLogger(__name__)

class FFmpegTrackExtractor(ITrackExtractor):
    """
    Concrete implementation of ITrackExtractor using FFmpeg.
    Re-encodes the selected stream to Vorbis with a volume filter applied.
    """

    def __init__(self, runner: Optional[FFmpegRunner] = None, fs: Optional[IFileSystem] = None):
        self.runner = runner or FFmpegRunner()
        self.fs = fs or LocalFileSystem()

    def extract(self, input_file: Path, track_index: int, volume: float) -> ExtractionResult:
        input_file = Path(input_file)
        selector = TrackSelector(track_index)
        output_path = track_output_path(input_file, track_index)
        produced = [output_path]

        # -map 0:a:N: Nth audio stream of the first input
        # -af volume=V: linear gain, not range-checked here
        args = [
            "-i", input_file,
            "-map", selector.to_map_spec(),
            "-af", f"volume={volume}",
            "-acodec", settings.EXTRACT_AUDIO_CODEC,
            output_path,
        ]

        logger.info(f"Extracting track {track_index} of {input_file} at volume {volume}")
        outcome = self.runner.run(args)

        if not outcome.ok:
            for p in produced:
                self.fs.remove_if_exists(p)
            raise ExtractionFailure(input_file, track_index, stderr=outcome.stderr)

        return ExtractionResult(output_path=output_path, produced_paths=produced)
