from pathlib import Path
from ..domain.models import ExtractionResult
from ..data.ffmpeg_adapter import FFmpegTrackExtractor

def extract_track(input_path: str, track_index: int, volume: float) -> ExtractionResult:
    """
    Standalone API: Extracts one audio track from a clip.
    Does NOT interact with the database and does not clean up after itself.
    """
    adapter = FFmpegTrackExtractor()
    return adapter.extract(Path(input_path), track_index, volume)
