from pathlib import Path
from typing import Iterable, Optional

from vidmerge.core.config.settings import settings
from ..domain.models import CombineRequest, InputSet, Job
from .orchestrator import PipelineOrchestrator

def combine_videos(input_paths: Iterable[str], output_path: str, volume: Optional[float] = None) -> Job:
    """
    Public Service API: combine clips into one video with a single mixed audio track.
    Does NOT interact with the database.

    Args:
        input_paths: Clips in playback order (at least two).
        output_path: Final video path. Its parent directory must exist.
        volume: Background gain. Defaults to settings.DEFAULT_VOLUME.
    """
    # 1. Map Primitives to Domain Objects
    request = CombineRequest(
        inputs=InputSet.from_paths(input_paths),
        output_file=Path(output_path),
        volume=settings.DEFAULT_VOLUME if volume is None else volume,
    )

    # 2. Execute Logic
    return PipelineOrchestrator().run(request)
