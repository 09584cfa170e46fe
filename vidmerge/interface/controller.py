# File: vidmerge/interface/controller.py
"""
Thin adapter between a front-end (window, dialogs, CLI) and the job layer.

The front-end only collects paths and a volume string. Pressing "combine"
freezes them into a CombineRequest and hands it to the worker; from then on
the front-end just waits for the completion callback.
"""
import logging
from concurrent.futures import Future
from pathlib import Path
from typing import Iterable, List, Optional, Union

from vidmerge.core.jobs.domain.models import JobOutcome, JobSubmission
from vidmerge.core.jobs.service.manager import CompletionCallback, JobManager
from vidmerge.features.combine_pipeline.domain.models import CombineRequest, InputSet
from .volume import parse_volume

logger = logging.getLogger(__name__)

# For file dialogs; the core itself accepts any extension
VIDEO_FILE_FILTER = "Video Files\t*.{mp4,mkv}\n"


class CombineController:
    """
    Holds the operator's current selection for one window.
    Not shared between windows and never read by the pipeline directly.
    """

    def __init__(self, manager: Optional[JobManager] = None):
        self.manager = manager or JobManager()
        self._selection: Optional[InputSet] = None

    @property
    def selected_videos(self) -> List[Path]:
        return list(self._selection) if self._selection else []

    def import_videos(self, paths: Iterable[str]) -> List[Path]:
        """Replaces the selection. An empty pick (dialog cancelled) keeps the old one."""
        paths = [p for p in paths if str(p).strip()]
        if not paths:
            logger.info("No videos selected")
            return self.selected_videos

        self._selection = InputSet.from_paths(paths)
        logger.info(f"Selected videos: {[str(p) for p in self._selection]}")
        return self.selected_videos

    def build_request(self, output_path: str, volume_text: Union[str, float, None]) -> Optional[CombineRequest]:
        if not self._selection or not self._selection.can_combine:
            logger.warning(f"Select at least 2 videos to combine (have {len(self.selected_videos)})")
            return None
        if not str(output_path).strip():
            logger.warning("No output file chosen")
            return None

        return CombineRequest(
            inputs=self._selection,
            output_file=Path(output_path),
            volume=parse_volume(volume_text),
        )

    def combine(
        self,
        output_path: str,
        volume_text: Union[str, float, None],
        on_complete: Optional[CompletionCallback] = None,
    ) -> "Optional[Future[JobOutcome]]":
        """
        Dispatches a run to the worker and returns its future,
        or None when there is nothing to run.
        """
        request = self.build_request(output_path, volume_text)
        if request is None:
            return None

        logger.info(f"Output file: {request.output_file}")
        return self.manager.dispatch(JobSubmission(request), on_complete=on_complete)

    def close(self) -> None:
        self.manager.shutdown(wait=True)
