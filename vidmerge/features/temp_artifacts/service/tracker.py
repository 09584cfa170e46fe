import logging
from pathlib import Path
from typing import Iterable, List, Optional

from vidmerge.core.common.enums import ArtifactStage
from ..data.local_fs import LocalFileSystem
from ..domain.interfaces import IArtifactTracker, IFileSystem
from ..domain.models import TempArtifact

logger = logging.getLogger(__name__)

class TempArtifactTracker(IArtifactTracker):
    """
    Records every intermediate file one run produces and deletes them on demand.
    Owned by exactly one run; never shared.
    """

    def __init__(self, fs: Optional[IFileSystem] = None):
        self.fs = fs or LocalFileSystem()
        self._artifacts: List[TempArtifact] = []

    def record(self, path: Path, stage: ArtifactStage) -> None:
        artifact = TempArtifact(Path(path), stage)
        # Re-recording the same path must not cause a second delete
        if artifact.path not in self.paths:
            self._artifacts.append(artifact)

    def record_all(self, paths: Iterable[Path], stage: ArtifactStage) -> None:
        for p in paths:
            self.record(p, stage)

    @property
    def artifacts(self) -> List[TempArtifact]:
        return list(self._artifacts)

    @property
    def paths(self) -> List[Path]:
        return [a.path for a in self._artifacts]

    def __len__(self) -> int:
        return len(self._artifacts)

    def purge(self) -> List[Path]:
        deleted: List[Path] = []
        failed: List[Path] = []

        for artifact in self._artifacts:
            try:
                if self.fs.remove_if_exists(artifact.path):
                    deleted.append(artifact.path)
            except OSError as e:
                # Keep sweeping; one stuck file must not leave the rest behind
                logger.error(f"Failed to delete temp file {artifact.path}: {e}")
                failed.append(artifact.path)

        self._artifacts = []
        if failed:
            logger.warning(f"{len(failed)} temp file(s) could not be deleted: {[str(p) for p in failed]}")
        logger.info(f"Swept {len(deleted)} temp file(s)")
        return deleted
