from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from vidmerge.core.common.enums import ArtifactStage

class IFileSystem(ABC):
    @abstractmethod
    def remove_if_exists(self, path: Path) -> bool:
        """
        Deletes the file if it is on disk.
        Returns True if something was deleted, False if it was already gone.
        """
        pass

class IArtifactTracker(ABC):
    """
    Contract for the per-run registry of intermediate files.
    """

    @abstractmethod
    def record(self, path: Path, stage: ArtifactStage) -> None:
        pass

    @abstractmethod
    def purge(self) -> List[Path]:
        """
        Deletes every recorded artifact still on disk.
        Missing files are not an error. Returns the paths actually deleted.
        """
        pass
