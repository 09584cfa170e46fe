from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

class IAudioMerger(ABC):
    """
    Contract for combining several audio files into one multi-channel file.
    """
    @abstractmethod
    def merge(self, audio_files: Sequence[Path], output_file: Path) -> Path:
        """
        Raises:
            ValueError: If audio_files is empty.
            MergeFailure: If the merge process exits non-zero.
        """
        pass
