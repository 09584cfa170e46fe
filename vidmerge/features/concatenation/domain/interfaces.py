from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from vidmerge.core.common.enums import StreamFilterMode

class IConcatenator(ABC):
    """
    Contract for lossless, ordered concatenation of audio-only or video-only files.
    """
    @abstractmethod
    def concatenate(self, files: Sequence[Path], output_file: Path, mode: StreamFilterMode) -> Path:
        """
        Raises:
            ConcatenationFailure: If the process exits non-zero. The output is deleted first.
            TempFileWriteFailure: If the manifest cannot be written.
        """
        pass
