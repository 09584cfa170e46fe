from abc import ABC, abstractmethod
from pathlib import Path

class IMuxer(ABC):
    """
    Contract for putting one video-only and one audio-only stream into a container.
    """
    @abstractmethod
    def combine(self, video_file: Path, audio_file: Path, output_file: Path) -> None:
        """
        Raises:
            MuxFailure: If the process exits non-zero. The output is left for the caller.
        """
        pass
