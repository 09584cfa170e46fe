from abc import ABC, abstractmethod
from pathlib import Path
from .models import ExtractionResult

class ITrackExtractor(ABC):
    """
    Contract for pulling one audio track out of a multi-track clip.
    """
    @abstractmethod
    def extract(self, input_file: Path, track_index: int, volume: float) -> ExtractionResult:
        """
        Extracts audio stream `track_index` of `input_file` with a gain of `volume`.

        Args:
            input_file: Path to the source clip.
            track_index: Zero-based audio stream index (0 background, 1 voiceover).
            volume: Linear gain, passed through verbatim.

        Returns:
            ExtractionResult with the output path and the produced temp paths.

        Raises:
            ExtractionFailure: If the extraction process exits non-zero.
            ExternalCapabilityUnavailable: If ffmpeg cannot be launched.
        """
        pass
