from dataclasses import dataclass
from pathlib import Path

from vidmerge.core.common.enums import ArtifactStage

@dataclass(frozen=True)
class TempArtifact:
    """
    An intermediate file produced during one run.
    Never survives the end of that run.
    """
    path: Path
    stage: ArtifactStage
