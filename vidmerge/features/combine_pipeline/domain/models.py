# File: vidmerge/features/combine_pipeline/domain/models.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple

from vidmerge.core.common.enums import PipelineState
from vidmerge.core.config.settings import settings
from vidmerge.features.temp_artifacts.domain.interfaces import IArtifactTracker

MIN_FILES_TO_COMBINE = 2

@dataclass(frozen=True)
class InputSet:
    """
    Ordered clips to combine. Order is the playback order of the output.
    One file is enough to import; two are needed to run.
    """
    files: Tuple[Path, ...]

    def __post_init__(self):
        if not self.files:
            raise ValueError("An input set needs at least one file.")

    @classmethod
    def from_paths(cls, paths: Iterable) -> "InputSet":
        return cls(tuple(Path(p) for p in paths))

    @property
    def can_combine(self) -> bool:
        return len(self.files) >= MIN_FILES_TO_COMBINE

    def __len__(self) -> int:
        return len(self.files)

    def __iter__(self) -> Iterator[Path]:
        return iter(self.files)

@dataclass(frozen=True)
class CombineRequest:
    """
    Immutable snapshot of what the operator asked for.
    Volume applies to the background track only and is not range-checked.
    """
    inputs: InputSet
    output_file: Path
    volume: float = settings.DEFAULT_VOLUME

    def to_payload(self) -> dict:
        return {
            "inputs": [str(p) for p in self.inputs],
            "output": str(self.output_file),
            "volume": self.volume,
        }

# Per-file work alternates between extraction and merge until the last clip
ALLOWED_TRANSITIONS: Dict[PipelineState, FrozenSet[PipelineState]] = {
    PipelineState.IDLE: frozenset({PipelineState.EXTRACTING_TRACKS}),
    PipelineState.EXTRACTING_TRACKS: frozenset({PipelineState.MERGING_PER_FILE_AUDIO}),
    PipelineState.MERGING_PER_FILE_AUDIO: frozenset({
        PipelineState.EXTRACTING_TRACKS,
        PipelineState.CONCATENATING_VIDEO,
    }),
    PipelineState.CONCATENATING_VIDEO: frozenset({PipelineState.CONCATENATING_AUDIO}),
    PipelineState.CONCATENATING_AUDIO: frozenset({PipelineState.MUXING}),
    PipelineState.MUXING: frozenset({PipelineState.DONE}),
    PipelineState.DONE: frozenset(),
    PipelineState.FAILED: frozenset(),
}

@dataclass
class Job:
    """
    One orchestration run: the request plus everything accumulated while running it.
    Owned by the orchestrator from start to finish.
    """
    request: CombineRequest
    tracker: IArtifactTracker
    state: PipelineState = PipelineState.IDLE
    merged_audio_files: List[Path] = field(default_factory=list)
    error: Optional[Exception] = None
    failed_stage: Optional[PipelineState] = None
    swept_files: List[Path] = field(default_factory=list)

    def advance(self, new_state: PipelineState) -> None:
        if new_state == PipelineState.FAILED:
            if self.state.is_terminal:
                raise ValueError(f"Cannot fail a finished job (state={self.state.value})")
        elif new_state not in ALLOWED_TRANSITIONS[self.state]:
            raise ValueError(f"Illegal transition {self.state.value} -> {new_state.value}")
        self.state = new_state

    def fail(self, error: Exception) -> None:
        self.failed_stage = self.state
        self.error = error
        self.advance(PipelineState.FAILED)

    @property
    def succeeded(self) -> bool:
        return self.state == PipelineState.DONE
