from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from uuid import UUID

from vidmerge.core.common.enums import PipelineState
from vidmerge.features.combine_pipeline.domain.models import CombineRequest
from ..types import JobType, JobStatus

@dataclass(frozen=True)
class JobSubmission:
    """
    DTO for requesting a new run.
    """
    request: CombineRequest
    job_type: JobType = JobType.COMBINE

@dataclass(frozen=True)
class JobOutcome:
    """
    What the front-end gets back when a run finishes.
    error is the structured form of the failure; message is the human one.
    job_id is None when the run never got a record.
    """
    job_id: Optional[UUID]
    status: JobStatus
    stage: PipelineState
    message: str
    result: Dict[str, Any] = field(default_factory=dict)
    error: Optional[Dict[str, Any]] = None

    @property
    def succeeded(self) -> bool:
        return self.status == JobStatus.COMPLETED
