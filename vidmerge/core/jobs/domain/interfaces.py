from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from vidmerge.core.common.enums import PipelineState
from ..models import JobModel
from .models import JobSubmission

class IJobRepository(ABC):
    """
    Contract for run-history persistence.
    """

    @abstractmethod
    def create_job(self, submission: JobSubmission) -> UUID:
        """Creates a PENDING record and returns its id."""
        pass

    @abstractmethod
    def get_job(self, job_id: UUID) -> Optional[JobModel]:
        pass

    @abstractmethod
    def mark_started(self, job_id: UUID) -> None:
        pass

    @abstractmethod
    def update_stage(self, job_id: UUID, stage: PipelineState) -> None:
        pass

    @abstractmethod
    def mark_completed(self, job_id: UUID, result: dict) -> None:
        pass

    @abstractmethod
    def mark_failed(self, job_id: UUID, error_kind: str, error_message: str) -> None:
        pass
