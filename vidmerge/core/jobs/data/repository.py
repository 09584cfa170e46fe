from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from vidmerge.core.common.enums import PipelineState
from vidmerge.core.database.connection import SessionLocal
from ..domain.interfaces import IJobRepository
from ..domain.models import JobSubmission
from ..models import JobModel
from ..types import JobStatus

class SqlJobRepo(IJobRepository):

    def create_job(self, submission: JobSubmission) -> UUID:
        request = submission.request
        with SessionLocal() as db:
            new_job = JobModel(
                job_type=submission.job_type,
                payload=request.to_payload(),
                output_path=str(request.output_file),
                volume=request.volume,
                status=JobStatus.PENDING,
                stage=PipelineState.IDLE,
            )
            db.add(new_job)
            db.commit()
            db.refresh(new_job)
            return new_job.id

    def get_job(self, job_id: UUID) -> Optional[JobModel]:
        with SessionLocal() as db:
            job = db.get(JobModel, job_id)
            if job:
                # Detach a fully loaded copy for use outside the session
                db.expunge(job)
            return job

    def mark_started(self, job_id: UUID) -> None:
        with SessionLocal() as db:
            job = self._require(db, job_id)
            job.status = JobStatus.PROCESSING
            job.started_at = datetime.now(timezone.utc)
            db.commit()

    def update_stage(self, job_id: UUID, stage: PipelineState) -> None:
        with SessionLocal() as db:
            job = self._require(db, job_id)
            job.stage = stage
            db.commit()

    def mark_completed(self, job_id: UUID, result: dict) -> None:
        with SessionLocal() as db:
            job = self._require(db, job_id)
            job.status = JobStatus.COMPLETED
            job.result_meta = result
            job.swept_files = result.get("swept_files")
            job.finished_at = datetime.now(timezone.utc)
            db.commit()

    def mark_failed(self, job_id: UUID, error_kind: str, error_message: str) -> None:
        with SessionLocal() as db:
            job = self._require(db, job_id)
            job.status = JobStatus.FAILED
            job.error_kind = error_kind
            job.error_message = error_message
            job.finished_at = datetime.now(timezone.utc)
            db.commit()

    @staticmethod
    def _require(db, job_id: UUID) -> JobModel:
        job = db.get(JobModel, job_id)
        if not job:
            raise ValueError(f"Job {job_id} not found.")
        return job
