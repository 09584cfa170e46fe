import logging
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Optional
from uuid import UUID

from vidmerge.core.common.enums import PipelineState
from vidmerge.core.database.connection import init_db
from vidmerge.core.errors import PipelineError
from vidmerge.features.combine_pipeline.domain.models import CombineRequest, InputSet
from vidmerge.features.combine_pipeline.service.job_handler import CombineHandler
from ..data.repository import SqlJobRepo
from ..domain.interfaces import IJobRepository
from ..domain.models import JobOutcome, JobSubmission
from ..types import JobStatus, JobType

logger = logging.getLogger(__name__)

CompletionCallback = Callable[[JobOutcome], None]

class JobManager:
    """
    Public API for the Jobs Core Module.
    Records each combine run and executes it, either inline or on the worker.
    """

    def __init__(self, repo: Optional[IJobRepository] = None, handler: Optional[CombineHandler] = None):
        # In a full DI framework, this would be injected.
        if repo is None:
            init_db()
            repo = SqlJobRepo()
        self.repo = repo
        self.handler = handler or CombineHandler()
        self._executor: Optional[ThreadPoolExecutor] = None

    def submit_job(self, submission: JobSubmission) -> UUID:
        """Create a Job Record in PENDING state."""
        job_id = self.repo.create_job(submission)
        logger.info(f"Job Submitted: {job_id} [{submission.job_type.value}]")
        return job_id

    def run_job(self, job_id: UUID) -> JobOutcome:
        """
        Executes a recorded job and stores its outcome.
        Pipeline failures end up on the record, not as exceptions.
        """
        job = self.repo.get_job(job_id)
        if not job:
            raise ValueError(f"Job {job_id} not found.")

        self.repo.mark_started(job_id)
        stage = PipelineState.IDLE

        def on_stage(state: PipelineState) -> None:
            nonlocal stage
            # FAILED is a status, not a stage; keep the stage that failed
            if state != PipelineState.FAILED:
                stage = state
                self.repo.update_stage(job_id, state)

        try:
            logger.info(f"Starting Job {job_id} ({job.job_type.value})...")
            result = self._route_to_feature(job.job_type, job.payload, on_stage)

            self.repo.mark_completed(job_id, result)
            logger.info(f"Job {job_id} Completed successfully.")
            return JobOutcome(job_id, JobStatus.COMPLETED, stage, "Successfully combined videos", result=result)

        except PipelineError as e:
            self.repo.mark_failed(job_id, type(e).__name__, e.message)
            logger.error(f"Job {job_id} Failed at {e.stage}: {e.message}")
            return JobOutcome(job_id, JobStatus.FAILED, stage, e.message, error=e.to_dict())

        except Exception as e:
            # Execution error
            self.repo.mark_failed(job_id, type(e).__name__, str(e))
            logger.exception(f"Job {job_id} Failed: {e}")
            return JobOutcome(
                job_id, JobStatus.FAILED, stage, str(e),
                error={"kind": type(e).__name__, "stage": stage.value, "message": str(e), "paths": []},
            )

    def run(self, submission: JobSubmission) -> JobOutcome:
        """Submit and execute on the calling thread."""
        return self.run_job(self.submit_job(submission))

    def dispatch(self, submission: JobSubmission, on_complete: Optional[CompletionCallback] = None) -> "Future[JobOutcome]":
        """
        Runs the job on the worker thread and hands the outcome to on_complete.
        A single worker: runs queue up, they never overlap.
        """
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="vidmerge-worker")

        def work() -> JobOutcome:
            try:
                outcome = self.run(submission)
            except Exception as e:
                # The job layer itself broke; the caller still gets an outcome
                logger.exception(f"Job could not be recorded or run: {e}")
                outcome = JobOutcome(
                    None, JobStatus.FAILED, PipelineState.IDLE, str(e),
                    error={"kind": type(e).__name__, "stage": PipelineState.IDLE.value, "message": str(e), "paths": []},
                )
            if on_complete:
                # Called on the worker; a UI must marshal it onto its own thread
                on_complete(outcome)
            return outcome

        return self._executor.submit(work)

    def shutdown(self, wait: bool = True) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=wait)
            self._executor = None

    def _route_to_feature(self, job_type: JobType, payload: dict, on_stage) -> dict:
        """
        Routes the job to the correct Feature Handler.
        """
        if job_type == JobType.COMBINE:
            request = CombineRequest(
                inputs=InputSet.from_paths(payload["inputs"]),
                output_file=Path(payload["output"]),
                volume=float(payload["volume"]),
            )
            return self.handler.handle(request, on_stage=on_stage)

        raise NotImplementedError(f"No handler registered for JobType: {job_type}")
