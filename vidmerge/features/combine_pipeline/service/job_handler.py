import logging
from typing import Callable, Optional

from vidmerge.core.common.enums import PipelineState
from ..domain.models import CombineRequest, Job
from .orchestrator import PipelineOrchestrator

logger = logging.getLogger(__name__)

class CombineHandler:
    """
    Worker for JobType.COMBINE.
    Runs the pipeline and reports stage changes to whoever tracks the run.
    """

    def __init__(self, orchestrator_factory: Optional[Callable[..., PipelineOrchestrator]] = None):
        self.orchestrator_factory = orchestrator_factory or PipelineOrchestrator

    def handle(self, request: CombineRequest, on_stage: Optional[Callable[[PipelineState], None]] = None) -> dict:
        logger.info(f"Processing Combine for {len(request.inputs)} inputs -> {request.output_file}")

        def listener(job: Job, state: PipelineState) -> None:
            if on_stage:
                on_stage(state)

        orchestrator = self.orchestrator_factory(on_state_change=listener)
        job = orchestrator.run(request)

        return {
            "output": str(request.output_file),
            "swept_files": len(job.swept_files),
            "state": job.state.value,
        }
