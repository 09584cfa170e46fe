from abc import ABC, abstractmethod
from .models import CombineRequest, Job

class ICombinePipeline(ABC):
    """
    Runs one combine job end to end.
    """
    @abstractmethod
    def run(self, request: CombineRequest) -> Job:
        """
        Returns the finished Job on success.

        Raises:
            InsufficientInputs: If fewer than two clips were given. Nothing runs.
            PipelineError: The first failure, after all temp files were swept.
        """
        pass
