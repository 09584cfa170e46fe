from enum import Enum

class JobType(str, Enum):
    COMBINE = "combine"

class JobStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
