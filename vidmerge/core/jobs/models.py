import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Float, Integer, DateTime, Enum as SQLEnum, JSON, Uuid
from vidmerge.core.database.base import Base
from vidmerge.core.common.enums import PipelineState
from .types import JobType, JobStatus

def utc_now():
    return datetime.now(timezone.utc)

class JobModel(Base):
    """
    History of one combine run.
    Only an audit record: temp files are owned by the in-memory Job, never by this row.
    """
    __tablename__ = "jobs"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    job_type = Column(SQLEnum(JobType), nullable=False, default=JobType.COMBINE)
    status = Column(SQLEnum(JobStatus), default=JobStatus.PENDING, nullable=False, index=True)

    # Last pipeline stage entered; on failure, the stage that failed
    stage = Column(SQLEnum(PipelineState), default=PipelineState.IDLE, nullable=False)

    payload = Column(JSON, default=dict)     # inputs, output, volume
    result_meta = Column(JSON, default=dict) # output path, swept count

    output_path = Column(String, nullable=False)
    volume = Column(Float, nullable=False)
    swept_files = Column(Integer, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utc_now)
    started_at = Column(DateTime(timezone=True), nullable=True)
    finished_at = Column(DateTime(timezone=True), nullable=True)

    error_kind = Column(String, nullable=True)
    error_message = Column(String, nullable=True)
