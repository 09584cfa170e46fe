# File: vidmerge/features/combine_pipeline/service/orchestrator.py
import logging
from pathlib import Path
from typing import Callable, Optional, Tuple

from vidmerge.core.common.enums import ArtifactStage, PipelineState, StreamFilterMode
from vidmerge.core.config.settings import settings
from vidmerge.core.errors import InsufficientInputs, MuxFailure
from vidmerge.core.ffmpeg.runner import FFmpegRunner
from vidmerge.features.audio_merge.data.ffmpeg_adapter import FFmpegAudioMerger
from vidmerge.features.audio_merge.domain.interfaces import IAudioMerger
from vidmerge.features.audio_merge.domain.models import merged_audio_path
from vidmerge.features.concatenation.data.ffmpeg_adapter import FFmpegConcatenator
from vidmerge.features.concatenation.domain.interfaces import IConcatenator
from vidmerge.features.concatenation.domain.models import concatenated_video_path, final_audio_path
from vidmerge.features.muxing.data.ffmpeg_adapter import FFmpegMuxer
from vidmerge.features.muxing.domain.interfaces import IMuxer
from vidmerge.features.temp_artifacts.service.tracker import TempArtifactTracker
from vidmerge.features.track_extraction.data.ffmpeg_adapter import FFmpegTrackExtractor
from vidmerge.features.track_extraction.domain.interfaces import ITrackExtractor

from ..domain.interfaces import ICombinePipeline
from ..domain.models import CombineRequest, Job

logger = logging.getLogger(__name__)

StateListener = Callable[[Job, PipelineState], None]


class PipelineOrchestrator(ICombinePipeline):
    """
    Sequences one combine job:
    per clip extract background + voiceover and merge them, then concatenate
    the video streams and the merged audio, then mux the two.

    Everything runs strictly in order on the calling thread. The first failure
    stops the run; every temp file recorded so far is swept before it surfaces.
    """

    def __init__(
        self,
        extractor: Optional[ITrackExtractor] = None,
        merger: Optional[IAudioMerger] = None,
        concatenator: Optional[IConcatenator] = None,
        muxer: Optional[IMuxer] = None,
        runner: Optional[FFmpegRunner] = None,
        on_state_change: Optional[StateListener] = None,
    ):
        runner = runner or FFmpegRunner()
        self.extractor = extractor or FFmpegTrackExtractor(runner)
        self.merger = merger or FFmpegAudioMerger(runner)
        self.concatenator = concatenator or FFmpegConcatenator(runner)
        self.muxer = muxer or FFmpegMuxer(runner)
        self.on_state_change = on_state_change

    def new_job(self, request: CombineRequest) -> Job:
        return Job(request=request, tracker=TempArtifactTracker())

    def run(self, request: CombineRequest) -> Job:
        return self.run_job(self.new_job(request))

    def run_job(self, job: Job) -> Job:
        request = job.request
        if not request.inputs.can_combine:
            raise InsufficientInputs(
                f"At least 2 videos are required to combine, got {len(request.inputs)}",
                paths=request.inputs.files,
            )

        logger.info(f"Combining {len(request.inputs)} videos into {request.output_file} (volume={request.volume})")

        try:
            self._execute(job)
        except Exception as e:
            logger.error(f"Combine failed during {job.state.value}: {e}")
            # A listener can raise on DONE; the job is finished, keep that error as is
            if not job.state.is_terminal:
                job.fail(e)
                self._notify(job)
            raise
        finally:
            job.swept_files = job.tracker.purge()

        logger.info(f"Successfully combined videos into {request.output_file}")
        return job

    # --- Stages ---

    def _execute(self, job: Job) -> None:
        request = job.request

        for input_file in request.inputs:
            self._process_clip(job, input_file)

        self._transition(job, PipelineState.CONCATENATING_VIDEO)
        video_out = self.concatenator.concatenate(
            list(request.inputs),
            concatenated_video_path(request.output_file),
            StreamFilterMode.VIDEO_ONLY,
        )
        job.tracker.record(video_out, ArtifactStage.CONCATENATION)

        self._transition(job, PipelineState.CONCATENATING_AUDIO)
        audio_out = self.concatenator.concatenate(
            job.merged_audio_files,
            final_audio_path(request.output_file),
            StreamFilterMode.AUDIO_ONLY,
        )
        job.tracker.record(audio_out, ArtifactStage.CONCATENATION)

        self._transition(job, PipelineState.MUXING)
        self._mux(job, video_out, audio_out)

        self._transition(job, PipelineState.DONE)

    def _process_clip(self, job: Job, input_file: Path) -> None:
        volume = job.request.volume

        self._transition(job, PipelineState.EXTRACTING_TRACKS)
        background = self.extractor.extract(input_file, settings.BACKGROUND_TRACK_INDEX, volume)
        job.tracker.record_all(background.produced_paths, ArtifactStage.TRACK_EXTRACTION)

        voiceover = self.extractor.extract(input_file, settings.VOICEOVER_TRACK_INDEX, settings.VOICEOVER_VOLUME)
        job.tracker.record_all(voiceover.produced_paths, ArtifactStage.TRACK_EXTRACTION)

        self._transition(job, PipelineState.MERGING_PER_FILE_AUDIO)
        merged = self.merger.merge(
            [background.output_path, voiceover.output_path],
            merged_audio_path(input_file),
        )
        job.tracker.record(merged, ArtifactStage.PER_FILE_MERGE)
        job.merged_audio_files.append(merged)

    def _mux(self, job: Job, video_file: Path, audio_file: Path) -> None:
        output_file = job.request.output_file
        before = _file_signature(output_file)

        try:
            self.muxer.combine(video_file, audio_file, output_file)
        except MuxFailure:
            # A half-written deliverable is swept with the temp files.
            # A pre-existing file ffmpeg never touched is left alone.
            after = _file_signature(output_file)
            if after is not None and after != before:
                job.tracker.record(output_file, ArtifactStage.MUXING)
            raise

    # --- Helpers ---

    def _transition(self, job: Job, state: PipelineState) -> None:
        job.advance(state)
        logger.debug(f"Job state -> {state.value}")
        self._notify(job)

    def _notify(self, job: Job) -> None:
        if self.on_state_change:
            self.on_state_change(job, job.state)


def _file_signature(path: Path) -> Optional[Tuple[int, int]]:
    try:
        st = Path(path).stat()
    except FileNotFoundError:
        return None
    return st.st_mtime_ns, st.st_size
