# File: vidmerge/interface/cli.py
"""Command-line front-end: the same inputs as the window, non-interactively."""
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from vidmerge.core.config.settings import settings
from vidmerge.core.errors import PipelineError
from vidmerge.core.ffmpeg.runner import FFmpegRunner
from vidmerge.core.jobs.domain.models import JobSubmission
from vidmerge.core.logging_utils import setup_logging
from vidmerge.features.combine_pipeline.domain.models import MIN_FILES_TO_COMBINE, CombineRequest, InputSet
from vidmerge.features.combine_pipeline.service.api import combine_videos
from .volume import parse_volume

EXIT_PIPELINE_FAILED = 1
EXIT_USAGE = 2


@click.group()
@click.option("--log-level", default=None, help="Log level (e.g. INFO, DEBUG). Defaults to LOG_LEVEL or INFO.")
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str]) -> None:
    """Combine voiceover clips into one video."""
    # Logging is configured by the command, which may carry its own --log-level
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level


@cli.command("combine")
@click.option("-i", "--input", "inputs", multiple=True, required=True,
              help="Input clip. Repeat in playback order.")
@click.option("-o", "--output", required=True, help="Output video path.")
@click.option("-v", "--volume", default=str(settings.DEFAULT_VOLUME), show_default=True,
              help="Background track gain. Unparseable values fall back to the default.")
@click.option("--record/--no-record", default=True, show_default=True,
              help="Store the run in the job history database.")
@click.option("--log-level", default=None, help="Log level for this run. Overrides the group option.")
@click.pass_context
def combine_command(
    ctx: click.Context, inputs: Tuple[str, ...], output: str, volume: str, record: bool, log_level: Optional[str]
) -> None:
    """Extract, mix and concatenate the clips, then mux them into OUTPUT."""
    setup_logging(log_level or ctx.obj.get("log_level"))

    if len(inputs) < MIN_FILES_TO_COMBINE or not output.strip():
        click.echo(f"Please provide at least {MIN_FILES_TO_COMBINE} input files and an output file", err=True)
        sys.exit(EXIT_USAGE)

    runner = FFmpegRunner()
    try:
        click.echo(f"ffmpeg version: {runner.version()}")
    except PipelineError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(EXIT_PIPELINE_FAILED)

    gain = parse_volume(volume)

    if record:
        # Imported here so --no-record never touches the database
        from vidmerge.core.jobs.service.manager import JobManager

        request = CombineRequest(InputSet.from_paths(inputs), Path(output), gain)
        outcome = JobManager().run(JobSubmission(request))
        if not outcome.succeeded:
            click.echo(f"Failed to combine videos: {outcome.message}", err=True)
            sys.exit(EXIT_PIPELINE_FAILED)
        click.echo(f"Successfully combined videos (job {outcome.job_id})")
        return

    try:
        combine_videos(inputs, output, gain)
    except PipelineError as e:
        click.echo(f"Failed to combine videos: {e.message}", err=True)
        sys.exit(EXIT_PIPELINE_FAILED)
    click.echo("Successfully combined videos")


@cli.command("version-check")
@click.pass_context
def version_check_command(ctx: click.Context) -> None:
    """Show which ffmpeg will be used."""
    setup_logging(ctx.obj.get("log_level"))
    runner = FFmpegRunner()
    try:
        click.echo(f"{runner.binary}: {runner.version()}")
    except PipelineError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(EXIT_PIPELINE_FAILED)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
