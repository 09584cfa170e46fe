# File: vidmerge/core/ffmpeg/runner.py

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from vidmerge.core.config.settings import settings
from vidmerge.core.errors import ExternalCapabilityUnavailable

logger = logging.getLogger(__name__)

Arg = Union[str, Path]


@dataclass(frozen=True)
class FFmpegOutcome:
    """
    Result of one ffmpeg child process.
    Exit status 0 is success; stderr is kept for logging only.
    """
    command: List[str]
    returncode: int
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class FFmpegRunner:
    """
    Launches ffmpeg synchronously and waits for it.
    A launch failure is raised; a non-zero exit is returned to the caller,
    which decides what failure it means for its stage.
    """

    def __init__(self, binary: Optional[str] = None):
        self.binary = binary or settings.FFMPEG_BINARY

    def build_command(self, args: Sequence[Arg]) -> List[str]:
        # -y: Overwrite output files without asking
        return [self.binary, "-y", "-hide_banner", *[str(a) for a in args]]

    def run(self, args: Sequence[Arg]) -> FFmpegOutcome:
        cmd = self.build_command(args)
        logger.info(f"Executing FFmpeg: {' '.join(cmd)}")

        try:
            proc = subprocess.run(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                text=True,
            )
        except OSError as e:
            logger.error(f"Could not launch {self.binary}: {e}")
            raise ExternalCapabilityUnavailable(
                f"Could not launch {self.binary}: {e}", paths=[Path(self.binary)]
            ) from e

        outcome = FFmpegOutcome(command=cmd, returncode=proc.returncode, stderr=proc.stderr or "")
        if not outcome.ok:
            logger.error(f"FFmpeg exited with {outcome.returncode}. STDERR: {outcome.stderr}")
        return outcome

    def version(self) -> str:
        """First line of `ffmpeg -version`."""
        try:
            proc = subprocess.run(
                [self.binary, "-hide_banner", "-version"],
                capture_output=True,
                text=True,
                check=True,
            )
        except OSError as e:
            raise ExternalCapabilityUnavailable(
                f"Could not launch {self.binary}: {e}", paths=[Path(self.binary)]
            ) from e
        except subprocess.CalledProcessError as e:
            raise ExternalCapabilityUnavailable(
                f"{self.binary} -version exited with {e.returncode}", paths=[Path(self.binary)]
            ) from e

        lines = proc.stdout.strip().splitlines()
        return lines[0] if lines else ""
