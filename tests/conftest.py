# File: tests/conftest.py

import os
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())

# 2. Point the run history at a throwaway SQLite file before settings load
_TEST_DATA_DIR = Path(tempfile.mkdtemp(prefix="vidmerge_test_"))
os.environ.setdefault("VIDMERGE_DATA_DIR", str(_TEST_DATA_DIR))
os.environ.setdefault("VIDMERGE_DATABASE_URL", f"sqlite:///{_TEST_DATA_DIR / 'test_vidmerge.db'}")

from vidmerge.core.ffmpeg.runner import FFmpegOutcome, FFmpegRunner


@dataclass
class FakeCall:
    args: List[str]
    manifest_path: Optional[Path] = None
    manifest_lines: Optional[List[str]] = None

    @property
    def output(self) -> Path:
        return Path(self.args[-1])

    @property
    def kind(self) -> str:
        if "-map" in self.args:
            return "extract"
        if "amerge" in self.args:
            return "merge"
        if "concat" in self.args:
            return "concat"
        if "-c:v" in self.args:
            return "mux"
        return "other"


class FakeRunner(FFmpegRunner):
    """
    Stands in for the ffmpeg process.
    Writes a small file at the output path, or exits 1 when fail_when matches.
    """

    def __init__(self, fail_when: Optional[Callable[[FakeCall], bool]] = None, partial_output_on_failure: bool = True):
        super().__init__(binary="ffmpeg")
        self.fail_when = fail_when
        self.partial_output_on_failure = partial_output_on_failure
        self.calls: List[FakeCall] = []

    def run(self, args) -> FFmpegOutcome:
        args = [str(a) for a in args]
        call = FakeCall(args=args)

        if "concat" in args:
            # The manifest only exists while ffmpeg runs; read it now
            call.manifest_path = Path(args[args.index("-i") + 1])
            call.manifest_lines = call.manifest_path.read_text(encoding="utf-8").splitlines()

        self.calls.append(call)
        cmd = self.build_command(args)

        if self.fail_when and self.fail_when(call):
            if self.partial_output_on_failure:
                call.output.write_bytes(b"partial")
            return FFmpegOutcome(command=cmd, returncode=1, stderr="simulated ffmpeg failure")

        call.output.write_bytes(b"media")
        return FFmpegOutcome(command=cmd, returncode=0)

    def version(self) -> str:
        return "ffmpeg version fake"

    def of_kind(self, kind: str) -> List[FakeCall]:
        return [c for c in self.calls if c.kind == kind]


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def clips(tmp_path):
    """
    Two dummy clips. Content is irrelevant to the fake runner.
    """
    paths = []
    for name in ("clip1.mp4", "clip2.mp4"):
        p = tmp_path / name
        p.write_bytes(b"FAKE_VIDEO")
        paths.append(p)
    return paths
