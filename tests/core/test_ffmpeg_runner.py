import shutil

import pytest

from vidmerge.core.errors import ExternalCapabilityUnavailable
from vidmerge.core.ffmpeg.runner import FFmpegRunner


def test_command_always_overwrites_and_hides_banner():
    runner = FFmpegRunner(binary="ffmpeg")
    assert runner.build_command(["-i", "a.mp4", "b.ogg"]) == ["ffmpeg", "-y", "-hide_banner", "-i", "a.mp4", "b.ogg"]


def test_missing_binary_is_a_launch_failure(tmp_path):
    runner = FFmpegRunner(binary=str(tmp_path / "no-such-ffmpeg"))

    with pytest.raises(ExternalCapabilityUnavailable) as exc:
        runner.run(["-i", "a.mp4", "b.ogg"])

    assert exc.value.stage == "launch"


def test_version_of_missing_binary_is_a_launch_failure(tmp_path):
    with pytest.raises(ExternalCapabilityUnavailable):
        FFmpegRunner(binary=str(tmp_path / "no-such-ffmpeg")).version()


@pytest.mark.skipif(not shutil.which("false"), reason="needs the 'false' utility")
def test_nonzero_exit_is_returned_not_raised():
    outcome = FFmpegRunner(binary=shutil.which("false")).run(["whatever"])

    assert not outcome.ok
    assert outcome.returncode != 0
