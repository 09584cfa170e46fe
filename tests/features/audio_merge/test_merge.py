import pytest

from vidmerge.core.errors import MergeFailure
from vidmerge.features.audio_merge.data.ffmpeg_adapter import FFmpegAudioMerger
from vidmerge.features.audio_merge.domain.models import merged_audio_path
from tests.conftest import FakeRunner


def test_derived_merge_name(tmp_path):
    assert merged_audio_path(tmp_path / "clip1.mp4") == tmp_path / "clip1_merged_audio.ogg"


def test_merge_uses_one_input_per_file_and_matching_channel_count(tmp_path, fake_runner):
    tracks = [tmp_path / "c_track-0.ogg", tmp_path / "c_track-1.ogg"]
    out = tmp_path / "c_merged_audio.ogg"

    result = FFmpegAudioMerger(runner=fake_runner).merge(tracks, out)

    assert result == out
    args = fake_runner.calls[0].args
    assert [args[i + 1] for i, a in enumerate(args) if a == "-i"] == [str(t) for t in tracks]
    assert args[args.index("-filter_complex") + 1] == "amerge"
    assert args[args.index("-ac") + 1] == "2"
    assert args[args.index("-c:a") + 1] == "libvorbis"


def test_merge_requires_inputs(tmp_path, fake_runner):
    with pytest.raises(ValueError):
        FFmpegAudioMerger(runner=fake_runner).merge([], tmp_path / "x.ogg")
    assert fake_runner.calls == []


def test_merge_failure_removes_output(tmp_path):
    out = tmp_path / "c_merged_audio.ogg"
    merger = FFmpegAudioMerger(runner=FakeRunner(fail_when=lambda call: True))

    with pytest.raises(MergeFailure) as exc:
        merger.merge([tmp_path / "a.ogg", tmp_path / "b.ogg"], out)

    assert exc.value.output_file == out
    assert not out.exists()
