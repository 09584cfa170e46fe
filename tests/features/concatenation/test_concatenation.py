import pytest
from pathlib import Path

from vidmerge.core.common.enums import StreamFilterMode
from vidmerge.core.errors import ConcatenationFailure, TempFileWriteFailure
from vidmerge.features.concatenation.data import manifest as manifest_module
from vidmerge.features.concatenation.data.ffmpeg_adapter import FFmpegConcatenator
from vidmerge.features.concatenation.data.manifest import concat_manifest
from vidmerge.features.concatenation.domain.models import (
    concatenated_video_path,
    final_audio_path,
    quote_manifest_path,
)
from tests.conftest import FakeRunner


def test_derived_output_names(tmp_path):
    out = tmp_path / "out.mkv"
    assert concatenated_video_path(out) == tmp_path / "out_concatenated_video.mkv"
    assert final_audio_path(out) == tmp_path / "out_final_audio.ogg"


def test_quote_escapes_single_quotes():
    assert quote_manifest_path(Path("/v/it's.mp4")) == "'/v/it'\\''s.mp4'"


def test_video_concat_writes_ordered_manifest_and_drops_audio(clips, tmp_path, fake_runner):
    out = tmp_path / "out_concatenated_video.mkv"

    result = FFmpegConcatenator(runner=fake_runner).concatenate(clips, out, StreamFilterMode.VIDEO_ONLY)

    assert result == out
    call = fake_runner.calls[0]
    assert call.manifest_lines == [f"file '{c.resolve()}'" for c in clips]
    assert call.args[:4] == ["-f", "concat", "-safe", "0"]
    assert call.args[call.args.index("-c") + 1] == "copy"
    assert "-an" in call.args
    # Manifest is gone once ffmpeg returns
    assert not call.manifest_path.exists()


def test_audio_concat_keeps_audio(tmp_path, fake_runner):
    merged = [tmp_path / "clip1_merged_audio.ogg", tmp_path / "clip2_merged_audio.ogg"]
    out = tmp_path / "out_final_audio.ogg"

    FFmpegConcatenator(runner=fake_runner).concatenate(merged, out, StreamFilterMode.AUDIO_ONLY)

    call = fake_runner.calls[0]
    assert "-an" not in call.args
    assert call.manifest_lines == [f"file '{m.resolve()}'" for m in merged]


@pytest.mark.parametrize("mode", [StreamFilterMode.VIDEO_ONLY, StreamFilterMode.AUDIO_ONLY])
def test_failure_deletes_output_and_manifest_in_both_modes(clips, tmp_path, mode):
    runner = FakeRunner(fail_when=lambda call: True)
    out = tmp_path / "joined.out"

    with pytest.raises(ConcatenationFailure) as exc:
        FFmpegConcatenator(runner=runner).concatenate(clips, out, mode)

    assert exc.value.mode == mode
    assert not out.exists()
    assert not runner.calls[0].manifest_path.exists()


def test_manifest_removed_when_body_raises():
    with pytest.raises(RuntimeError):
        with concat_manifest(["file '/a.mp4'"]) as path:
            assert path.read_text(encoding="utf-8") == "file '/a.mp4'\n"
            raise RuntimeError("ffmpeg exploded")
    assert not path.exists()


def test_manifest_create_failure_is_reported(monkeypatch):
    def broken_mkstemp(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(manifest_module.tempfile, "mkstemp", broken_mkstemp)

    with pytest.raises(TempFileWriteFailure):
        with concat_manifest(["file '/a.mp4'"]):
            pass


def test_standalone_apis_chain_merge_concat_and_mux(clips, tmp_path, fake_runner, monkeypatch):
    from vidmerge.core.ffmpeg.runner import FFmpegRunner
    from vidmerge.features.audio_merge.service.api import merge_audio
    from vidmerge.features.concatenation.service.api import concatenate_files
    from vidmerge.features.muxing.service.api import mux_video_and_audio

    monkeypatch.setattr(FFmpegRunner, "run", lambda self, args: fake_runner.run(args))

    merged = merge_audio([str(tmp_path / "a.ogg"), str(tmp_path / "b.ogg")], str(tmp_path / "m.ogg"))
    video = concatenate_files([str(c) for c in clips], str(tmp_path / "v.mkv"), StreamFilterMode.VIDEO_ONLY)
    mux_video_and_audio(str(video), str(merged), str(tmp_path / "out.mkv"))

    assert [c.kind for c in fake_runner.calls] == ["merge", "concat", "mux"]
    assert (tmp_path / "out.mkv").exists()
