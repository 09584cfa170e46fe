import pytest
from pathlib import Path

from vidmerge.core.common.enums import ArtifactStage
from vidmerge.features.temp_artifacts.service.tracker import TempArtifactTracker


def test_purge_deletes_recorded_files_and_skips_missing(tmp_path):
    present = tmp_path / "a_track-0.ogg"
    present.write_bytes(b"x")
    missing = tmp_path / "never_written.ogg"

    tracker = TempArtifactTracker()
    tracker.record(present, ArtifactStage.TRACK_EXTRACTION)
    tracker.record(missing, ArtifactStage.PER_FILE_MERGE)

    deleted = tracker.purge()

    assert deleted == [present]
    assert not present.exists()
    assert len(tracker) == 0


def test_purge_is_idempotent(tmp_path):
    p = tmp_path / "out_final_audio.ogg"
    p.write_bytes(b"x")

    tracker = TempArtifactTracker()
    tracker.record(p, ArtifactStage.CONCATENATION)

    assert tracker.purge() == [p]
    assert tracker.purge() == []


def test_recording_same_path_twice_keeps_one_entry(tmp_path):
    p = tmp_path / "clip_merged_audio.ogg"
    tracker = TempArtifactTracker()
    tracker.record(p, ArtifactStage.PER_FILE_MERGE)
    tracker.record_all([p], ArtifactStage.PER_FILE_MERGE)

    assert tracker.paths == [p]
    assert tracker.artifacts[0].stage == ArtifactStage.PER_FILE_MERGE


def test_purge_keeps_going_when_one_delete_fails(tmp_path):
    good = tmp_path / "good.ogg"
    good.write_bytes(b"x")
    stuck = tmp_path / "stuck.ogg"

    class FlakyFs:
        def remove_if_exists(self, path: Path) -> bool:
            if path == stuck:
                raise PermissionError("locked")
            path.unlink()
            return True

    tracker = TempArtifactTracker(fs=FlakyFs())
    tracker.record(stuck, ArtifactStage.TRACK_EXTRACTION)
    tracker.record(good, ArtifactStage.TRACK_EXTRACTION)

    assert tracker.purge() == [good]
    assert not good.exists()
