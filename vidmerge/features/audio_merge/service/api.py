from pathlib import Path
from typing import List
from ..data.ffmpeg_adapter import FFmpegAudioMerger

def merge_audio(audio_paths: List[str], output_path: str) -> Path:
    """
    Standalone API: amerge the given audio files into one file.
    """
    adapter = FFmpegAudioMerger()
    return adapter.merge([Path(p) for p in audio_paths], Path(output_path))
