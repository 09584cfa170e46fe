from pathlib import Path
from ..data.ffmpeg_adapter import FFmpegMuxer

def mux_video_and_audio(video_path: str, audio_path: str, output_path: str) -> None:
    """
    Standalone API: Combine a video-only file and an audio-only file.
    """
    FFmpegMuxer().combine(Path(video_path), Path(audio_path), Path(output_path))
