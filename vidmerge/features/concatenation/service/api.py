from pathlib import Path
from typing import List

from vidmerge.core.common.enums import StreamFilterMode
from ..data.ffmpeg_adapter import FFmpegConcatenator

def concatenate_files(paths: List[str], output_path: str, mode: StreamFilterMode) -> Path:
    """
    Standalone API: Joins same-format files in the given order.
    """
    adapter = FFmpegConcatenator()
    return adapter.concatenate([Path(p) for p in paths], Path(output_path), mode)
