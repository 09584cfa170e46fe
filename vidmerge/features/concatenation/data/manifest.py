import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List

from vidmerge.core.errors import TempFileWriteFailure

logger = logging.getLogger(__name__)

@contextmanager
def concat_manifest(lines: List[str]) -> Iterator[Path]:
    """
    Writes a concat demuxer list to a temp file and yields its path.
    The file is removed on every exit path, whatever happens to the caller.
    """
    try:
        fd, name = tempfile.mkstemp(prefix="vidmerge_concat_", suffix=".txt")
    except OSError as e:
        raise TempFileWriteFailure(f"Could not create concat manifest: {e}") from e

    manifest = Path(name)
    try:
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                for line in lines:
                    f.write(line + "\n")
                f.flush()
        except OSError as e:
            raise TempFileWriteFailure(f"Could not write concat manifest: {e}", paths=[manifest]) from e

        logger.debug(f"Concat manifest {manifest}: {len(lines)} entries")
        yield manifest
    finally:
        manifest.unlink(missing_ok=True)
