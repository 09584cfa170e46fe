import logging
from pathlib import Path

from ..domain.interfaces import IFileSystem

logger = logging.getLogger(__name__)

class LocalFileSystem(IFileSystem):
    def remove_if_exists(self, path: Path) -> bool:
        path = Path(path)
        if not path.exists():
            return False

        logger.info(f"Deleting temp file: {path}")
        # missing_ok covers a file removed between the check and the unlink
        path.unlink(missing_ok=True)
        return True
