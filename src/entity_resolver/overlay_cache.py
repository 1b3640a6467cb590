"""
On-disk cache for the last applied overlay document.

Lets a restarted service replay the most recent overlay without waiting
for the next remote sync.
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


class OverlayCache:
    """
    JSON file holding one overlay document.

    Read and write failures are logged and swallowed: a missing cache only
    means the service starts from the bundled catalog.
    """

    def __init__(self, path: str):
        self.path = Path(path)

    def load(self) -> Optional[Any]:
        """
        :return: Cached overlay document, or None if absent or unreadable
        """
        if not self.path.exists():
            return None
        try:
            with open(self.path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Overlay cache load failed ({self.path}): {e}")
            return None

    def save(self, document: Any) -> bool:
        """
        Write the document atomically (temp file + rename).

        :return: True on success
        """
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f)
            os.replace(tmp_path, self.path)
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.warning(f"Overlay cache persist failed ({self.path}): {e}")
            if tmp_path is not None:
                self._discard(tmp_path)
            return False

    @staticmethod
    def _discard(tmp_path: str) -> None:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Could not remove temp file {tmp_path}: {e}")

    def clear(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
