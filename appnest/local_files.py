"""File access backed by the local filesystem."""

import json
import logging
from pathlib import Path
from typing import BinaryIO, Callable, Optional

from .attachments import AttachmentReference, FileAccess
from .errors import AttachmentResolutionError

logger = logging.getLogger(__name__)


class LocalFileAccess(FileAccess):
    """Bookmarks are JSON documents holding the file's absolute path.

    ``chooser`` stands in for the host's file picker and returns the chosen
    path, or None when the user cancels.
    """

    def __init__(self, chooser: Callable[[], Optional[Path]]):
        self._chooser = chooser

    def pick_file(self) -> Optional[AttachmentReference]:
        path = self._chooser()
        if path is None:
            return None

        path = Path(path).expanduser().resolve()
        if not path.is_file():
            raise FileNotFoundError(f"Picked file does not exist: {path}")

        bookmark = json.dumps({"path": str(path)}).encode("utf-8")
        logger.info(f"Picked attachment {path.name}")
        return AttachmentReference(display_name=path.name, bookmark=bookmark)

    def resolve(self, reference: AttachmentReference) -> BinaryIO:
        try:
            path = Path(json.loads(reference.bookmark)["path"])
        except (ValueError, KeyError, TypeError) as e:
            raise AttachmentResolutionError(reference.display_name, f"malformed bookmark ({e})") from e

        try:
            return open(path, "rb")
        except OSError as e:
            logger.warning(f"Failed to resolve attachment {reference.display_name!r}: {e}")
            raise AttachmentResolutionError(reference.display_name, str(e)) from e
