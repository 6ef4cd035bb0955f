"""Resume attachments referenced by durable bookmarks."""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, BinaryIO, Optional

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .models import JobApplication

logger = logging.getLogger(__name__)


class AttachmentReference(BaseModel):
    """Pointer to a user-picked file.

    The bookmark is produced by the host's file-access subsystem and is opaque
    to the core: it is stored and handed back, never parsed or resolved here.
    """

    model_config = ConfigDict(
        frozen=True, ser_json_bytes="base64", val_json_bytes="base64"
    )

    display_name: str = Field(min_length=1)
    bookmark: bytes = Field(min_length=1)

    def __repr__(self) -> str:
        return f"AttachmentReference(display_name={self.display_name!r}, bookmark=<{len(self.bookmark)} bytes>)"


class FileAccess(ABC):
    """Capability implemented by the host to pick and reopen files."""

    @abstractmethod
    def pick_file(self) -> Optional[AttachmentReference]:
        """Let the user choose a file. Returns None if the user cancels."""

    @abstractmethod
    def resolve(self, reference: AttachmentReference) -> BinaryIO:
        """Open the file behind ``reference`` for reading.

        Raises AttachmentResolutionError if the file was moved out of reach,
        deleted, or access was revoked.
        """


def open_resume(application: "JobApplication", file_access: FileAccess) -> BinaryIO:
    """Resolve the resume attached to ``application``."""
    if application.resume is None:
        raise ValueError(f"Application {application.id} has no resume attached")

    logger.debug(f"Resolving resume {application.resume.display_name!r} for {application.id}")
    return file_access.resolve(application.resume)
