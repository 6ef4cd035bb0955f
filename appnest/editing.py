"""Edit sessions: drafts, field dependencies and pending attachments."""

import logging
from datetime import date
from enum import Enum
from typing import Callable, Optional
from uuid import UUID

from .attachments import AttachmentReference, FileAccess
from .errors import InvalidDateError, NotFoundError
from .models import (
    ApplicationDraft,
    ApplicationSeason,
    ApplicationType,
    JobApplication,
)
from .policy import is_season_eligible
from .store import ApplicationStore

logger = logging.getLogger(__name__)


def _label(job_type: Optional[ApplicationType]) -> str:
    return job_type.label if job_type is not None else "(none)"


class AttachmentState(Enum):
    UNSET = "unset"
    PENDING = "pending"
    COMMITTED = "committed"


class EditSession:
    """Transient editing state for one application.

    Nothing reaches the store until ``save``; ``discard`` drops every pending
    change, including a newly picked resume. Without an ``application_id`` the
    session creates a new application on save.
    """

    def __init__(
        self,
        store: ApplicationStore,
        application_id: Optional[UUID] = None,
        clock: Callable[[], date] = date.today,
    ):
        self._store = store
        self._clock = clock
        self._baseline: Optional[JobApplication] = None
        if application_id is not None:
            self._baseline = store.find(application_id)
            if self._baseline is None:
                raise NotFoundError(application_id)
        self.draft = self._fresh_draft()

    @property
    def is_new(self) -> bool:
        return self._baseline is None

    @property
    def is_dirty(self) -> bool:
        return self.draft.model_dump() != self._fresh_draft(keep_id=True).model_dump()

    @property
    def season_enabled(self) -> bool:
        """Whether the season selector applies to the current type."""
        return is_season_eligible(self.draft.job_type)

    @property
    def attachment_state(self) -> AttachmentState:
        resume = self.draft.resume
        if resume is None:
            return AttachmentState.UNSET
        if self._baseline is not None and resume == self._baseline.resume:
            return AttachmentState.COMMITTED
        return AttachmentState.PENDING

    def set_job_type(self, job_type: Optional[ApplicationType]) -> None:
        self.draft.job_type = job_type
        if self.draft.season is not None and not is_season_eligible(job_type):
            logger.debug(f"Discarding season {self.draft.season.label} for {self.draft.id}")
            self.draft.season = None

    def set_season(self, season: Optional[ApplicationSeason]) -> None:
        if season is not None and not self.season_enabled:
            raise ValueError(f"Season does not apply to job type {_label(self.draft.job_type)}")
        self.draft.season = season

    def set_date_applied(self, date_applied: date) -> None:
        today = self._clock()
        if date_applied > today:
            raise InvalidDateError(date_applied, today)
        self.draft.date_applied = date_applied

    def attach_resume(self, reference: AttachmentReference) -> None:
        self.draft.resume = reference
        logger.debug(f"Resume {reference.display_name!r} pending for {self.draft.id}")

    def pick_resume(self, file_access: FileAccess) -> Optional[AttachmentReference]:
        """Ask the host for a file; a cancelled pick leaves the draft alone."""
        reference = file_access.pick_file()
        if reference is None:
            logger.debug("Resume pick cancelled")
            return None
        self.attach_resume(reference)
        return reference

    def clear_resume(self) -> None:
        self.draft.resume = None

    def save(self) -> JobApplication:
        """Commit the draft to the store and return the stored record."""
        candidate = self.draft.commit()
        if self._baseline is None:
            record = self._store.add(candidate)
        else:
            record = self._store.update(self._baseline.id, candidate)
        self._baseline = record
        self.draft = self._fresh_draft()
        return record

    def discard(self) -> None:
        """Drop unsaved changes."""
        if self.is_dirty:
            logger.debug(f"Discarding unsaved changes to {self.draft.id}")
        self.draft = self._fresh_draft(keep_id=True)

    def _fresh_draft(self, keep_id: bool = False) -> ApplicationDraft:
        if self._baseline is not None:
            return ApplicationDraft.from_application(self._baseline)
        if keep_id:
            return ApplicationDraft(id=self.draft.id)
        return ApplicationDraft()
