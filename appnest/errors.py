"""Error types raised by the application core."""

from datetime import date
from typing import Iterable
from uuid import UUID


class AppNestError(Exception):
    """Base class for recoverable core errors."""


class StoreError(AppNestError):
    """Raised when the store rejects a write."""


class NotFoundError(StoreError):
    def __init__(self, application_id: UUID):
        self.application_id = application_id
        super().__init__(f"No application with id {application_id}")


class DuplicateIdError(StoreError):
    def __init__(self, application_id: UUID):
        self.application_id = application_id
        super().__init__(f"An application with id {application_id} already exists")


class IdMismatchError(StoreError):
    def __init__(self, application_id: UUID, candidate_id: UUID):
        self.application_id = application_id
        self.candidate_id = candidate_id
        super().__init__(
            f"Candidate id {candidate_id} does not match target id {application_id}"
        )


class InvalidDateError(AppNestError):
    def __init__(self, date_applied: date, today: date):
        self.date_applied = date_applied
        self.today = today
        super().__init__(
            f"Date applied {date_applied.isoformat()} is after today ({today.isoformat()})"
        )


class IncompleteDraftError(AppNestError):
    """Raised when a draft is committed with required fields unset."""

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__(f"Draft is missing required fields: {', '.join(self.missing)}")


class AttachmentResolutionError(AppNestError):
    """Raised when a bookmark can no longer be turned into a readable file."""

    def __init__(self, display_name: str, reason: str):
        self.display_name = display_name
        self.reason = reason
        super().__init__(f"Could not open attachment {display_name!r}: {reason}")
