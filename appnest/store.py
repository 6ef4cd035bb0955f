"""In-memory owner of the job application collection."""

import logging
import threading
from datetime import date
from typing import Callable, Iterator, Optional
from uuid import UUID

from .errors import DuplicateIdError, IdMismatchError, InvalidDateError, NotFoundError
from .models import JobApplication
from .policy import normalize_season

logger = logging.getLogger(__name__)

Snapshot = tuple[JobApplication, ...]
Observer = Callable[[Snapshot], None]


class ApplicationStore:
    """Ordered collection of job applications with change notifications.

    Writes are serialized by a lock so an update's lookup and swap happen
    atomically. Reads return the current tuple, which is never mutated in
    place. Observers are called synchronously on the writing thread while the
    lock is still held, so notifications arrive in write order.
    """

    def __init__(self, clock: Callable[[], date] = date.today):
        self._clock = clock
        self._applications: Snapshot = ()
        self._index: dict[UUID, int] = {}
        self._observers: list[Observer] = []
        self._lock = threading.RLock()

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register ``observer``; returns a function that unregisters it."""
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def all(self) -> Snapshot:
        return self._applications

    def find(self, application_id: UUID) -> Optional[JobApplication]:
        applications = self._applications
        position = self._index.get(application_id)
        if position is None or position >= len(applications):
            return None
        return applications[position]

    def add(self, application: JobApplication) -> JobApplication:
        """Append ``application`` to the end of the collection."""
        with self._lock:
            if application.id in self._index:
                logger.warning(f"Rejected add of duplicate application {application.id}")
                raise DuplicateIdError(application.id)
            self._check_date(application)

            record = self._normalize(application)
            self._index[record.id] = len(self._applications)
            self._applications = self._applications + (record,)

            logger.info(f"Added application: {record.company.name} - {record.position}")
            self._notify(self._applications)
        return record

    def update(self, application_id: UUID, candidate: JobApplication) -> JobApplication:
        """Replace the record ``application_id`` with ``candidate``.

        The season is cleared when the candidate's type does not allow one,
        whatever the caller passed. Ordering is unchanged. Returns the record
        as stored.
        """
        with self._lock:
            position = self._index.get(application_id)
            if position is None:
                logger.warning(f"Rejected update of unknown application {application_id}")
                raise NotFoundError(application_id)
            if candidate.id != application_id:
                logger.warning(
                    f"Rejected update of {application_id} with candidate {candidate.id}"
                )
                raise IdMismatchError(application_id, candidate.id)
            self._check_date(candidate)

            record = self._normalize(candidate)
            applications = list(self._applications)
            applications[position] = record
            self._applications = tuple(applications)

            logger.info(f"Updated application {application_id}: {record.company.name} - {record.position}")
            self._notify(self._applications)
        return record

    def __len__(self) -> int:
        return len(self._applications)

    def __iter__(self) -> Iterator[JobApplication]:
        return iter(self._applications)

    def __contains__(self, application_id: object) -> bool:
        return application_id in self._index

    def _check_date(self, application: JobApplication) -> None:
        today = self._clock()
        if application.date_applied > today:
            logger.warning(
                f"Rejected future date {application.date_applied} for application {application.id}"
            )
            raise InvalidDateError(application.date_applied, today)

    def _normalize(self, application: JobApplication) -> JobApplication:
        season = normalize_season(application.job_type, application.season)
        if season != application.season:
            logger.debug(
                f"Cleared season {application.season.label} for {application.job_type.label} "
                f"application {application.id}"
            )
            return application.model_copy(update={"season": season})
        return application

    def _notify(self, snapshot: Snapshot) -> None:
        observers = list(self._observers)
        for observer in observers:
            try:
                observer(snapshot)
            except Exception as e:
                logger.error(f"Observer {observer!r} failed: {e}")
