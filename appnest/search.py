"""Search and summaries over the application collection."""

from typing import Sequence

from .models import ApplicationStatus, JobApplication


def _search_fields(application: JobApplication) -> tuple[str, str, str]:
    job_type = application.job_type.label if application.job_type is not None else ""
    return (
        application.position.lower(),
        application.company.name.lower(),
        job_type.lower(),
    )


def filter_applications(
    applications: Sequence[JobApplication], query: str
) -> Sequence[JobApplication]:
    """Keep applications whose position, company or type contains ``query``.

    Matching is a case-insensitive substring test and preserves input order.
    A blank query returns ``applications`` itself; otherwise the result is a
    tuple when the input is one, a list otherwise.
    """
    needle = query.strip().lower()
    if not needle:
        return applications

    matches = [
        application
        for application in applications
        if any(needle in field for field in _search_fields(application))
    ]
    if isinstance(applications, tuple):
        return tuple(matches)
    return matches


def count_by_status(applications: Sequence[JobApplication]) -> dict[ApplicationStatus, int]:
    """Number of applications per status, every status included."""
    counts = {status: 0 for status in ApplicationStatus}
    for application in applications:
        counts[application.status] += 1
    return counts
