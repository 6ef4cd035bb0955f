"""Rules for fields whose meaning depends on other fields."""

from typing import Optional

from .models import ApplicationSeason, ApplicationType

SEASON_ELIGIBLE_TYPES = frozenset(
    {
        ApplicationType.PART_TIME,
        ApplicationType.INTERNSHIP,
        ApplicationType.TEMPORARY,
        ApplicationType.CO_OP,
    }
)


def is_season_eligible(job_type: Optional[ApplicationType]) -> bool:
    """Whether a season is meaningful for ``job_type``."""
    return job_type in SEASON_ELIGIBLE_TYPES


def normalize_season(
    job_type: Optional[ApplicationType], season: Optional[ApplicationSeason]
) -> Optional[ApplicationSeason]:
    """Drop ``season`` unless ``job_type`` allows one."""
    if not is_season_eligible(job_type):
        return None
    return season
