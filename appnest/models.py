"""Data models for job application tracking."""

from datetime import date
from enum import Enum
from typing import ClassVar, Optional, Union
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .attachments import AttachmentReference
from .errors import IncompleteDraftError

DEFAULT_LOGO_KEY = "building.2"


class LabeledEnum(str, Enum):
    """Enum whose values double as the stored and displayed labels."""

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str):
        """Look up a member by its exact, case-sensitive label."""
        try:
            return cls(label)
        except ValueError:
            raise ValueError(f"{label!r} is not a valid {cls.__name__} label") from None


class ApplicationType(LabeledEnum):
    FULL_TIME = "Full Time"
    PART_TIME = "Part Time"
    CONTRACT = "Contract"
    INTERNSHIP = "Internship"
    CO_OP = "Co-op"
    TEMPORARY = "Temporary"


class ApplicationStatus(LabeledEnum):
    TO_APPLY = "To Apply"
    APPLIED = "Applied"
    INTERVIEW = "Interview"
    OFFER = "Offer"
    REJECTED = "Rejected"


class ApplicationSeason(LabeledEnum):
    WINTER = "Winter"
    SPRING = "Spring"
    SUMMER = "Summer"
    FALL = "Fall"


def _require_text(value: str, field: str) -> str:
    if not value.strip():
        raise ValueError(f"{field} cannot be blank")
    return value


class Company(BaseModel):
    """A company as entered by the user.

    Identity is the generated ``id``: two companies sharing a name are still
    different companies.
    """

    model_config = ConfigDict(
        frozen=True, ser_json_bytes="base64", val_json_bytes="base64"
    )

    id: UUID = Field(default_factory=uuid4)
    name: str
    logo_key: str = DEFAULT_LOGO_KEY
    logo_image: Optional[bytes] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        return _require_text(value, "Company name")

    @property
    def display_logo(self) -> Union[bytes, str]:
        """Custom image if one was set, otherwise the icon key."""
        if self.logo_image is not None:
            return self.logo_image
        return self.logo_key

    def renamed(self, name: str) -> "Company":
        return Company.model_validate({**dict(self), "name": name})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Company):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class JobApplication(BaseModel):
    """A committed job application owned by the store."""

    model_config = ConfigDict(
        frozen=True, ser_json_bytes="base64", val_json_bytes="base64"
    )

    id: UUID = Field(default_factory=uuid4)
    company: Company
    position: str
    job_type: ApplicationType
    status: ApplicationStatus
    date_applied: date
    season: Optional[ApplicationSeason] = None
    notes: Optional[str] = None
    resume: Optional[AttachmentReference] = None

    @field_validator("position")
    @classmethod
    def _position_not_blank(cls, value: str) -> str:
        return _require_text(value, "Position")

    def to_json(self) -> str:
        """Serialize with enum labels, ISO dates and base64 bytes."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> "JobApplication":
        return cls.model_validate_json(data)


class ApplicationDraft(BaseModel):
    """Editable, incomplete form of a job application."""

    model_config = ConfigDict(validate_assignment=True)

    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = (
        "company",
        "position",
        "job_type",
        "status",
        "date_applied",
    )

    id: UUID = Field(default_factory=uuid4)
    company: Optional[Company] = None
    position: str = ""
    job_type: Optional[ApplicationType] = None
    status: Optional[ApplicationStatus] = None
    season: Optional[ApplicationSeason] = None
    date_applied: Optional[date] = None
    notes: Optional[str] = None
    resume: Optional[AttachmentReference] = None

    @classmethod
    def from_application(cls, application: JobApplication) -> "ApplicationDraft":
        return cls(**dict(application))

    def missing_fields(self) -> list[str]:
        missing = []
        for name in self.REQUIRED_FIELDS:
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)
        return missing

    def commit(self) -> JobApplication:
        """Build the committed record, or raise IncompleteDraftError."""
        missing = self.missing_fields()
        if missing:
            raise IncompleteDraftError(missing)
        return JobApplication(**dict(self))
