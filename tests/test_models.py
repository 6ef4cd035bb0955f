"""Tests for the domain model."""
from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from appnest.attachments import AttachmentReference
from appnest.errors import IncompleteDraftError
from appnest.models import (
    ApplicationDraft,
    ApplicationSeason,
    ApplicationStatus,
    ApplicationType,
    Company,
    JobApplication,
)


def make_application(**overrides) -> JobApplication:
    fields = dict(
        company=Company(name="Meta", logo_key="meta"),
        position="SWE Intern",
        job_type=ApplicationType.INTERNSHIP,
        status=ApplicationStatus.APPLIED,
        date_applied=date(2025, 9, 8),
    )
    fields.update(overrides)
    return JobApplication(**fields)


@pytest.mark.parametrize("enum_cls", [ApplicationType, ApplicationStatus, ApplicationSeason])
def test_labels_round_trip(enum_cls) -> None:
    for member in enum_cls:
        assert enum_cls.from_label(member.label) is member


def test_labels_are_case_sensitive() -> None:
    assert ApplicationType.from_label("Co-op") is ApplicationType.CO_OP
    assert ApplicationStatus.from_label("To Apply") is ApplicationStatus.TO_APPLY
    with pytest.raises(ValueError):
        ApplicationType.from_label("internship")
    with pytest.raises(ValueError):
        ApplicationSeason.from_label("Autumn")


def test_company_identity_is_by_id() -> None:
    first = Company(name="Meta")
    second = Company(name="Meta")

    assert first != second
    assert len({first, second}) == 2
    assert first.renamed("Meta Platforms") == first
    assert first.renamed("Meta Platforms").id == first.id


def test_company_rejects_blank_name() -> None:
    with pytest.raises(ValidationError):
        Company(name="   ")
    with pytest.raises(ValidationError):
        Company(name="Meta").renamed("")


def test_company_logo_image_takes_precedence() -> None:
    assert Company(name="Uber", logo_key="uber").display_logo == "uber"
    assert Company(name="Uber", logo_key="uber", logo_image=b"\x89PNG").display_logo == b"\x89PNG"


def test_company_is_immutable() -> None:
    company = Company(name="Meta")
    with pytest.raises(ValidationError):
        company.id = Company(name="Other").id


def test_committed_application_requires_core_fields() -> None:
    with pytest.raises(ValidationError):
        JobApplication(company=Company(name="Meta"), position="SWE")
    with pytest.raises(ValidationError):
        make_application(position=" ")


def test_application_ids_are_unique() -> None:
    assert make_application().id != make_application().id


def test_json_serialization_uses_labels() -> None:
    resume = AttachmentReference(display_name="resume.pdf", bookmark=b"\x00\xffbookmark")
    application = make_application(
        season=ApplicationSeason.SUMMER,
        notes="Referred by a friend",
        resume=resume,
        company=Company(name="Meta", logo_image=b"\x89PNG\r\n"),
    )

    data = application.to_json()
    assert '"Internship"' in data
    assert '"Summer"' in data
    assert '"2025-09-08"' in data

    restored = JobApplication.from_json(data)
    assert restored == application
    assert restored.company.name == application.company.name
    assert restored.company.logo_key == application.company.logo_key
    assert restored.resume.bookmark == b"\x00\xffbookmark"
    assert restored.company.logo_image == b"\x89PNG\r\n"


def test_draft_reports_missing_fields() -> None:
    draft = ApplicationDraft(company=Company(name="Meta"), position="  ")

    assert draft.missing_fields() == ["position", "job_type", "status", "date_applied"]
    with pytest.raises(IncompleteDraftError) as excinfo:
        draft.commit()
    assert "job_type" in excinfo.value.missing


def test_draft_commit_keeps_id() -> None:
    application = make_application(notes="Follow up next week")
    draft = ApplicationDraft.from_application(application)
    draft.position = "SWE Intern - 2026"

    committed = draft.commit()
    assert committed.id == application.id
    assert committed.position == "SWE Intern - 2026"
    assert committed.notes == "Follow up next week"
    assert application.position == "SWE Intern"
