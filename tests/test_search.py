"""Tests for search and summaries."""
from __future__ import annotations

from datetime import date

import pytest

from appnest.models import ApplicationStatus, ApplicationType, Company, JobApplication
from appnest.search import count_by_status, filter_applications


def make_application(
    position: str,
    company: str,
    job_type: ApplicationType = ApplicationType.INTERNSHIP,
    status: ApplicationStatus = ApplicationStatus.APPLIED,
) -> JobApplication:
    return JobApplication(
        company=Company(name=company),
        position=position,
        job_type=job_type,
        status=status,
        date_applied=date(2025, 10, 1),
    )


@pytest.fixture
def applications() -> list[JobApplication]:
    return [
        make_application("iOS Engineer Intern", "Uber"),
        make_application("SDE Intern", "Amazon"),
        make_application("Backend Engineer", "Meta", ApplicationType.FULL_TIME),
        make_application("Data Analyst", "Shopify", ApplicationType.CO_OP),
    ]


def test_filter_by_company(applications: list[JobApplication]) -> None:
    assert filter_applications(applications[:2], "uber") == [applications[0]]


def test_blank_query_returns_input(applications: list[JobApplication]) -> None:
    assert filter_applications(applications, "") is applications
    assert filter_applications(applications, "   ") is applications


def test_filter_is_case_insensitive(applications: list[JobApplication]) -> None:
    assert filter_applications(applications, "META") == filter_applications(applications, "meta")
    assert filter_applications(applications, "META") == [applications[2]]


def test_filter_matches_type_label_substring(applications: list[JobApplication]) -> None:
    assert filter_applications(applications, "full time") == [applications[2]]
    assert filter_applications(applications, "co-op") == [applications[3]]


def test_filter_preserves_order(applications: list[JobApplication]) -> None:
    result = filter_applications(applications, " intern ")
    assert result == [applications[0], applications[1]]


def test_filter_with_no_matches(applications: list[JobApplication]) -> None:
    original = list(applications)
    assert filter_applications(applications, "zzz") == []
    assert applications == original


def test_count_by_status(applications: list[JobApplication]) -> None:
    applications.append(make_application("PM", "Stripe", status=ApplicationStatus.OFFER))

    counts = count_by_status(applications)
    assert list(counts) == list(ApplicationStatus)
    assert counts[ApplicationStatus.APPLIED] == 4
    assert counts[ApplicationStatus.OFFER] == 1
    assert counts[ApplicationStatus.REJECTED] == 0


def test_filter_keeps_tuple_snapshots_as_tuples(applications: list[JobApplication]) -> None:
    snapshot = tuple(applications)

    assert filter_applications(snapshot, "uber") == (applications[0],)
    assert filter_applications(snapshot, "zzz") == ()
    assert filter_applications(snapshot, " ") is snapshot
