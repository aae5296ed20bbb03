"""Testes das inquiries e do texto de notificação."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from app.domain.clock import to_iso_timestamp
from app.domain.inquiry import InquirySubmission, StoredInquiry
from utils.errors import ValidationError


def test_submission_is_trimmed_and_stamped() -> None:
    submission = InquirySubmission.model_validate(
        {"name": " Ali ", "email": " ali@x.com ", "phone": " ", "message": " Hi "}
    )

    inquiry = submission.to_inquiry(created_at="2026-10-18T10:00:00.000Z")

    assert inquiry.to_firestore_dict() == {
        "name": "Ali",
        "email": "ali@x.com",
        "phone": "",
        "message": "Hi",
        "createdAt": "2026-10-18T10:00:00.000Z",
    }


@pytest.mark.parametrize("missing", ["name", "email", "message"])
def test_required_fields(missing: str) -> None:
    payload = {"name": "Ali", "email": "ali@x.com", "message": "Hi"}
    payload[missing] = "   "

    with pytest.raises(ValidationError, match="name, email, message are required"):
        InquirySubmission.model_validate(payload).to_inquiry()


def test_phone_is_optional() -> None:
    inquiry = InquirySubmission.model_validate(
        {"name": "Ali", "email": "ali@x.com", "message": "Hi"}
    ).to_inquiry()

    assert inquiry.phone == ""


def test_notification_text_uses_dash_for_missing_phone() -> None:
    inquiry = InquirySubmission.model_validate(
        {"name": "Ali", "email": "ali@x.com", "message": "Hi"}
    ).to_inquiry(created_at="2026-10-18T10:00:00.000Z")

    text = inquiry.notification_text()

    assert text.splitlines() == [
        "طلب جديد من الموقع:",
        "الاسم: Ali",
        "الإيميل: ali@x.com",
        "الموبايل: -",
        "الرسالة:",
        "Hi",
        "الوقت: 2026-10-18T10:00:00.000Z",
    ]


def test_stored_inquiry_api_dict_carries_id() -> None:
    stored = StoredInquiry.from_firestore_dict(
        "abc123",
        {"name": "Ali", "email": "a@x.com", "message": "Hi", "createdAt": "2026-10-18T10:00:00.000Z"},
    )

    assert stored.to_api_dict() == {
        "id": "abc123",
        "name": "Ali",
        "email": "a@x.com",
        "phone": "",
        "message": "Hi",
        "createdAt": "2026-10-18T10:00:00.000Z",
    }


def test_iso_timestamp_format() -> None:
    moment = datetime(2026, 10, 18, 9, 5, 3, 120_999, tzinfo=UTC)

    assert to_iso_timestamp(moment) == "2026-10-18T09:05:03.120Z"


@pytest.mark.parametrize("falsy", [0, 0.0, False, None])
def test_falsy_values_count_as_empty(falsy: object) -> None:
    payload = {"name": falsy, "email": "ali@x.com", "message": "Hi"}

    with pytest.raises(ValidationError, match="name, email, message are required"):
        InquirySubmission.model_validate(payload).to_inquiry()


def test_non_zero_numbers_become_text() -> None:
    submission = InquirySubmission.model_validate(
        {"name": "Ali", "email": "ali@x.com", "phone": 5551234, "message": "Hi"}
    )

    assert submission.phone == "5551234"
