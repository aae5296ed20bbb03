"""Testes do SiteContentService."""

from __future__ import annotations

import pytest

from app.domain.inquiry import InquirySubmission
from app.domain.profile import ProfileUpdate, default_profile
from app.infra.stores import MemorySiteStore
from app.services import SiteContentService, clamp_inquiry_limit
from utils.errors import ValidationError


class TestClampInquiryLimit:
    @pytest.mark.parametrize("raw", [None, "", "0", 0, "abc", True, "  "])
    def test_defaults_to_25(self, raw: object) -> None:
        assert clamp_inquiry_limit(raw) == 25

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("1", 1), ("10", 10), (100, 100), ("101", 100), ("5000", 100), ("-3", 1), ("7.9", 7)],
    )
    def test_clamps_to_range(self, raw: object, expected: int) -> None:
        assert clamp_inquiry_limit(raw) == expected


@pytest.mark.asyncio
async def test_public_profile_falls_back_to_default() -> None:
    service = SiteContentService(MemorySiteStore())

    assert await service.public_profile() == default_profile()


@pytest.mark.asyncio
async def test_admin_profile_is_empty_before_first_write() -> None:
    service = SiteContentService(MemorySiteStore())

    assert await service.admin_profile() == {}


@pytest.mark.asyncio
async def test_update_profile_merges_and_keeps_unknown_fields() -> None:
    store = MemorySiteStore()
    await store.merge_profile({"name": "Old", "instagram": "@coach"})
    service = SiteContentService(store)

    await service.update_profile(ProfileUpdate.model_validate({"name": " New ", "age": "30"}))

    profile = await service.admin_profile()
    assert profile["name"] == "New"
    assert profile["age"] == 30
    assert profile["instagram"] == "@coach"
    assert profile["updatedAt"].endswith("Z")
    assert await service.public_profile() == profile


@pytest.mark.asyncio
async def test_invalid_profile_update_writes_nothing() -> None:
    store = MemorySiteStore()
    service = SiteContentService(store)

    with pytest.raises(ValidationError):
        await service.update_profile(ProfileUpdate.model_validate({"name": ""}))

    assert store.raw_document("profile") is None


@pytest.mark.asyncio
async def test_schedule_replaces_items_wholesale() -> None:
    store = MemorySiteStore()
    service = SiteContentService(store)
    await service.update_schedule([{"day": "Mon", "time": "5pm"}, {"day": "Tue", "time": "6pm"}])

    await service.update_schedule(
        [{"day": "Mon", "time": "5pm", "location": "Gym"}, {"day": "", "time": "6pm"}]
    )

    schedule = await service.schedule()
    assert schedule["items"] == [{"day": "Mon", "time": "5pm", "location": "Gym"}]


@pytest.mark.asyncio
async def test_schedule_empty_before_first_write() -> None:
    assert await SiteContentService(MemorySiteStore()).schedule() == {"items": []}


@pytest.mark.asyncio
async def test_recent_inquiries_newest_first_with_limit() -> None:
    store = MemorySiteStore()
    for index in range(3):
        submission = InquirySubmission(name=f"n{index}", email="e@x.com", message="m")
        await store.add_inquiry(submission.to_inquiry(created_at=f"2026-10-1{index}T00:00:00.000Z"))
    service = SiteContentService(store)

    items = await service.recent_inquiries("2")

    assert [item["name"] for item in items] == ["n2", "n1"]
    assert all(item["id"] for item in items)
