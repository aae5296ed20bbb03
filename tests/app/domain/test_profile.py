"""Testes do perfil (leitura tolerante e validação do update)."""

from __future__ import annotations

import math

import pytest

from app.domain.profile import DEFAULT_PROFILE, Profile, ProfileUpdate, default_profile
from utils.errors import ValidationError


class TestDefaultProfile:
    def test_default_profile_is_a_copy(self) -> None:
        profile = default_profile()
        profile["name"] = "changed"

        assert DEFAULT_PROFILE["name"] == "مستر رياضة"

    def test_default_profile_fields(self) -> None:
        assert default_profile() == {
            "name": "مستر رياضة",
            "bio": "اكتب نبذة هنا من الداشبورد",
            "place": "—",
            "phone": "—",
            "age": None,
            "photoUrl": "",
        }


class TestProfileUpdate:
    def test_trims_text_fields(self) -> None:
        update = ProfileUpdate.model_validate(
            {
                "name": "  Coach  ",
                "bio": " bio ",
                "place": " Cairo ",
                "phone": " 0100 ",
                "photoUrl": " https://x/p.jpg ",
            }
        )

        document = update.to_merge_document(updated_at="2026-10-18T10:00:00.000Z")

        assert document == {
            "name": "Coach",
            "bio": "bio",
            "place": "Cairo",
            "phone": "0100",
            "photoUrl": "https://x/p.jpg",
            "age": None,
            "updatedAt": "2026-10-18T10:00:00.000Z",
        }

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_name_is_required(self, name: str | None) -> None:
        update = ProfileUpdate.model_validate({"name": name, "bio": "x"})

        with pytest.raises(ValidationError, match="name is required"):
            update.to_merge_document()

    @pytest.mark.parametrize(
        ("raw_age", "expected"),
        [(None, None), ("", None), ("30", 30), (31, 31), ("27.5", 27.5), (40.0, 40)],
    )
    def test_age_coercion(self, raw_age: object, expected: object) -> None:
        update = ProfileUpdate.model_validate({"name": "Coach", "age": raw_age})

        assert update.to_merge_document()["age"] == expected

    def test_absent_age_becomes_null(self) -> None:
        document = ProfileUpdate.model_validate({"name": "Coach"}).to_merge_document()

        assert document["age"] is None

    @pytest.mark.parametrize("raw_age", ["abc", True, "NaN", "inf"])
    def test_non_numeric_age_is_rejected(self, raw_age: object) -> None:
        update = ProfileUpdate.model_validate({"name": "Coach", "age": raw_age})

        with pytest.raises(ValidationError, match="age must be a number"):
            update.to_merge_document()

    def test_updated_at_is_stamped(self) -> None:
        document = ProfileUpdate.model_validate({"name": "Coach"}).to_merge_document()

        assert document["updatedAt"].endswith("Z")


class TestStoredProfile:
    def test_keeps_extra_fields(self) -> None:
        profile = Profile.from_firestore_dict(
            {"name": "Coach", "instagram": "@coach", "updatedAt": "2026-01-01T00:00:00.000Z"}
        )

        document = profile.to_document()

        assert document["instagram"] == "@coach"
        assert document["updatedAt"] == "2026-01-01T00:00:00.000Z"

    def test_invalid_stored_age_reads_as_none(self) -> None:
        profile = Profile.from_firestore_dict({"name": "Coach", "age": math.nan})

        assert profile.age is None

    def test_document_without_updated_at_omits_key(self) -> None:
        document = Profile.from_firestore_dict({"name": "Coach"}).to_document()

        assert "updatedAt" not in document

    def test_document_is_not_padded_with_defaults(self) -> None:
        document = Profile.from_firestore_dict({"name": "X", "custom": 1}).to_document()

        assert document == {"name": "X", "custom": 1}
