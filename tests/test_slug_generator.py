"""
Tests for slug candidate construction and uniqueness resolution.
"""

from datetime import date, datetime
from unittest.mock import AsyncMock

import pytest

from promo_parser.services.slug_generator import SlugGenerator

FROZEN_MILLIS = 1735689600000


class FakeSlugStore:
    """Maps slugs to the ids of promotions holding them."""

    def __init__(self, taken: dict[str, list[int]] | None = None) -> None:
        self.taken = taken or {}
        self.lookups: list[str] = []

    async def find_by_slug(self, slug: str, exclude_id: int | None = None):
        self.lookups.append(slug)
        owners = [owner for owner in self.taken.get(slug, []) if owner != exclude_id]
        return owners[0] if owners else None


def _generator(store) -> SlugGenerator:
    return SlugGenerator(repository=store, clock=lambda: FROZEN_MILLIS)


class TestBuildCandidate:
    """Model plus month-year formatting."""

    @pytest.mark.parametrize(
        ("reference", "expected"),
        [
            (date(2025, 1, 15), "atto3-jan-2025"),
            (datetime(2024, 12, 31, 23, 0), "atto3-dec-2024"),
            ("2025-09-01", "atto3-sep-2025"),
            ("2025-05-01T00:00:00", "atto3-may-2025"),
            (None, "atto3"),
            ("ไม่ใช่วันที่", "atto3"),
        ],
    )
    def test_candidate(self, reference, expected):
        generator = _generator(FakeSlugStore())
        assert generator.build_candidate(model_slug="atto3", reference_date=reference) == expected


class TestResolve:
    """Bounded suffix probing against the store."""

    @pytest.mark.asyncio
    async def test_unused_candidate_is_returned(self):
        store = FakeSlugStore()

        slug = await _generator(store).resolve(candidate="atto3-jan-2025")

        assert slug == "atto3-jan-2025"
        assert store.lookups == ["atto3-jan-2025"]

    @pytest.mark.asyncio
    async def test_candidate_used_by_two_documents(self):
        store = FakeSlugStore(taken={"atto3-jan-2025": [1, 2]})

        slug = await _generator(store).resolve(candidate="atto3-jan-2025")

        assert slug == "atto3-jan-2025-2"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("prior", range(1, 9))
    async def test_next_free_suffix(self, prior):
        candidate = "seal-mar-2025"
        taken = {candidate: [1]}
        taken.update({f"{candidate}-{suffix}": [suffix] for suffix in range(2, prior + 1)})

        slug = await _generator(FakeSlugStore(taken=taken)).resolve(candidate=candidate)

        assert slug == f"{candidate}-{prior + 1}"

    @pytest.mark.asyncio
    async def test_timestamp_fallback_after_nine(self):
        candidate = "dolphin"
        taken = {candidate: [1], **{f"{candidate}-{suffix}": [suffix] for suffix in range(2, 10)}}
        store = FakeSlugStore(taken=taken)

        slug = await _generator(store).resolve(candidate=candidate)

        assert slug == f"dolphin-{FROZEN_MILLIS}"
        assert store.lookups == [candidate] + [f"{candidate}-{suffix}" for suffix in range(2, 10)]

    @pytest.mark.asyncio
    async def test_own_slug_is_excluded(self):
        store = FakeSlugStore(taken={"atto3-jan-2025": [7]})

        slug = await _generator(store).resolve(candidate="atto3-jan-2025", exclude_id=7)

        assert slug == "atto3-jan-2025"

    @pytest.mark.asyncio
    async def test_store_errors_propagate(self):
        store = AsyncMock()
        store.find_by_slug.side_effect = ConnectionError("database unavailable")

        with pytest.raises(ConnectionError):
            await _generator(store).resolve(candidate="atto3")

        store.find_by_slug.assert_awaited_once_with(slug="atto3", exclude_id=None)
