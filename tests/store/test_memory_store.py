"""Tests for InMemoryTutorialStore."""

import pytest

from tutorials.core.tutorial_store import (
    TutorialNotFoundError,
    TutorialValidationError,
)


class TestCreate:
    """Tests for create."""

    @pytest.mark.asyncio
    async def test_create_defaults_published_false(self, store):
        """Omitted published is stored as False."""
        tutorial = await store.create(title="T1")
        assert tutorial.published is False
        assert tutorial.description == ""

    @pytest.mark.asyncio
    async def test_create_unique_ids(self, store):
        """Each tutorial gets its own id."""
        t1 = await store.create(title="A")
        t2 = await store.create(title="A")
        assert t1.id != t2.id

    @pytest.mark.asyncio
    async def test_create_sets_timestamps(self, store):
        """created_at and updated_at are set on create."""
        tutorial = await store.create(title="A")
        assert tutorial.created_at
        assert tutorial.updated_at == tutorial.created_at

    @pytest.mark.asyncio
    async def test_create_published_true(self, store):
        """Explicit published is kept."""
        tutorial = await store.create(title="A", description="d", published=True)
        fetched = await store.find_by_id(tutorial.id)
        assert fetched.published is True
        assert fetched.description == "d"


class TestFind:
    """Tests for lookups and search."""

    @pytest.mark.asyncio
    async def test_find_by_id_returns_last_written(self, store):
        """find_by_id reflects the most recent update."""
        created = await store.create(title="Old", description="desc")
        await store.update(created.id, {"title": "New"})

        fetched = await store.find_by_id(created.id)
        assert fetched.title == "New"
        assert fetched.description == "desc"
        assert fetched.published is False

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self, store):
        """Unknown id raises TutorialNotFoundError."""
        with pytest.raises(TutorialNotFoundError):
            await store.find_by_id("missing")

    @pytest.mark.asyncio
    async def test_find_all_natural_order(self, store):
        """find_all returns records in insertion order."""
        for title in ["a", "b", "c"]:
            await store.create(title=title)
        assert [t.title for t in await store.find_all()] == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_empty_substring_matches_all(self, store):
        """Empty search returns the same set as find_all."""
        await store.create(title="Angular")
        await store.create(title="Node")
        everything = {t.id for t in await store.find_all()}
        matched = {t.id for t in await store.find_by_title_contains("")}
        assert matched == everything

    @pytest.mark.asyncio
    async def test_search_case_insensitive(self, store):
        """'ang' matches 'Angular'."""
        await store.create(title="Angular")
        await store.create(title="Vue")
        results = await store.find_by_title_contains("ang")
        assert [t.title for t in results] == ["Angular"]

    @pytest.mark.asyncio
    async def test_search_matches_anywhere(self, store):
        """Substring may appear in the middle of the title."""
        await store.create(title="Intro to MongoDB")
        results = await store.find_by_title_contains("MONGO")
        assert len(results) == 1

    @pytest.mark.asyncio
    async def test_find_all_published(self, store):
        """Only published tutorials are returned."""
        await store.create(title="draft")
        await store.create(title="live", published=True)
        results = await store.find_all_published()
        assert [t.title for t in results] == ["live"]


class TestUpdate:
    """Tests for update."""

    @pytest.mark.asyncio
    async def test_update_published_only(self, store):
        """Updating published leaves title and description unchanged."""
        created = await store.create(title="T", description="D")
        updated = await store.update(created.id, {"published": True})
        assert updated.published is True
        assert updated.title == "T"
        assert updated.description == "D"

    @pytest.mark.asyncio
    async def test_update_ignores_none(self, store):
        """None values do not null out fields."""
        created = await store.create(title="T", published=True)
        updated = await store.update(created.id, {"title": "U", "published": None})
        assert updated.title == "U"
        assert updated.published is True

    @pytest.mark.asyncio
    async def test_update_missing(self, store):
        """Unknown id raises TutorialNotFoundError."""
        with pytest.raises(TutorialNotFoundError):
            await store.update("missing", {"title": "x"})

    @pytest.mark.asyncio
    async def test_update_empty(self, store):
        """Empty update is rejected."""
        created = await store.create(title="T")
        with pytest.raises(TutorialValidationError):
            await store.update(created.id, {})

    @pytest.mark.asyncio
    async def test_update_returns_copy(self, store):
        """Mutating a returned record does not change the store."""
        created = await store.create(title="T")
        created.title = "mutated"
        assert (await store.find_by_id(created.id)).title == "T"


class TestDelete:
    """Tests for delete operations."""

    @pytest.mark.asyncio
    async def test_delete_then_find(self, store):
        """Deleted tutorial is no longer found."""
        created = await store.create(title="T")
        deleted = await store.delete_by_id(created.id)
        assert deleted.id == created.id
        with pytest.raises(TutorialNotFoundError):
            await store.find_by_id(created.id)

    @pytest.mark.asyncio
    async def test_delete_missing(self, store):
        """Deleting unknown id raises TutorialNotFoundError."""
        with pytest.raises(TutorialNotFoundError):
            await store.delete_by_id("missing")

    @pytest.mark.asyncio
    async def test_delete_all(self, store):
        """delete_all returns count and empties the store."""
        await store.create(title="a")
        await store.create(title="b")
        assert await store.delete_all() == 2
        assert await store.find_all() == []

    @pytest.mark.asyncio
    async def test_delete_all_empty(self, store):
        """delete_all on empty store returns 0."""
        assert await store.delete_all() == 0
