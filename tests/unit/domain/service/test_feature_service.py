"""Unit tests for FeatureService."""

import asyncio

import pytest

from featurevote.domain.error import NotFoundError, ValidationError
from featurevote.domain.repository import FeatureRepository
from featurevote.domain.service import FeatureService
from featurevote.domain.value import FeatureRequestId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreate:
    """Tests for create method."""

    @pytest.mark.asyncio
    async def test_create_starts_with_zero_votes(self, unit_env):
        feature_service = await unit_env.get(FeatureService)

        feature = await feature_service.create("Add dark mode", "desc")

        assert feature.title == "Add dark mode"
        assert feature.description == "desc"
        assert feature.votes == 0
        assert feature.created_at is not None

    @pytest.mark.asyncio
    async def test_created_feature_is_immediately_visible(self, unit_env):
        feature_service = await unit_env.get(FeatureService)

        feature = await feature_service.create("Keyboard shortcuts")

        assert await feature_service.get_by_id(feature.id) == feature
        assert feature in await feature_service.list_all()

    @pytest.mark.asyncio
    async def test_create_trims_and_nulls_blank_description(self, unit_env):
        feature_service = await unit_env.get(FeatureService)

        feature = await feature_service.create("  Offline mode  ", "   ")

        assert feature.title == "Offline mode"
        assert feature.description is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title", ["", "   ", "x" * 256])
    async def test_create_rejects_invalid_title(self, unit_env, title):
        feature_service = await unit_env.get(FeatureService)
        feature_repo = await unit_env.get(FeatureRepository)

        with pytest.raises(ValidationError) as exc_info:
            await feature_service.create(title, "anything")

        assert exc_info.value.details[0]["field"] == "title"
        # Nothing was written
        assert await feature_repo.find_all() == []

    @pytest.mark.asyncio
    async def test_create_rejects_long_description(self, unit_env):
        feature_service = await unit_env.get(FeatureService)

        with pytest.raises(ValidationError) as exc_info:
            await feature_service.create("Valid title", "d" * 1001)

        assert exc_info.value.details == [
            {
                "field": "description",
                "message": "Description must not exceed 1000 characters",
            }
        ]

    @pytest.mark.asyncio
    async def test_create_reports_every_invalid_field(self, unit_env):
        feature_service = await unit_env.get(FeatureService)

        with pytest.raises(ValidationError) as exc_info:
            await feature_service.create("", "d" * 1001)

        fields = {d["field"] for d in exc_info.value.details}
        assert fields == {"title", "description"}

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, unit_env):
        feature_service = await unit_env.get(FeatureService)

        features = await asyncio.gather(
            *(feature_service.create(f"Feature {i}") for i in range(100))
        )

        ids = [f.id for f in features]
        assert len(set(ids)) == len(ids)


class TestIncrementVote:
    """Tests for increment_vote method."""

    @pytest.mark.asyncio
    async def test_increment_vote_adds_one(self, unit_env):
        feature_service = await unit_env.get(FeatureService)
        feature = await feature_service.create("Add dark mode")

        first = await feature_service.increment_vote(feature.id)
        second = await feature_service.increment_vote(feature.id)

        assert first.votes == 1
        assert second.votes == 2
        assert (await feature_service.get_by_id(feature.id)).votes == 2

    @pytest.mark.asyncio
    async def test_increment_vote_leaves_other_fields_untouched(self, unit_env):
        feature_service = await unit_env.get(FeatureService)
        feature = await feature_service.create("Add dark mode", "desc")

        voted = await feature_service.increment_vote(feature.id)

        assert voted.model_dump(exclude={"votes"}) == feature.model_dump(
            exclude={"votes"}
        )

    @pytest.mark.asyncio
    async def test_concurrent_increments_lose_no_updates(self, unit_env):
        feature_service = await unit_env.get(FeatureService)
        feature = await feature_service.create("Add dark mode")
        await feature_service.increment_vote(feature.id)

        n = 1000
        results = await asyncio.gather(
            *(feature_service.increment_vote(feature.id) for _ in range(n))
        )

        final = await feature_service.get_by_id(feature.id)
        assert final.votes == 1 + n
        # Every caller saw a distinct post-increment value
        assert sorted(r.votes for r in results) == list(range(2, n + 2))

    @pytest.mark.asyncio
    async def test_increment_vote_unknown_feature(self, unit_env):
        feature_service = await unit_env.get(FeatureService)

        with pytest.raises(NotFoundError) as exc_info:
            await feature_service.increment_vote(FeatureRequestId(999))

        assert exc_info.value.resource == "Feature"
        assert exc_info.value.identifier == "999"


class TestGetById:
    """Tests for get_by_id method."""

    @pytest.mark.asyncio
    async def test_get_by_id_unknown_feature(self, unit_env):
        feature_service = await unit_env.get(FeatureService)

        with pytest.raises(NotFoundError):
            await feature_service.get_by_id(FeatureRequestId(42))

    @pytest.mark.asyncio
    async def test_repeated_reads_are_identical(self, unit_env):
        feature_service = await unit_env.get(FeatureService)
        feature = await feature_service.create("Add dark mode")
        await feature_service.increment_vote(feature.id)

        first = await feature_service.get_by_id(feature.id)
        second = await feature_service.get_by_id(feature.id)

        assert first == second
