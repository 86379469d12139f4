"""
Unit tests for the seed data generator.
"""
import pytest
from faker import Faker

from placeholder_api.core.security import verify_password
from placeholder_api.domain.constants import PostFields, UserFields
from placeholder_api.infrastructure.db.seed import SEED_PASSWORD, SeedGenerator


@pytest.fixture
def faker():
    fake = Faker()
    fake.seed_instance(1234)
    return fake


def _assign_ids(start: int = 1):
    """side_effect for repository.create that hands back the entity with a fresh ID"""
    counter = {"next": start}

    def create(entity):
        entity.id = counter["next"]
        counter["next"] += 1
        return entity

    return create


class TestSeedGenerator:
    """Tests for SeedGenerator"""

    def test_build_user_respects_column_limits(self, mock_user_repo, mock_post_repo, faker):
        generator = SeedGenerator(mock_user_repo, mock_post_repo, faker=faker)
        for _ in range(50):
            user = generator.build_user("hash")
            assert 0 < len(user.name) <= UserFields.NAME_MAX_LENGTH
            assert 0 < len(user.username) <= UserFields.USERNAME_MAX_LENGTH
            assert 0 < len(user.email) <= UserFields.EMAIL_MAX_LENGTH
            assert len(user.phone) <= UserFields.PHONE_MAX_LENGTH
            assert len(user.website) <= UserFields.WEBSITE_MAX_LENGTH
            assert isinstance(user.address.geo.lat, str)
            assert user.company.catch_phrase

    def test_build_post_respects_column_limits(self, mock_user_repo, mock_post_repo, faker):
        generator = SeedGenerator(mock_user_repo, mock_post_repo, faker=faker)
        post = generator.build_post(7)
        assert post.user_id == 7
        assert 0 < len(post.title) <= PostFields.TITLE_MAX_LENGTH
        assert 0 < len(post.body) <= PostFields.BODY_MAX_LENGTH

    @pytest.mark.asyncio
    async def test_generate_one_post_per_user(self, mock_user_repo, mock_post_repo, faker):
        mock_user_repo.create.side_effect = _assign_ids()
        mock_post_repo.create.side_effect = _assign_ids()

        report = await SeedGenerator(mock_user_repo, mock_post_repo, faker=faker).generate()

        assert (report.users_inserted, report.posts_inserted, report.failures) == (20, 20, 0)
        owners = [call.args[0].user_id for call in mock_post_repo.create.call_args_list]
        assert owners == list(range(1, 21))

    @pytest.mark.asyncio
    async def test_generate_uses_placeholder_password(self, mock_user_repo, mock_post_repo, faker):
        mock_user_repo.create.side_effect = _assign_ids()
        mock_post_repo.create.side_effect = _assign_ids()

        await SeedGenerator(mock_user_repo, mock_post_repo, faker=faker, user_count=2).generate()

        for call in mock_user_repo.create.call_args_list:
            assert verify_password(SEED_PASSWORD, call.args[0].hashed_password)

    @pytest.mark.asyncio
    async def test_failed_inserts_do_not_abort_batch(self, mock_user_repo, mock_post_repo, faker):
        create_user = _assign_ids()
        attempts = {"count": 0}

        def flaky_create(user):
            attempts["count"] += 1
            if attempts["count"] == 3:
                raise RuntimeError("disk full")
            return create_user(user)

        mock_user_repo.create.side_effect = flaky_create
        create_post = _assign_ids()
        post_attempts = {"count": 0}

        def flaky_post(post):
            post_attempts["count"] += 1
            if post_attempts["count"] == 1:
                raise RuntimeError("constraint failed")
            return create_post(post)

        mock_post_repo.create.side_effect = flaky_post

        report = await SeedGenerator(mock_user_repo, mock_post_repo, faker=faker, user_count=5).generate()

        assert report.users_inserted == 4
        assert report.posts_inserted == 3
        assert report.failures == 2
        assert mock_user_repo.create.call_count == 5

    @pytest.mark.asyncio
    async def test_seed_if_empty_skips_populated_store(self, mock_user_repo, mock_post_repo, faker):
        mock_user_repo.count.return_value = 3

        report = await SeedGenerator(mock_user_repo, mock_post_repo, faker=faker).seed_if_empty()

        assert report is None
        mock_user_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_seed_if_empty_runs_on_empty_store(self, mock_user_repo, mock_post_repo, faker):
        mock_user_repo.count.return_value = 0
        mock_user_repo.create.side_effect = _assign_ids()
        mock_post_repo.create.side_effect = _assign_ids()

        report = await SeedGenerator(
            mock_user_repo, mock_post_repo, faker=faker, user_count=3
        ).seed_if_empty()

        assert report.users_inserted == 3
        assert report.posts_inserted == 3
