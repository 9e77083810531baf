"""
Unit tests for award mutation resolvers
"""

from unittest.mock import MagicMock

import pytest
from fastapi import status

from booksapi.dbmodels import Awards
from booksapi.enums import AwardName
from booksapi.errors import NotFoundError
from booksapi.graphql.mutations.root import AddAwardInput
from booksapi.graphql.resolvers.award import (
    NOT_FOUND_ERROR_MESSAGE,
    add_award,
    delete_award,
    get_award_service,
)


def assert_not_found(exc: NotFoundError) -> None:
    assert exc.status_code == status.HTTP_404_NOT_FOUND
    assert exc.reason == NOT_FOUND_ERROR_MESSAGE


def test_get_award_service_reads_context(mock_info, award_service):
    assert get_award_service(mock_info) is award_service


class TestAddAward:
    """Tests for add_award mutation."""

    @pytest.mark.asyncio
    async def test_add_award_saves_award(self, mock_info, award_service):
        input_data = AddAwardInput(award_name="PORTICO_PRIZE", category="test", year=1994)

        result = await add_award(mock_info, input_data)

        assert result is None
        award_service.save.assert_awaited_once()
        (saved,) = award_service.save.await_args.args
        assert isinstance(saved, Awards)
        assert saved.award_name is AwardName.PORTICO_PRIZE
        assert saved.category == "test"
        assert saved.year == 1994

    @pytest.mark.asyncio
    async def test_add_award_accepts_display_name(self, mock_info, award_service):
        input_data = AddAwardInput(award_name="Orwell Prize", category="political", year=2019)

        await add_award(mock_info, input_data)

        (saved,) = award_service.save.await_args.args
        assert saved.award_name is AwardName.ORWELL_PRIZE

    @pytest.mark.asyncio
    async def test_add_award_unknown_name_raises(self, mock_info, award_service):
        input_data = AddAwardInput(award_name="DUMMY", category="drama", year=2005)

        with pytest.raises(NotFoundError) as exc_info:
            await add_award(mock_info, input_data)

        assert_not_found(exc_info.value)
        award_service.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_add_award_name_is_case_sensitive(self, mock_info, award_service):
        input_data = AddAwardInput(award_name="portico_prize", category="test", year=1994)

        with pytest.raises(NotFoundError):
            await add_award(mock_info, input_data)

        award_service.save.assert_not_called()


class TestDeleteAward:
    """Tests for delete_award mutation."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("award_id", [None, ""])
    async def test_delete_award_without_id_raises(self, mock_info, award_service, award_id):
        with pytest.raises(NotFoundError) as exc_info:
            await delete_award(mock_info, award_id)

        assert_not_found(exc_info.value)
        award_service.find_by_id.assert_not_called()
        award_service.delete_award.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_award_malformed_id_raises(self, mock_info, award_service):
        with pytest.raises(NotFoundError) as exc_info:
            await delete_award(mock_info, "not-a-number")

        assert_not_found(exc_info.value)
        award_service.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_award_missing_award_raises(self, mock_info, award_service):
        award_service.find_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await delete_award(mock_info, "1")

        assert_not_found(exc_info.value)
        award_service.find_by_id.assert_awaited_once_with(1)
        award_service.delete_award.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_award_returns_deleted_award(
        self, mock_info, award_service, sample_award
    ):
        award_service.find_by_id.return_value = sample_award

        result = await delete_award(mock_info, "1")

        award_service.find_by_id.assert_awaited_once_with(1)
        award_service.delete_award.assert_awaited_once()
        (deleted,) = award_service.delete_award.await_args.args
        assert deleted is sample_award
        assert result is sample_award

    @pytest.mark.asyncio
    async def test_all_not_found_causes_share_one_error(self, award_service):
        info = MagicMock()
        info.context = {"award_service": award_service}
        award_service.find_by_id.return_value = None

        errors = []

        with pytest.raises(NotFoundError) as exc_info:
            await add_award(info, AddAwardInput(award_name="DUMMY", category="drama", year=2005))
        errors.append((exc_info.value.status_code, exc_info.value.detail))

        for award_id in (None, "abc", "42"):
            with pytest.raises(NotFoundError) as exc_info:
                await delete_award(info, award_id)
            errors.append((exc_info.value.status_code, exc_info.value.detail))

        assert len(errors) == 4
        assert set(errors) == {(404, NOT_FOUND_ERROR_MESSAGE)}
        award_service.save.assert_not_called()
        award_service.delete_award.assert_not_called()
