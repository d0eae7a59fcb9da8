"""Unit tests for ProgressUpdateService validation and persistence."""

import pytest
from datetime import datetime
from unittest.mock import AsyncMock
from pymongo.errors import ServerSelectionTimeoutError

from cookbook.progress_updates.exceptions import (
    InvalidProgressUpdateError,
    ProgressUpdateStoreError,
)
from cookbook.progress_updates.services.progress_update_service import ProgressUpdateService


@pytest.fixture
def mock_store():
    store = AsyncMock()

    async def _save(document):
        return {"id": "generated-id", **document}

    store.save = AsyncMock(side_effect=_save)
    return store


@pytest.fixture
def service(mock_store):
    return ProgressUpdateService(store=mock_store)


def _saved_document(mock_store):
    return mock_store.save.call_args[0][0]


class TestCreateProgressUpdate:
    @pytest.mark.asyncio
    async def test_persists_all_fields(self, service, mock_store):
        result = await service.create_progress_update(
            user_id="u1",
            template_type="weekly",
            content="Lost 2kg",
            learning_plan_id="lp1",
        )

        mock_store.save.assert_called_once()
        doc = _saved_document(mock_store)
        assert doc["userId"] == "u1"
        assert doc["templateType"] == "weekly"
        assert doc["content"] == "Lost 2kg"
        assert doc["learningPlanId"] == "lp1"
        assert isinstance(doc["createdAt"], datetime)
        assert doc["createdAt"].tzinfo is not None
        assert result["id"] == "generated-id"

    @pytest.mark.asyncio
    async def test_learning_plan_is_optional(self, service, mock_store):
        await service.create_progress_update("u1", "weekly", "Lost 2kg")

        assert _saved_document(mock_store)["learningPlanId"] is None

    @pytest.mark.asyncio
    async def test_blank_learning_plan_stored_as_none(self, service, mock_store):
        await service.create_progress_update("u1", "weekly", "Lost 2kg", "   ")

        assert _saved_document(mock_store)["learningPlanId"] is None

    @pytest.mark.asyncio
    async def test_stores_fields_exactly_as_received(self, service, mock_store):
        await service.create_progress_update(" u1 ", " weekly ", " keep spacing ", " lp1 ")

        doc = _saved_document(mock_store)
        assert doc["userId"] == " u1 "
        assert doc["templateType"] == " weekly "
        assert doc["learningPlanId"] == " lp1 "
        assert doc["content"] == " keep spacing "

    @pytest.mark.asyncio
    async def test_empty_content_is_allowed(self, service, mock_store):
        await service.create_progress_update("u1", "weekly", "")

        assert _saved_document(mock_store)["content"] == ""

    @pytest.mark.asyncio
    async def test_identical_input_creates_two_records(self, service, mock_store):
        await service.create_progress_update("u1", "weekly", "Lost 2kg")
        await service.create_progress_update("u1", "weekly", "Lost 2kg")

        assert mock_store.save.call_count == 2


class TestCreateProgressUpdateValidation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("user_id", [None, "", "   "])
    async def test_rejects_missing_user_id(self, service, mock_store, user_id):
        with pytest.raises(InvalidProgressUpdateError) as exc_info:
            await service.create_progress_update(user_id, "weekly", "Lost 2kg")

        assert exc_info.value.message == "User id is required"
        mock_store.save.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("template_type", [None, ""])
    async def test_rejects_missing_template_type(self, service, mock_store, template_type):
        with pytest.raises(InvalidProgressUpdateError, match="Template type is required"):
            await service.create_progress_update("u1", template_type, "Lost 2kg")

        mock_store.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejects_missing_content(self, service, mock_store):
        with pytest.raises(InvalidProgressUpdateError, match="Content is required"):
            await service.create_progress_update("u1", "weekly", None)

        mock_store.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejects_template_outside_allowed_list(self, mock_store):
        service = ProgressUpdateService(
            store=mock_store,
            allowed_template_types=["weekly", "milestone"],
        )

        with pytest.raises(InvalidProgressUpdateError, match="Unsupported template type 'daily'"):
            await service.create_progress_update("u1", "daily", "Lost 2kg")

        await service.create_progress_update("u1", "milestone", "Lost 2kg")
        mock_store.save.assert_called_once()

    @pytest.mark.asyncio
    async def test_rejects_content_over_max_length(self, mock_store):
        service = ProgressUpdateService(store=mock_store, content_max_length=5)

        with pytest.raises(InvalidProgressUpdateError, match="at most 5 characters"):
            await service.create_progress_update("u1", "weekly", "123456")

        await service.create_progress_update("u1", "weekly", "12345")
        mock_store.save.assert_called_once()


class TestCreateProgressUpdateStoreFailure:
    @pytest.mark.asyncio
    async def test_database_error_becomes_store_error(self, service, mock_store):
        mock_store.save.side_effect = ServerSelectionTimeoutError("no servers available")

        with pytest.raises(ProgressUpdateStoreError) as exc_info:
            await service.create_progress_update("u1", "weekly", "Lost 2kg")

        assert "no servers available" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, ServerSelectionTimeoutError)

    @pytest.mark.asyncio
    async def test_other_errors_propagate_unchanged(self, service, mock_store):
        mock_store.save.side_effect = KeyError("_id")

        with pytest.raises(KeyError):
            await service.create_progress_update("u1", "weekly", "Lost 2kg")
