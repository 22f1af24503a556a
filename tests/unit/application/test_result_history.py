"""Unit tests for result history queries and deletion."""

from datetime import datetime, timedelta, timezone

import pytest

from macroplan.application.macro_calculation.commands.delete_result import (
    DeleteResultCommand,
    DeleteResultHandler,
)
from macroplan.application.macro_calculation.queries.get_result import (
    GetResultHandler,
    GetResultQuery,
)
from macroplan.application.macro_calculation.queries.list_results import (
    ListResultsHandler,
    ListResultsQuery,
)
from macroplan.domain.macro_calculation.calculation.engine import MacroEngine

BASE_TIME = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


async def _fill(recorder, user, week, count: int) -> list:
    ids = []
    for minutes in range(count):
        result = MacroEngine().calculate(
            user, week, {}, {}, BASE_TIME + timedelta(minutes=minutes)
        )
        ids.append(await recorder.record(user, week, result))
    return ids


class TestListResultsQuery:
    @pytest.mark.parametrize(
        "page,limit,expected",
        [(1, 20, (1, 20)), (0, 0, (1, 1)), (-3, 500, (1, 100)), (4, 10, (4, 10))],
    )
    def test_bounds(self, page, limit, expected):
        query = ListResultsQuery(page=page, limit=limit)

        assert (query.page, query.limit) == expected


class TestListResultsHandler:
    @pytest.mark.asyncio
    async def test_pagination(self, recorder, reference_user, rest_week):
        ids = await _fill(recorder, reference_user, rest_week, 5)

        page = await ListResultsHandler(recorder).handle(ListResultsQuery(page=2, limit=2))

        assert page.total == 5
        assert page.total_pages == 3
        assert (page.page, page.limit) == (2, 2)
        # newest first: ids[4], ids[3] | ids[2], ids[1] | ids[0]
        assert [str(r.record_id) for r in page.records] == [ids[2], ids[1]]

    @pytest.mark.asyncio
    async def test_empty(self, recorder):
        page = await ListResultsHandler(recorder).handle(ListResultsQuery())

        assert page.records == []
        assert page.total == 0
        assert page.total_pages == 0


class TestGetAndDeleteResult:
    @pytest.mark.asyncio
    async def test_get_result(self, recorder, reference_user, rest_week):
        (record_id,) = await _fill(recorder, reference_user, rest_week, 1)

        record = await GetResultHandler(recorder).handle(GetResultQuery(record_id))

        assert record is not None
        assert record.user_input.age == 30

    @pytest.mark.asyncio
    async def test_get_missing(self, recorder):
        assert await GetResultHandler(recorder).handle(GetResultQuery("missing")) is None

    @pytest.mark.asyncio
    async def test_delete(self, recorder, reference_user, rest_week):
        (record_id,) = await _fill(recorder, reference_user, rest_week, 1)
        handler = DeleteResultHandler(recorder)

        assert await handler.handle(DeleteResultCommand(record_id)) is True
        assert await handler.handle(DeleteResultCommand(record_id)) is False
        assert await GetResultHandler(recorder).handle(GetResultQuery(record_id)) is None
