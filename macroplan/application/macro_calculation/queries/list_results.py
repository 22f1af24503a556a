"""ListResultsQuery - paginated history of calculations."""

import math
from dataclasses import dataclass
from typing import List

from macroplan.domain.macro_calculation.core.entities.calculation_record import (
    CalculationRecord,
)
from macroplan.domain.macro_calculation.core.ports.result_recorder import (
    IResultRecorder,
)

MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class ListResultsQuery:
    """Query a page of calculation records, newest first.

    Attributes:
        page: 1-based page number (values below 1 read page 1)
        limit: Page size, between 1 and 100
    """

    page: int = 1
    limit: int = 20

    def __post_init__(self) -> None:
        object.__setattr__(self, "page", max(1, self.page))
        object.__setattr__(self, "limit", min(MAX_PAGE_SIZE, max(1, self.limit)))


@dataclass(frozen=True)
class ResultPage:
    """A page of records with pagination metadata."""

    records: List[CalculationRecord]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)


class ListResultsHandler:
    """Handler for ListResultsQuery."""

    def __init__(self, recorder: IResultRecorder):
        self._recorder = recorder

    async def handle(self, query: ListResultsQuery) -> ResultPage:
        offset = (query.page - 1) * query.limit
        records, total = await self._recorder.list_recent(offset, query.limit)
        return ResultPage(records=records, page=query.page, limit=query.limit, total=total)
