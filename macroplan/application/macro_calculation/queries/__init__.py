"""Queries for macro calculation."""

from .get_result import GetResultHandler, GetResultQuery
from .list_results import ListResultsHandler, ListResultsQuery, ResultPage

__all__ = [
    "GetResultHandler",
    "GetResultQuery",
    "ListResultsHandler",
    "ListResultsQuery",
    "ResultPage",
]
