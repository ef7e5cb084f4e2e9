"""Application pagination – adapter, items, pages, cursors and collaborator ports."""
from keyset_pager.application.pagination.adapter import PaginationAdapter
from keyset_pager.application.pagination.counter import Counter
from keyset_pager.application.pagination.cursor import BoundaryCodec
from keyset_pager.application.pagination.items import IndexResolver, KeysetItem
from keyset_pager.application.pagination.page import KeysetPage, OffsetPage
from keyset_pager.application.pagination.page_request import PageRequest
from keyset_pager.application.pagination.ports import QueryExecutor
from keyset_pager.application.pagination.query import QuerySpec

__all__ = [
    "BoundaryCodec",
    "Counter",
    "IndexResolver",
    "KeysetItem",
    "KeysetPage",
    "OffsetPage",
    "PageRequest",
    "PaginationAdapter",
    "QueryExecutor",
    "QuerySpec",
]
