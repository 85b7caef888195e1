"""Cursor pagination over GitHub GraphQL connections."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from loguru import logger
from pydantic import BaseModel

from github_summary.client import GitHubGraphQLClient, query_name

PayloadT = TypeVar("PayloadT", bound=BaseModel)
ItemT = TypeVar("ItemT")


@dataclass(frozen=True)
class Page(Generic[ItemT]):
    """One page of a connection plus its continuation metadata."""

    items: list[ItemT] = field(default_factory=list)
    end_cursor: str | None = None
    has_next_page: bool = False


async def paginate(
    client: GitHubGraphQLClient,
    query: str,
    payload_type: type[PayloadT],
    variables: Mapping[str, Any],
    extract_page: Callable[[PayloadT], Page[ItemT]],
) -> list[ItemT]:
    """
    Run a paginated query until the server reports no more pages.

    The query must take a ``$cursor`` variable. The first request is sent
    without it and each following request passes the ``endCursor`` of the
    page before. Pagination stops as soon as a page has ``hasNextPage`` false
    or no ``endCursor``.

    Args:
        client: Client to run the query with
        query: GraphQL query string
        payload_type: Model the response data decodes into
        variables: Variables sent with every page
        extract_page: Picks the items and page info out of one response

    Returns:
        Items of all pages, in the order they were received
    """
    items: list[ItemT] = []
    cursor: str | None = None
    page_number = 0

    while True:
        page_number += 1
        logger.debug(
            "Fetching page", query=query_name(query), page=page_number, cursor=cursor
        )

        payload = await client.execute(
            query, payload_type, {**variables, "cursor": cursor}
        )
        page = extract_page(payload)
        items.extend(page.items)

        cursor = page.end_cursor
        if not page.has_next_page or cursor is None:
            break

    logger.debug(
        "Pagination finished",
        query=query_name(query),
        pages=page_number,
        total_items=len(items),
    )
    return items
