"""Cursor pagination over Data API and Secrets Manager list calls.

Every listing in redshiftlib is a collect-all consumer of :func:`iter_pages`:
send the request, yield the page, copy the returned ``NextToken`` into the
next request, stop on the first page that has no token.
"""

import logging
from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar

from redshiftlib.context import CallContext, check

logger = logging.getLogger(__name__)

T = TypeVar("T")

Page = dict[str, Any]


def iter_pages(
    call: Callable[..., Page],
    request: Optional[dict[str, Any]] = None,
    ctx: Optional[CallContext] = None,
    token_key: str = "NextToken",
) -> Iterator[Page]:
    """Lazily yield every page of a cursor-paginated call.

    Each new generator starts again from the first page. The caller's
    ``request`` dict is never modified.

    Args:
        call: Bound client method, e.g. ``client.list_schemas``
        request: Keyword arguments for the first request
        ctx: Optional call context, checked before each page
        token_key: Name of the continuation token field

    Yields:
        Raw response dicts, in arrival order

    Example:
        >>> for page in iter_pages(client.list_schemas, {"Database": "dev"}):
        ...     print(page["Schemas"])
    """
    params = dict(request or {})
    params.pop(token_key, None)
    pages = 0
    while True:
        check(ctx)
        page = call(**params)
        pages += 1
        yield page
        token = page.get(token_key)
        if not token:
            break
        params[token_key] = token
    logger.debug("%s returned %d page(s)", getattr(call, "__name__", "call"), pages)


def iter_items(
    pages: Iterable[Page],
    extract: Callable[[Page], Iterable[Optional[T]]],
) -> Iterator[T]:
    """Flatten pages into items, skipping ``None``"""
    for page in pages:
        for item in extract(page):
            if item is not None:
                yield item


def collect(
    call: Callable[..., Page],
    request: Optional[dict[str, Any]],
    extract: Callable[[Page], Iterable[Optional[T]]],
    ctx: Optional[CallContext] = None,
) -> list[T]:
    """Fetch every page and return the flattened items as a list"""
    return list(iter_items(iter_pages(call, request, ctx=ctx), extract))


def names(key: str) -> Callable[[Page], Iterator[Optional[str]]]:
    """Extractor for ``page[key][*]["name"]``"""

    def extract(page: Page) -> Iterator[Optional[str]]:
        for entry in page.get(key) or []:
            if entry is not None:
                yield entry.get("name")

    return extract
