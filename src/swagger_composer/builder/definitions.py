"""Merge per-route ``definitions`` into the document-wide map."""

import logging

logger = logging.getLogger(__name__)


def route_definitions(*fragments: dict | None) -> dict:
    """Combine the definitions of one route's fragments.

    Later fragments override earlier ones, so pass them as body, query, response.
    """
    combined: dict = {}
    for fragment in fragments:
        if fragment:
            combined.update(fragment.get("definitions") or {})
    return combined


def merge_definitions(
    definitions: dict,
    body: dict | None = None,
    query: dict | None = None,
    response: dict | None = None,
) -> tuple[dict, list[str]]:
    """Insert the route's definitions into a copy of ``definitions`` where absent.

    The first writer wins: an existing name is kept and the newcomer is
    reported in the returned list of discarded names.
    """
    merged = dict(definitions)
    discarded: list[str] = []
    for name, schema in route_definitions(body, query, response).items():
        if name in merged:
            discarded.append(name)
            logger.debug("Definition %s already registered, keeping the first one", name)
            continue
        merged[name] = schema
    return merged, discarded
