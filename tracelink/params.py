from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tracelink.schemas import ListOptions, coerce


def build_list_params(options: ListOptions | Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Translate sort/filter/paging options into the wire-level ``order`` object.

    ``limit`` and ``page`` are sent whenever they are set, zero included.
    ``reverse`` and ``filter_or`` are only sent when true. Filter expressions
    are forwarded untouched. Returns ``{}`` rather than ``{"order": {}}`` when
    nothing was requested.
    """
    opts = coerce(ListOptions, options)
    order: dict[str, Any] = {}

    if opts.sort:
        order["sort"] = opts.sort if isinstance(opts.sort, str) else ",".join(opts.sort)
    if opts.reverse:
        order["reverse"] = 1
    if opts.limit is not None:
        order["limit"] = opts.limit
    if opts.page is not None:
        order["page"] = opts.page
    if opts.filter:
        order["filter"] = opts.filter
    if opts.filter_or:
        order["filter_or"] = True

    return {"order": order} if order else {}
