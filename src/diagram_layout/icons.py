"""Concurrent icon resolution, run before layout.

A resolved icon changes a node's measured size, so every resolution must
finish before layout starts. Resolutions are independent: one failing
leaves that node without an icon and does not affect the others.

The resolver itself is pluggable; fetching emoji, favicons or cloud
provider artwork is the caller's business. ``inline_data_resolver`` only
accepts icons that are already ``data:`` URIs.
"""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Awaitable, Callable
from enum import Enum

from diagram_layout.ir.spec import DiagramSpec

logger = logging.getLogger(__name__)

IconResolver = Callable[[str], Awaitable[str]]

_EMOJI_RE = re.compile("[\U0001f000-\U0001faff☀-➿⬀-⯿]")


class IconType(Enum):
    Absent = "none"
    Cloud = "cloud"
    Favicon = "favicon"
    Data = "data"
    Emoji = "emoji"
    Named = "named"


class IconResolutionError(Exception):
    """Raised by a resolver that cannot produce image data for an icon."""


def detect_icon_type(icon: str | None) -> IconType:
    if not icon:
        return IconType.Absent
    if icon.startswith(("aws:", "gcp:")):
        return IconType.Cloud
    if icon.startswith("favicon:"):
        return IconType.Favicon
    if icon.startswith("data:"):
        return IconType.Data
    if _EMOJI_RE.search(icon):
        return IconType.Emoji
    return IconType.Named


async def inline_data_resolver(icon: str) -> str:
    if detect_icon_type(icon) != IconType.Data:
        raise IconResolutionError(f"no resolver for icon '{icon}'")
    return icon


async def resolve_icons(spec: DiagramSpec, resolver: IconResolver = inline_data_resolver) -> int:
    """Fill ``icon_data_uri`` for every node that names an icon.

    Nodes that already carry icon data are left alone. Returns the number
    of icons resolved.
    """
    pending = [n for n in spec.nodes if n.icon and not n.icon_data_uri]
    if not pending:
        return 0

    results = await asyncio.gather(*(resolver(n.icon) for n in pending), return_exceptions=True)

    resolved = 0
    for node, result in zip(pending, results):
        if isinstance(result, BaseException) and not isinstance(result, Exception):
            raise result
        if isinstance(result, Exception):
            logger.warning("failed to resolve icon %r for node %r: %s", node.icon, node.id, result)
            continue
        if not result:
            logger.warning("icon %r for node %r resolved to nothing", node.icon, node.id)
            continue
        node.icon_data_uri = result
        resolved += 1

    logger.debug("resolved %d of %d icons", resolved, len(pending))
    return resolved


def resolve_icons_sync(spec: DiagramSpec, resolver: IconResolver = inline_data_resolver) -> int:
    """Blocking wrapper around ``resolve_icons`` for synchronous callers."""
    return asyncio.run(resolve_icons(spec, resolver))
