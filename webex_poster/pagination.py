"""Cursor pagination over ``Link`` response headers.

Webex returns continuation links as::

    Link: <https://webexapis.com/v1/rooms?cursor=abc>; rel="next"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx


@dataclass(frozen=True)
class PageCursor:
    """Continuation token for the next page of a listing."""

    url: str

    @classmethod
    def from_response(cls, resp: httpx.Response) -> Optional["PageCursor"]:
        url = resp.links.get("next", {}).get("url")
        if not url:
            return None
        return cls(url=url)
