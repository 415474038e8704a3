from __future__ import annotations

import re
from typing import Sequence

CLOSING_HEAD = re.compile(r"</head>", re.IGNORECASE)


def insert_links_into_head(html: str, links: Sequence[str]) -> str:
    """
    Insert serialized tags as one block right before the first closing head tag.

    Documents without a closing head tag are returned unchanged.
    """
    if not links:
        return html
    match = CLOSING_HEAD.search(html)
    if match is None:
        return html
    position = match.start()
    return html[:position] + "".join(links) + html[position:]
