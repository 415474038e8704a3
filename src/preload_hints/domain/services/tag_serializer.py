from __future__ import annotations

from typing import Mapping


def render_element(
    element_name: str,
    attributes: Mapping[str, str] | None = None,
    closing_tag_omitted: bool = False,
) -> str:
    """
    Render an element as markup.

    Attributes are written in mapping order as key="value" with the literal
    value. Void elements such as <link> pass closing_tag_omitted=True.
    """
    attributes_string = " ".join(f'{key}="{value}"' for key, value in (attributes or {}).items())
    opening = f"<{element_name} {attributes_string}>" if attributes_string else f"<{element_name}>"
    if closing_tag_omitted:
        return opening
    return f"{opening}</{element_name}>"
