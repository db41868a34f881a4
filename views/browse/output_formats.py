from __future__ import annotations

from typing import Iterable
from urllib.parse import urlencode

from markupsafe import Markup, escape

from .headings import copy_query

OUTPUT_PARAM = "output"


def current_action_contexts(contexts: Iterable[str] | None) -> list[str]:
    """Sorted, de-duplicated output contexts (e.g. json, rss2)."""
    if not contexts:
        return []
    return sorted({str(c).strip() for c in contexts if c and str(c).strip()})


def output_format_url(context: str, query=None, base_url: str = "") -> str:
    params = copy_query(query)
    params[OUTPUT_PARAM] = context
    return f"{base_url}?{urlencode(params, doseq=True)}"


def output_format_list(
    contexts,
    query=None,
    base_url: str = "",
    as_list: bool = True,
    delimiter: str = " | ",
) -> Markup | None:
    """
    Links to every output format of the current action.
      - no contexts -> None (caller shows nothing)
      - as_list=True  -> <ul id="output-format-list"><li>...</li></ul>
      - as_list=False -> <p id="output-format-list"> links joined by delimiter
    """
    contexts = current_action_contexts(contexts)
    if not contexts:
        return None

    links = [
        Markup('<a href="{}">{}</a>').format(output_format_url(ctx, query, base_url), ctx)
        for ctx in contexts
    ]

    if as_list:
        items = Markup("").join(Markup("<li>{}</li>").format(link) for link in links)
        return Markup('<ul id="output-format-list">{}</ul>').format(items)

    # delimiter is escaped like any other text; no trailing delimiter
    return Markup('<p id="output-format-list">{}</p>').format(escape(delimiter).join(links))
