from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Mapping
from urllib.parse import urlencode

from markupsafe import Markup

SORT_PARAM = "sort"
SORT_DIR_PARAM = "sortdir"

SORT_ASC = "a"
SORT_DESC = "d"


@dataclass(frozen=True)
class HeadingCell:
    label: str
    column: str = ""
    css_class: str | None = None
    url: str | None = None
    sort_dir: str | None = None

    @property
    def sortable(self) -> bool:
        return bool(self.column)


def _clean(value) -> str:
    # absent / None params behave like ""
    if value is None:
        return ""
    return str(value).strip()


def default_url_builder(params: Mapping[str, object]) -> str:
    return "?" + urlencode(params, doseq=True)


def copy_query(query) -> dict:
    """
    Plain dict copy of the current query string.
    werkzeug MultiDict keeps every value per key (to_dict(flat=False)).
    """
    if query is None:
        return {}
    if hasattr(query, "to_dict"):
        return query.to_dict(flat=False)
    return dict(query)


def _iter_headings(headings) -> Iterable[tuple[str, str]]:
    # dict form: {label: column}
    if isinstance(headings, Mapping):
        return headings.items()
    return headings


def next_sort_dir(column: str, current_sort: str = "", current_dir: str = "") -> str:
    """
    Active column sorted descending -> "a", everything else -> "d".
    """
    current_sort = _clean(current_sort)
    if current_sort and current_sort == column and _clean(current_dir) == SORT_DESC:
        return SORT_ASC
    return SORT_DESC


def sort_class(column: str, current_sort: str = "", current_dir: str = "") -> str | None:
    current_sort = _clean(current_sort)
    if not current_sort or current_sort != column:
        return None
    if _clean(current_dir) == SORT_DESC:
        return "sorting desc"
    return "sorting asc"


def heading_cells(
    headings,
    current_sort: str = "",
    current_dir: str = "",
    query=None,
    url_builder: Callable[[dict], str] | None = None,
    sort_param: str = SORT_PARAM,
    sort_dir_param: str = SORT_DIR_PARAM,
) -> list[HeadingCell]:
    """
    Build one HeadingCell per (label, column) pair.

    - column empty -> plain cell (no url, no class)
    - otherwise the url is the current query with sort_param=column and
      sort_dir_param=<next direction>; other params are kept as-is
    """
    build_url = url_builder or default_url_builder
    current_sort = _clean(current_sort)
    current_dir = _clean(current_dir)

    cells = []
    for label, column in _iter_headings(headings):
        label = "" if label is None else str(label)
        column = _clean(column)
        if not column:
            cells.append(HeadingCell(label=label))
            continue

        direction = next_sort_dir(column, current_sort, current_dir)
        params = copy_query(query)
        params[sort_param] = column
        params[sort_dir_param] = direction

        cells.append(
            HeadingCell(
                label=label,
                column=column,
                css_class=sort_class(column, current_sort, current_dir),
                url=build_url(params),
                sort_dir=direction,
            )
        )
    return cells


def render_heading_cell(cell: HeadingCell) -> Markup:
    if not cell.sortable:
        return Markup('<th scope="col">{}</th>').format(cell.label)

    if cell.css_class:
        return Markup('<th class="{}" scope="col"><a href="{}">{}</a></th>').format(
            cell.css_class, cell.url, cell.label
        )
    return Markup('<th scope="col"><a href="{}">{}</a></th>').format(cell.url, cell.label)


def browse_headings(headings, **kwargs) -> Markup:
    """
    Table header cells for a browse page.
    Returns markup instead of writing it; label/class/url are escaped.
    Keyword args are passed to heading_cells().
    """
    return Markup("").join(render_heading_cell(c) for c in heading_cells(headings, **kwargs))


__all__ = [
    "HeadingCell",
    "SORT_PARAM",
    "SORT_DIR_PARAM",
    "browse_headings",
    "copy_query",
    "default_url_builder",
    "heading_cells",
    "next_sort_dir",
    "render_heading_cell",
    "sort_class",
]
