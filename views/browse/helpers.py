from __future__ import annotations

import os

from flask import current_app, request

from labels import label

from .headings import (
    SORT_DIR_PARAM,
    SORT_PARAM,
    browse_headings,
    copy_query,
    default_url_builder,
    heading_cells,
)
from .output_formats import output_format_list


def sort_params() -> tuple[str, str]:
    cfg = current_app.config
    return (
        cfg.get("BROWSE_SORT_PARAM", SORT_PARAM),
        cfg.get("BROWSE_SORT_DIR_PARAM", SORT_DIR_PARAM),
    )


def current_sort_state() -> tuple[str, str]:
    """
    (sort column, sort dir) from the query string.
    Missing params -> "" (treated as "no sort" / ascending).
    """
    sort_param, dir_param = sort_params()
    return (
        (request.args.get(sort_param) or "").strip(),
        (request.args.get(dir_param) or "").strip(),
    )


def request_heading_cells(headings):
    sort_param, dir_param = sort_params()
    current_sort, current_dir = current_sort_state()
    return heading_cells(
        headings,
        current_sort=current_sort,
        current_dir=current_dir,
        query=request.args,
        sort_param=sort_param,
        sort_dir_param=dir_param,
    )


def request_browse_headings(headings):
    """Template global: browse_headings() fed from the current request."""
    sort_param, dir_param = sort_params()
    current_sort, current_dir = current_sort_state()
    return browse_headings(
        headings,
        current_sort=current_sort,
        current_dir=current_dir,
        query=request.args,
        sort_param=sort_param,
        sort_dir_param=dir_param,
    )


def request_output_format_list(contexts, as_list=True, delimiter=" | "):
    """Template global: output_format_list() for the current path/query."""
    return output_format_list(
        contexts,
        query=request.args,
        base_url=request.path,
        as_list=as_list,
        delimiter=delimiter,
    )


def request_page_url(page: int) -> str:
    """Current url with only the page number changed (sort/filters kept)."""
    params = copy_query(request.args)
    params["page"] = str(page)
    return default_url_builder(params)


def _env_per_page(default: int = 50) -> int:
    # not a positive number -> default (like LOG_LEVEL in app.py)
    raw = (os.getenv("BROWSE_PER_PAGE") or "").strip()
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def init_browse_helpers(app):
    """
    Config defaults + Jinja globals.
    Env vars win over the built-in names.
    """
    app.config.setdefault("BROWSE_SORT_PARAM", os.getenv("BROWSE_SORT_PARAM", SORT_PARAM))
    app.config.setdefault("BROWSE_SORT_DIR_PARAM", os.getenv("BROWSE_SORT_DIR_PARAM", SORT_DIR_PARAM))
    app.config.setdefault("BROWSE_PER_PAGE", _env_per_page())

    app.jinja_env.globals.update(
        browse_headings=request_browse_headings,
        heading_cells=request_heading_cells,
        output_format_list=request_output_format_list,
        page_url=request_page_url,
        label=label,
    )
