from __future__ import annotations

import logging

from flask import abort, current_app, jsonify, render_template, request

from labels import label

from . import browse_bp, get_db
from .helpers import current_sort_state
from .order_builder import build_order_by

log = logging.getLogger(__name__)

# request key -> SQL fragment (whitelist)
SORTABLE_COLUMNS = {
    "code": "i.code",
    "name": "i.name",
    "unit": "i.unit",
    "supplier": "s.name",
    "updated": "i.updated_at",
}

DEFAULT_ORDER_BY = "i.code, i.name"

OUTPUT_FORMATS = ("json",)

PER_PAGE_CHOICES = (25, 50, 100, 200)


def item_headings():
    """(label, column) pairs; empty column -> not sortable."""
    return [
        (label("items.code", "Code"), "code"),
        (label("items.name", "Name"), "name"),
        (label("items.unit", "Unit"), "unit"),
        (label("items.supplier", "Supplier"), "supplier"),
        (label("items.updated", "Updated"), "updated"),
        (label("items.notes", "Notes"), ""),
    ]


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        abort(400)


@browse_bp.route("/items", methods=["GET"])
def items_browse():
    db = get_db()

    # -------------------------
    # Paging / output (GET params)
    # -------------------------
    default_per_page = current_app.config.get("BROWSE_PER_PAGE", 50)
    page = _int_arg("page", 1)
    per_page = _int_arg("per_page", default_per_page)
    if per_page != default_per_page and per_page not in PER_PAGE_CHOICES:
        per_page = default_per_page
    if page < 1:
        page = 1

    output = (request.args.get("output") or "").strip()
    if output and output not in OUTPUT_FORMATS:
        log.warning("unknown output format %r", output)
        abort(400)

    # total first: page past the end -> last page (keeps OFFSET in range)
    total = db.execute(
        "SELECT COUNT(*) AS cnt FROM mst_items i WHERE i.is_active = 1"
    ).fetchone()["cnt"]
    total_pages = max(1, (total + per_page - 1) // per_page)
    page = min(page, total_pages)
    offset = (page - 1) * per_page

    # -------------------------
    # Sort
    # -------------------------
    sort_key, sort_dir = current_sort_state()
    order_by = build_order_by(
        sort_key, sort_dir, SORTABLE_COLUMNS, DEFAULT_ORDER_BY, tie_breaker="code"
    )

    sql = f"""
    SELECT
        i.id,
        i.code,
        i.name,
        i.unit,
        s.name AS supplier_name,
        i.updated_at,
        i.notes
    FROM mst_items i
    LEFT JOIN suppliers s ON i.supplier_id = s.id
    WHERE i.is_active = 1
    ORDER BY {order_by}
    LIMIT %s OFFSET %s
    """
    rows = db.execute(sql, [per_page, offset]).fetchall()

    if output == "json":
        return jsonify({
            "items": [dict(r) for r in rows],
            "page": page,
            "per_page": per_page,
            "total": total,
            "total_pages": total_pages,
        })

    return render_template(
        "items/browse.html",
        headings=item_headings(),
        output_formats=OUTPUT_FORMATS,
        rows=rows,
        page=page,
        per_page=per_page,
        total=total,
        total_pages=total_pages,
    )
