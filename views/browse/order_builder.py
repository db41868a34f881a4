import logging

log = logging.getLogger(__name__)


def normalize_sort_dir(value) -> str:
    # same rule as the browse headings: only "d" is descending
    if (value or "").strip() == "d":
        return "desc"
    return "asc"


def build_order_by(
    sort_key: str | None,
    sort_dir: str | None,
    sortable_map: dict,
    default_order_by: str,
    tie_breaker: str | None = None,
) -> str:
    """
    - sort_key empty/unknown -> return default_order_by EXACTLY
    - sortable_map maps request keys -> SQL fragments (safe whitelist)
    - tie_breaker is a key of sortable_map, appended asc for stable paging
    """
    key = (sort_key or "").strip()
    if not key:
        return default_order_by

    k1 = sortable_map.get(key)
    if not k1:
        log.debug("ignoring unknown sort key %r", key)
        return default_order_by

    parts = [f"{k1} {normalize_sort_dir(sort_dir)}"]

    # stable tie-breaker (skip if it is already the primary key)
    tb = sortable_map.get(tie_breaker or "")
    if tb and tb != k1:
        parts.append(f"{tb} asc")

    return ", ".join(parts)
