from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

LABEL_DIR = Path(__file__).resolve().parent / "labels"
DEFAULT_LANG = "en"


def _current_lang() -> str:
    """
    Priority:
      1) LABEL_LANG (explicit)
      2) APP_LANG
      3) default: en
    """
    lang = (os.environ.get("LABEL_LANG") or os.environ.get("APP_LANG") or DEFAULT_LANG).strip().lower()
    # en-US / ja_JP -> en / ja
    return lang.replace("_", "-").split("-")[0] or DEFAULT_LANG


@lru_cache(maxsize=32)
def _load_labels(lang: str) -> dict[str, str]:
    path = LABEL_DIR / f"{lang}.json"
    if not path.exists():
        path = LABEL_DIR / f"{DEFAULT_LANG}.json"
    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.warning("cannot load labels from %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        return {}
    # heading labels are plain strings
    return {str(k): str(v) for k, v in data.items()}


def label(key: str, default: str | None = None, lang: str | None = None) -> str:
    """
    Heading / page label lookup:
      - key missing -> default if given, else the key itself
      - never raises, a bad label file only drops translations
    """
    labels = _load_labels((lang or _current_lang()).strip().lower())
    if key in labels:
        return labels[key]
    return key if default is None else default
