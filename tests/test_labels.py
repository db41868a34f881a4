from labels import label


def test_known_key(monkeypatch):
    monkeypatch.setenv("LABEL_LANG", "ja")
    assert label("items.name") == "品名"


def test_region_suffix_is_ignored(monkeypatch):
    monkeypatch.setenv("LABEL_LANG", "en-US")
    assert label("items.name") == "Name"


def test_unknown_lang_falls_back_to_en():
    assert label("items.code", lang="fr") == "Code"


def test_missing_key_uses_default_or_key():
    assert label("items.nope", "Fallback", lang="en") == "Fallback"
    assert label("items.nope", lang="en") == "items.nope"
