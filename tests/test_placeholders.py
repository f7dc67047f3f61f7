"""Placeholder scanning, field extraction and row substitution."""

from labelcraft.utils.placeholders import (
    extract_fields,
    fill_items,
    fill_placeholders,
    scan_placeholders,
)


def _text(item_id: str, content: str) -> dict:
    return {"id": item_id, "type": "TEXT", "content": content, "x": 0, "y": 0, "width": 100, "height": 20}


# ── scan_placeholders ────────────────────────────────────────────────


def test_scan_finds_names_in_order():
    assert list(scan_placeholders("{{b}} and {{a}} then {{b}}")) == ["b", "a", "b"]


def test_scan_ignores_malformed_markers():
    text = "{{}} {{ spaced }} {{with-dash}} {{dot.name}} {{open {{ok_1}} close}}"
    assert list(scan_placeholders(text)) == ["ok_1"]


def test_scan_unterminated():
    assert list(scan_placeholders("Hello {{name")) == []
    assert list(scan_placeholders("")) == []


def test_scan_is_restartable():
    text = "{{x}}{{y}}"
    assert list(scan_placeholders(text)) == list(scan_placeholders(text)) == ["x", "y"]


# ── extract_fields ───────────────────────────────────────────────────


def test_extract_fields_first_occurrence_wins():
    items = [_text("a", "Hi {{user}}, {{user}} again"), _text("b", "{{date}}")]
    assert extract_fields(items) == [
        {"name": "user", "label": "user", "target_item_id": "a"},
        {"name": "date", "label": "date", "target_item_id": "b"},
    ]


def test_extract_fields_repeat_in_later_item_keeps_first_target():
    items = [_text("a", "{{sku}}"), _text("b", "{{price}} {{sku}}")]
    fields = extract_fields(items)
    assert [f["name"] for f in fields] == ["sku", "price"]
    assert fields[0]["target_item_id"] == "a"


def test_extract_fields_skips_non_text_items():
    items = [
        {"id": "q", "type": "QR", "content": "{{code}}", "x": 0, "y": 0, "width": 10, "height": 10},
        {"id": "i", "type": "IMAGE", "content": "{{logo}}", "x": 0, "y": 0, "width": 10, "height": 10},
        _text("t", ""),
    ]
    assert extract_fields(items) == []


def test_extract_fields_empty():
    assert extract_fields([]) == []
    assert extract_fields([_text("a", "plain text")]) == []


def test_extract_fields_idempotent():
    items = [_text("a", "{{one}} {{two}}"), _text("b", "{{three}} {{one}}")]
    assert extract_fields(items) == extract_fields(items)


# ── fill_placeholders / fill_items ───────────────────────────────────


def test_fill_missing_key_becomes_empty():
    assert fill_placeholders("Hi {{user}}, bye {{other}}", {"user": "Ana"}) == "Hi Ana, bye "


def test_fill_repeated_placeholders():
    assert fill_placeholders("{{a}}-{{a}}-{{b}}", {"a": "1", "b": "2"}) == "1-1-2"


def test_fill_without_placeholders_is_unchanged():
    assert fill_placeholders("no fields here", {"a": "1"}) == "no fields here"
    assert fill_placeholders("", {"a": "1"}) == ""


def test_fill_items_copies_non_text_items():
    qr = {"id": "q", "type": "QR", "content": "{{code}}", "x": 5, "y": 6, "width": 40, "height": 40}
    source = [_text("t", "SKU: {{sku}}"), qr]

    filled = fill_items(source, {"sku": "A1", "code": "ignored"})

    assert filled[0]["content"] == "SKU: A1"
    assert filled[1] == qr
    assert filled[1] is not qr

    filled[1]["x"] = 99
    filled[0]["content"] = "changed"
    assert qr["x"] == 5
    assert source[0]["content"] == "SKU: {{sku}}"
