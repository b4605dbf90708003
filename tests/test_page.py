from __future__ import annotations

from serverless_genai.common.page import load_page


def test_packaged_page_drives_generate_endpoint() -> None:
    page = load_page().decode("utf-8")
    assert "Serverless AI Content Generator" in page
    assert "/api/generate" in page
    assert 'id="loading"' in page


def test_load_page_reads_given_path(tmp_path) -> None:
    p = tmp_path / "page.html"
    p.write_bytes(b"<p>hi</p>")
    assert load_page(p) == b"<p>hi</p>"
