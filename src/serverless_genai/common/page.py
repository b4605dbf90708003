"""Static page loading."""
from __future__ import annotations
from pathlib import Path

PAGE_PATH = Path(__file__).resolve().parent.parent / "static" / "index.html"

def load_page(path: str | Path = PAGE_PATH) -> bytes:
    """
    Load the browser page as raw bytes.

    Args:
        path: Path to the HTML file.
    """
    return Path(path).read_bytes()
