"""Content connectors for snippets-app."""

from snippets_app.connectors.downloader import download_text, fetch_text

__all__ = ["download_text", "fetch_text"]
