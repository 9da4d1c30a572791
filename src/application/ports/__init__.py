"""Application ports package."""

from .document_loader import DocumentLoaderPort
from .html_tree import HtmlNode, HtmlParserPort
from .snapshot_cache import SnapshotCachePort
from .text_generator import TextGeneratorPort

__all__ = [
    "DocumentLoaderPort",
    "HtmlNode",
    "HtmlParserPort",
    "SnapshotCachePort",
    "TextGeneratorPort",
]
