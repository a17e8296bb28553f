"""
Output module.

Writes the ideas.json document.
"""

from notbuiltyet.output.writer import render_document, write_document

__all__ = [
    "render_document",
    "write_document",
]
