"""
JSON writer for the idea board.

Serializes an IdeasDocument to ideas.json: 2-space indentation, non-ASCII
characters kept as-is, trailing newline. The file is always overwritten.
"""

import json
from pathlib import Path
from typing import Union

from notbuiltyet.models.idea import IdeasDocument


def render_document(document: IdeasDocument) -> str:
    """
    Render the document as pretty-printed JSON.

    Args:
        document: Stats and ranked ideas.

    Returns:
        JSON text ending in a newline.
    """
    return json.dumps(document.to_dict(), indent=2, ensure_ascii=False) + "\n"


def write_document(document: IdeasDocument, path: Union[str, Path]) -> Path:
    """
    Write the document to a file, replacing any existing content.

    Args:
        document: Stats and ranked ideas.
        path: Output file path (relative paths resolve against the cwd).

    Returns:
        Path to written file.
    """
    content = render_document(document)

    filepath = Path(path)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    filepath.write_text(content, encoding="utf-8")

    print(f"[output] Wrote {len(document.ideas)} ideas to {filepath}")
    return filepath
