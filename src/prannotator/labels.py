"""Mapping of changed-file extensions to pull request labels."""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

EXTENSION_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "md": "markdown",
        "js": "javascript",
        "yml": "yaml",
        "yaml": "yaml",
    }
)


def file_extension(filename: str) -> str | None:
    """Return the text after the last ``.`` in *filename*, or None without one.

    ``"a.b.js"`` gives ``"js"`` and ``"notes."`` gives ``""``. Directory
    components are not stripped, matching how GitHub reports paths.
    """
    if "." not in filename:
        return None
    return filename.rsplit(".", 1)[1]


def label_for(filename: str) -> str | None:
    # Exact, case-sensitive lookup: "INDEX.MD" gets no label.
    ext = file_extension(filename)
    if ext is None:
        return None
    return EXTENSION_LABELS.get(ext)
