"""
Poem Viewer - Document Loader
Reads the poem files from disk into an ordered, read-only collection
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

import config
from core.logger import log_debug


@dataclass(frozen=True)
class Document:
    """
    A single loaded text file.

    Attributes:
        title: File name without its extension
        content: Full decoded text of the file
    """
    title: str
    content: str


def _display_title(path: Path) -> str:
    """
    Title for a document file, or an empty title when the file name is not
    valid UTF-8 (undecodable bytes come back from the OS as lone surrogates).
    """
    title = path.stem
    try:
        title.encode("utf-8")
    except UnicodeEncodeError:
        return ""
    return title


def load_documents(
    directory: Path,
    extension: str = config.DOCUMENT_EXTENSION
) -> Tuple[Document, ...]:
    """
    Load every file in a directory that carries the given extension.

    A directory that cannot be opened gives an empty collection, and files
    that cannot be read as UTF-8 text are left out. Neither is an error.

    Args:
        directory: Directory to scan (not recursive)
        extension: File suffix to include, compared case-sensitively

    Returns:
        Documents sorted by title (plain string order, uppercase first)
    """
    directory = Path(directory)

    try:
        entries = list(directory.iterdir())
    except OSError as e:
        log_debug(f"Cannot open document directory {str(directory)!r}: {e}")
        return ()

    documents: List[Document] = []
    for path in entries:
        if path.suffix != extension:
            continue

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            log_debug(f"Skipping unreadable document {path.name!r}: {e}")
            continue

        documents.append(Document(title=_display_title(path), content=content))

    documents.sort(key=lambda doc: doc.title)
    log_debug(f"Loaded {len(documents)} document(s) from {str(directory)!r}")
    return tuple(documents)
