"""Loading query documents from disk.

``.toml`` files are parsed with tomllib, anything else as JSON.
"""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result

__all__ = ["DocumentError", "load_document"]

TOML_SUFFIXES = frozenset({".toml"})


@dataclass(frozen=True, slots=True)
class DocumentError:
    """Error when a document cannot be read or parsed."""

    message: str
    path: Path


def _decode(path: Path, text: str) -> object:
    if path.suffix.lower() in TOML_SUFFIXES:
        return tomllib.loads(text)
    return json.loads(text)


def load_document(path: Path) -> Result[object, DocumentError]:
    """Read and parse a JSON or TOML document.

    Returns:
        Ok(data) with plain dicts/lists/scalars, Err(DocumentError) on failure
    """
    try:
        text = path.read_bytes().decode("utf-8")
        return Ok(_decode(path, text))
    except FileNotFoundError:
        return Err(DocumentError(f"Document not found: {path}", path))
    except PermissionError:
        return Err(DocumentError(f"Permission denied reading: {path}", path))
    except IsADirectoryError:
        return Err(DocumentError(f"Document path is a directory: {path}", path))
    except UnicodeDecodeError as e:
        return Err(DocumentError(f"Document is not valid UTF-8: {e}", path))
    except tomllib.TOMLDecodeError as e:
        return Err(DocumentError(f"Invalid TOML syntax: {e}", path))
    except json.JSONDecodeError as e:
        return Err(DocumentError(f"Invalid JSON syntax: {e}", path))
