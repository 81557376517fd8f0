"""
Purpose: Map source file names to language labels and derive output names.
Unknown extensions are not an error; they resolve to GENERIC_LANGUAGE.
"""

from __future__ import annotations
from pathlib import Path

GENERIC_LANGUAGE = "Generic"
DOC_SUFFIX = "_documentation"

SUPPORTED_EXTENSIONS = {
    ".js": "JavaScript",
    ".ts": "TypeScript",
    ".py": "Python",
    ".java": "Java",
    ".cpp": "C++",
    ".c": "C",
    ".cs": "C#",
    ".go": "Go",
    ".rs": "Rust",
    ".php": "PHP",
    ".rb": "Ruby",
    ".swift": "Swift",
    ".kt": "Kotlin",
}


def extension_of(filename: str) -> str:
    return Path(filename).suffix.lower()


def is_supported(filename: str) -> bool:
    return extension_of(filename) in SUPPORTED_EXTENSIONS


def language_for_filename(filename: str) -> str:
    return SUPPORTED_EXTENSIONS.get(extension_of(filename), GENERIC_LANGUAGE)


def snippet_filename(language: str) -> str:
    """Pseudo file name for pasted code, e.g. 'Python' -> 'snippet.python'."""
    return f"snippet.{(language or '').lower()}"


def documentation_filename(filename: str) -> str:
    """'src/app.js' -> 'app_documentation.md' (directory and extension dropped)."""
    return f"{Path(filename).stem}{DOC_SUFFIX}.md"
