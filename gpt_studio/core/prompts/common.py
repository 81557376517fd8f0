"""Shared prompt helpers used across prompt modules."""

from __future__ import annotations

from ..models import RenderedPrompt


def fenced(code: str, language: str) -> str:
    """Wrap code in a markdown fence tagged with the lower-cased language."""
    return f"```{(language or '').lower()}\n{code}\n```"


def numbered(items: list[str]) -> str:
    return "\n".join(f"{i}. {item}" for i, item in enumerate(items, start=1))


def bullets(items: list[str], indent: str = "") -> str:
    return "\n".join(f"{indent}- {item}" for item in items)


def assemble(*, prompt: RenderedPrompt) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": prompt.system},
        {"role": "user", "content": prompt.user},
    ]
