"""
Canonical data shapes, shared truth for typing between layers.

Typical contents:
- LLMSettings (model, temperature, max_tokens).
- RenderedPrompt (system + user text with its sampling parameters).
- CodeSubmission / StoryParameters (session parameters, frozen once collected).
- ReviewSession / StorySession (what a controller owns for one run).

Testing: Trivial; mostly types. Genre.from_selection is the only logic here.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from .persistence.transcript_store import TranscriptStore


class Genre(str, Enum):
    SCIENCE_FICTION = "Science Fiction"
    FANTASY_ADVENTURE = "Fantasy Adventure"
    MYSTERY_THRILLER = "Mystery Thriller"
    HISTORICAL_FICTION = "Historical Fiction"
    ROMANTIC_COMEDY = "Romantic Comedy"
    HORROR = "Horror"
    CYBERPUNK = "Cyberpunk"
    MAGICAL_REALISM = "Magical Realism"

    @classmethod
    def menu(cls) -> dict[str, "Genre"]:
        """Menu numbers ("1".."8") mapped to genres, in display order."""
        return {str(i): g for i, g in enumerate(cls, start=1)}

    @classmethod
    def from_selection(cls, selection: str) -> "Genre":
        """Unrecognized selections fall back to Science Fiction."""
        return cls.menu().get((selection or "").strip(), cls.SCIENCE_FICTION)


class ReviewMode(str, Enum):
    FILE = "1"
    SNIPPET = "2"

    @classmethod
    def from_selection(cls, selection: str) -> "ReviewMode":
        return cls.FILE if (selection or "").strip() == cls.FILE.value else cls.SNIPPET


class StoryState(str, Enum):
    AWAITING_GENRE = "awaiting_genre"
    AWAITING_CHARACTER_INFO = "awaiting_character_info"
    GENERATING_OPENING = "generating_opening"
    AWAITING_CHOICE = "awaiting_choice"
    GENERATING_CONTINUATION = "generating_continuation"
    DONE = "done"


@dataclass
class LLMSettings:
    model: str
    temperature: float = 0.7
    max_tokens: int = 512


@dataclass(frozen=True)
class RenderedPrompt:
    system: str
    user: str
    temperature: float
    max_tokens: int

    def settings(self, model: str) -> LLMSettings:
        return LLMSettings(
            model=model, temperature=self.temperature, max_tokens=self.max_tokens
        )


@dataclass(frozen=True)
class CodeSubmission:
    code: str
    language: str
    filename: str


@dataclass(frozen=True)
class StoryParameters:
    genre: Genre
    character: str
    setting: str
    theme: str


@dataclass
class ReviewSession:
    submission: Optional[CodeSubmission] = None
    analysis: Optional[str] = None
    refactored: Optional[str] = None
    documentation: Optional[str] = None
    saved_path: Optional[Path] = None


@dataclass
class StorySession:
    parameters: Optional[StoryParameters] = None
    transcript: TranscriptStore = field(default_factory=TranscriptStore)
    state: StoryState = StoryState.AWAITING_GENRE
    chapters_completed: int = 0
    ended_by_reader: bool = False
