"""
Abstractions for pluggable services. Inversion of control: controllers depend
on interfaces, not concrete services. Enables fakes in tests and swapping the
transport without touching the session loops.

Common protocols:
- LLMClient.chat(messages, settings, system) -> (reply, meta)
- PromptFactory.<operation>(...) -> RenderedPrompt & assemble(...) -> messages
- Terminal.ask(prompt) -> str & show(...)

Testing: Use simple fake implementations to test the controllers without
network calls or a real terminal.
"""

from __future__ import annotations
from typing import Optional, Protocol

from .models import (
    CodeSubmission,
    LLMSettings,
    RenderedPrompt,
    StoryParameters,
)


class LLMClient(Protocol):
    def chat(
        self,
        messages: list[dict[str, str]],
        settings: LLMSettings,
        system: Optional[str] = None,
    ) -> tuple[str, dict]: ...


class PromptFactory(Protocol):
    # CODE REVIEW
    def code_analysis(self, *, submission: CodeSubmission) -> RenderedPrompt: ...

    def code_refactor(
        self, *, submission: CodeSubmission, analysis: str
    ) -> RenderedPrompt: ...

    def documentation(self, *, submission: CodeSubmission) -> RenderedPrompt: ...

    # STORY
    def story_beginning(self, *, params: StoryParameters) -> RenderedPrompt: ...

    def story_continuation(
        self, *, params: StoryParameters, choice: str, transcript: str
    ) -> RenderedPrompt: ...

    def choice_generation(
        self, *, params: StoryParameters, segment: str
    ) -> RenderedPrompt: ...

    def assemble(self, *, prompt: RenderedPrompt) -> list[dict[str, str]]: ...


class Terminal(Protocol):
    def ask(self, prompt: str) -> str: ...

    def read_until(self, sentinel: str) -> list[str]: ...

    def show(self, text: str = "") -> None: ...

    def banner(self, title: str, body: str, *, width: int = 80) -> None: ...

    def framed(self, text: str, *, width: int = 60) -> None: ...

    def warn(self, text: str) -> None: ...

    def error(self, text: str) -> None: ...
