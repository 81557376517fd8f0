"""
Orchestration for one interactive story. Owns the StorySession (parameters,
transcript, state) so no story state lives at module level.

Flow: genre -> character/setting/theme -> opening chapter -> up to
max_chapters rounds of (choices -> reader pick -> continuation). Typing the
quit sentinel at a pick ends the story without another continuation call.
"""

from __future__ import annotations
import logging
from typing import Optional

from .. import config
from .interfaces import LLMClient, PromptFactory, Terminal
from .models import (
    Genre,
    RenderedPrompt,
    StoryParameters,
    StorySession,
    StoryState,
)
from .prompts import DefaultPromptFactory

logger = logging.getLogger(__name__)


def is_quit(answer: str) -> bool:
    return (answer or "").strip().lower() == config.QUIT_SENTINEL


class StoryController:
    def __init__(
        self,
        llm: LLMClient,
        *,
        model: Optional[str] = None,
        prompts: Optional[PromptFactory] = None,
        max_chapters: Optional[int] = None,
    ):
        self.llm: LLMClient = llm
        self.model: str = model or config.MODEL
        self.prompts: PromptFactory = prompts or DefaultPromptFactory()
        self.max_chapters: int = (
            config.MAX_CHAPTERS if max_chapters is None else max_chapters
        )
        self.session = StorySession()

        self.calls: int = 0
        self.tokens_in: int = 0
        self.tokens_out: int = 0
        self.model_used: Optional[str] = None

    def _complete(self, step: str, prompt: RenderedPrompt) -> str:
        settings = prompt.settings(self.model)
        logger.debug(
            "%s: model=%s temperature=%s max_tokens=%s",
            step,
            settings.model,
            settings.temperature,
            settings.max_tokens,
        )
        reply, meta = self.llm.chat(self.prompts.assemble(prompt=prompt), settings)

        self.calls += 1
        self.tokens_in += int(meta.get("tokens_in", 0))
        self.tokens_out += int(meta.get("tokens_out", 0))
        self.model_used = meta.get("model") or settings.model
        return reply

    def _params(self) -> StoryParameters:
        if self.session.parameters is None:
            raise RuntimeError("Story parameters have not been set.")
        return self.session.parameters

    def set_parameters(self, params: StoryParameters) -> None:
        """Parameters are fixed once the opening chapter exists."""
        if len(self.session.transcript):
            raise RuntimeError("Story parameters cannot change mid-story.")
        self.session.parameters = params

    def begin(self) -> str:
        """Generate the opening chapter and commit it to the transcript."""
        params = self._params()
        self.session.state = StoryState.GENERATING_OPENING
        prompt = self.prompts.story_beginning(params=params)
        opening = self._complete("story_beginning", prompt)
        self.session.transcript.append(opening)
        return opening

    def generate_choices(self) -> str:
        """Three numbered options for the latest segment."""
        params = self._params()
        self.session.state = StoryState.AWAITING_CHOICE
        prompt = self.prompts.choice_generation(
            params=params, segment=self.session.transcript.latest()
        )
        return self._complete("choice_generation", prompt)

    def continue_story(self, choice: str) -> str:
        """Render the next chapter from the whole transcript and append it."""
        params = self._params()
        self.session.state = StoryState.GENERATING_CONTINUATION
        prompt = self.prompts.story_continuation(
            params=params, choice=choice, transcript=self.session.transcript.joined()
        )
        segment = self._complete("story_continuation", prompt)
        self.session.transcript.append(segment)
        self.session.chapters_completed += 1
        return segment

    def usage_summary(self) -> str:
        return (
            f"{self.calls} completion call(s) to {self.model_used or self.model}, "
            f"{self.tokens_in} tokens in / {self.tokens_out} tokens out"
        )

    # ------------------------------------------------------------------
    # Interactive session
    # ------------------------------------------------------------------
    def show_genre_menu(self, terminal: Terminal) -> None:
        terminal.show("\n🎭 Creative Writing Studio - Choose Your Genre:")
        terminal.show("=" * 50)
        for number, genre in Genre.menu().items():
            terminal.show(f"{number}. {genre.value}")
        terminal.show("=" * 50)

    def collect(self, terminal: Terminal) -> StoryParameters:
        self.session.state = StoryState.AWAITING_GENRE
        self.show_genre_menu(terminal)
        genre = Genre.from_selection(terminal.ask("Select a genre (1-8): "))

        self.session.state = StoryState.AWAITING_CHARACTER_INFO
        character = terminal.ask("Enter your main character's name: ")
        setting = terminal.ask("Describe the setting/world: ")
        theme = terminal.ask("What theme should the story explore? ")

        params = StoryParameters(
            genre=genre, character=character, setting=setting, theme=theme
        )
        self.set_parameters(params)
        return params

    def run(self, terminal: Terminal) -> StorySession:
        params = self.collect(terminal)

        terminal.show(
            f"\n📖 Generating your {params.genre.value} story featuring "
            f"{params.character}...\n"
        )
        terminal.framed(self.begin())

        for chapter in range(1, self.max_chapters + 1):
            terminal.show(f"\n📚 Chapter {chapter} Choices:")
            terminal.show(self.generate_choices())

            choice = terminal.ask("\nEnter your choice (1, 2, or 3) or 'quit' to end: ")
            if is_quit(choice):
                self.session.ended_by_reader = True
                logger.info("Reader quit at chapter %d", chapter)
                terminal.show(
                    "\n📝 Thanks for the creative writing session! Your story will "
                    "continue in your imagination..."
                )
                break

            terminal.show("\n✍️  Continuing your story...\n")
            terminal.framed(self.continue_story(choice))

        self.session.state = StoryState.DONE
        terminal.show(
            "\n🎉 Story generation complete! Your creative collaboration has "
            "created a unique narrative."
        )
        return self.session
