"""Facade that exposes every template through one DefaultPromptFactory API."""

from __future__ import annotations

from ..models import CodeSubmission, RenderedPrompt, StoryParameters
from . import review as _review
from . import story as _story
from .common import assemble as _assemble


class DefaultPromptFactory:
    # CODE REVIEW
    def code_analysis(self, *, submission: CodeSubmission) -> RenderedPrompt:
        return _review.code_analysis(submission=submission)

    def code_refactor(
        self, *, submission: CodeSubmission, analysis: str
    ) -> RenderedPrompt:
        return _review.code_refactor(submission=submission, analysis=analysis)

    def documentation(self, *, submission: CodeSubmission) -> RenderedPrompt:
        return _review.documentation(submission=submission)

    # STORY
    def story_beginning(self, *, params: StoryParameters) -> RenderedPrompt:
        return _story.story_beginning(params=params)

    def story_continuation(
        self, *, params: StoryParameters, choice: str, transcript: str
    ) -> RenderedPrompt:
        return _story.story_continuation(
            params=params, choice=choice, transcript=transcript
        )

    def choice_generation(
        self, *, params: StoryParameters, segment: str
    ) -> RenderedPrompt:
        return _story.choice_generation(params=params, segment=segment)

    def assemble(self, *, prompt: RenderedPrompt) -> list[dict[str, str]]:
        return _assemble(prompt=prompt)
