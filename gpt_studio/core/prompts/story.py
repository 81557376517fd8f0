"""Interactive story prompts (opening chapter, continuation, choice points)."""

from __future__ import annotations
from textwrap import dedent

from ..models import RenderedPrompt, StoryParameters
from .common import bullets

BEGINNING_TEMPERATURE = 0.9
BEGINNING_MAX_TOKENS = 500
CONTINUATION_TEMPERATURE = 0.8
CONTINUATION_MAX_TOKENS = 400
CHOICES_TEMPERATURE = 0.7
CHOICES_MAX_TOKENS = 200

CHOICE_COUNT = 3


def story_beginning(*, params: StoryParameters) -> RenderedPrompt:
    genre = params.genre.value
    requirements = bullets(
        [
            "Write approximately 300 words",
            "Establish compelling characters and atmosphere",
            "End with a dramatic moment or choice point",
            "Use vivid, immersive descriptions",
            f"Match the tone and style typical of {genre}",
            "Leave the story open for continuation based on reader choices",
        ]
    )
    user = (
        f"Create the opening chapter of a {genre} story featuring a character "
        f"named {params.character}.\n"
        f"Setting: {params.setting}\n"
        f"Theme: {params.theme}\n\n"
        "Requirements:\n"
        f"{requirements}"
    )
    system = (
        f"You are a master storyteller and creative writer specializing in {genre}. "
        "Create engaging, well-paced narratives with rich character development and "
        "immersive world-building. Always end story segments with clear choice "
        "points for the reader."
    )
    return RenderedPrompt(
        system=system,
        user=user,
        temperature=BEGINNING_TEMPERATURE,
        max_tokens=BEGINNING_MAX_TOKENS,
    )


def story_continuation(
    *, params: StoryParameters, choice: str, transcript: str
) -> RenderedPrompt:
    genre = params.genre.value
    requirements = bullets(
        [
            "Continue naturally from the previous segment",
            "Incorporate the reader's choice meaningfully",
            "Maintain character consistency and story tone",
            "Write approximately 250 words",
            "End with another choice point or dramatic moment",
            "Advance the plot significantly",
        ]
    )
    user = (
        f'Continue the {genre} story based on the reader\'s choice: "{choice}"\n\n'
        "Previous story context:\n"
        f"{transcript}\n\n"
        "Requirements:\n"
        f"{requirements}"
    )
    system = (
        f"You are continuing a {genre} story. Maintain narrative consistency, "
        "character development, and genre conventions. Always provide engaging "
        "choices for the reader to influence the story direction."
    )
    return RenderedPrompt(
        system=system,
        user=user,
        temperature=CONTINUATION_TEMPERATURE,
        max_tokens=CONTINUATION_MAX_TOKENS,
    )


def choice_generation(*, params: StoryParameters, segment: str) -> RenderedPrompt:
    criteria = bullets(
        [
            "Lead to different story directions",
            "Are all plausible within the story context",
            "Offer varying levels of risk/adventure",
            f"Maintain the {params.genre.value} genre conventions",
        ]
    )
    fmt = "\n".join(f"{i}. [Choice option]" for i in range(1, CHOICE_COUNT + 1))
    user = (
        f"Based on this story segment, generate {CHOICE_COUNT} distinct and "
        "interesting choice options for the reader:\n\n"
        "Story segment:\n"
        f"{segment}\n\n"
        f"Provide exactly {CHOICE_COUNT} choices that:\n"
        f"{criteria}\n\n"
        "Format as:\n"
        f"{fmt}"
    )
    system = dedent(
        """\
        You are a story consultant creating meaningful choice points for interactive
        narratives. Focus on choices that create compelling branching paths."""
    )
    return RenderedPrompt(
        system=system,
        user=user,
        temperature=CHOICES_TEMPERATURE,
        max_tokens=CHOICES_MAX_TOKENS,
    )
