"""
Interactive story tool entry point.
Pick a genre and a hero, then steer the plot one chapter at a time.
"""

import sys

from .core.story_controller import StoryController
from .runner import run_interactive


def main() -> int:
    return run_interactive(
        title="🌟 Welcome to the Interactive Story Generator!",
        subtitle="Create unique stories that adapt to your choices and preferences.",
        make_controller=StoryController,
    )


if __name__ == "__main__":
    sys.exit(main())
