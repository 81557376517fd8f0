"""gpt-studio: interactive code review and storytelling demos over a hosted chat model."""

__version__ = "0.1.0"
