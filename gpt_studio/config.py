"""
gpt-studio - Configuration
Endpoint, model, credentials and session constants.
"""

import os

from dotenv import load_dotenv

# Load environment variables from a local .env, if any
load_dotenv()

# =============================================================================
# REMOTE COMPLETION ENDPOINT
# =============================================================================
# Credential is not validated here; a missing token fails on the first call.
GITHUB_TOKEN = os.getenv("GITHUB_TOKEN", "")
ENDPOINT = os.getenv("GPT_STUDIO_ENDPOINT", "https://models.github.ai/inference")
MODEL = os.getenv("GPT_STUDIO_MODEL", "openai/gpt-5")

# =============================================================================
# LOGGING
# =============================================================================
LOG_LEVEL = os.getenv("GPT_STUDIO_LOG_LEVEL", "WARNING")

# =============================================================================
# SESSIONS
# =============================================================================
MAX_CHAPTERS = 5
SNIPPET_SENTINEL = "END"
QUIT_SENTINEL = "quit"


def build_llm_client():
    """Create the completion client from the configured endpoint and token."""
    from .core.services.llm_openai import OpenAILLMClient

    return OpenAILLMClient(GITHUB_TOKEN, base_url=ENDPOINT)
