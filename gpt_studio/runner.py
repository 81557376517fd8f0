"""
Shared entry-point glue: logging setup, client construction and the mapping
from session outcomes to process exit codes.

Exit codes:
- 0   session finished, or ended early on unusable input
- 1   the completion service failed (UnexpectedResponse)
- 2   generated documentation could not be written to disk
- 130 the user cancelled at a prompt (Ctrl-C / EOF)
"""

from __future__ import annotations
import logging
from typing import Callable, Optional

from . import config
from .core.errors import DocumentationWriteError, InputError, UnexpectedResponse
from .core.interfaces import LLMClient, Terminal
from .logger import setup_logging
from .terminal import ConsoleTerminal

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_REMOTE_ERROR = 1
EXIT_WRITE_ERROR = 2
EXIT_CANCELLED = 130


def run_interactive(
    *,
    title: str,
    subtitle: str,
    make_controller: Callable[[LLMClient], object],
    llm: Optional[LLMClient] = None,
    terminal: Optional[Terminal] = None,
) -> int:
    setup_logging()
    terminal = terminal or ConsoleTerminal()
    llm = llm or config.build_llm_client()
    controller = make_controller(llm)

    terminal.show(title)
    terminal.show(f"{subtitle}\n")

    try:
        controller.run(terminal)
    except InputError as e:
        terminal.error(str(e))
        return EXIT_OK
    except UnexpectedResponse as e:
        logger.exception("Completion call failed")
        terminal.error(f"The completion service returned an error: {e}")
        return EXIT_REMOTE_ERROR
    except DocumentationWriteError as e:
        logger.exception("Saving documentation failed")
        terminal.error(str(e))
        return EXIT_WRITE_ERROR
    except (KeyboardInterrupt, EOFError):
        terminal.show("\nCancelled.")
        return EXIT_CANCELLED

    logger.info("Usage: %s", controller.usage_summary())
    terminal.show(f"\n{controller.usage_summary()}")
    return EXIT_OK
