"""
Purpose: The single orchestration point for a code review session. Owns the
ReviewSession (submission and every generated text) and token counters.
Prevents the entry point from knowing how prompts/LLM/services work.

Key responsibilities:
- Collect a CodeSubmission from a file or a pasted snippet.
- Build each prompt through the PromptFactory.
- Call the completion service (via LLMClient interface), at most three times:
  analysis, then optional refactor, then optional documentation.
- Save documentation to <basename>_documentation.md on request.

Errors: InputError subclasses are raised before any network call.
UnexpectedResponse from the client propagates unchanged; no retries.

Testing: Pure unit tests with fakes: fake LLMClient and Terminal. Verify
call counts, prompt parameters and file output.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional, Union

from .. import config
from .errors import DocumentationWriteError, NoCodeProvided, SourceReadError
from .interfaces import LLMClient, PromptFactory, Terminal
from .models import CodeSubmission, RenderedPrompt, ReviewMode, ReviewSession
from .prompts import DefaultPromptFactory
from .services.languages import (
    GENERIC_LANGUAGE,
    SUPPORTED_EXTENSIONS,
    documentation_filename,
    extension_of,
    is_supported,
    language_for_filename,
    snippet_filename,
)

logger = logging.getLogger(__name__)

YES_ANSWERS = {"y", "yes"}


def confirmed(answer: str) -> bool:
    """Only an explicit y/yes counts as consent."""
    return (answer or "").strip().lower() in YES_ANSWERS


def load_file_submission(filename: str) -> CodeSubmission:
    """Read a source file; the language comes from its extension."""
    try:
        code = Path(filename).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        reason = getattr(e, "strerror", None) or str(e)
        raise SourceReadError(filename, reason) from e
    return CodeSubmission(
        code=code, language=language_for_filename(filename), filename=filename
    )


def snippet_submission(lines: list[str], language: str) -> CodeSubmission:
    return CodeSubmission(
        code="\n".join(lines),
        language=language,
        filename=snippet_filename(language),
    )


class CodeReviewController:
    def __init__(
        self,
        llm: LLMClient,
        *,
        model: Optional[str] = None,
        prompts: Optional[PromptFactory] = None,
    ):
        self.llm: LLMClient = llm
        self.model: str = model or config.MODEL
        self.prompts: PromptFactory = prompts or DefaultPromptFactory()
        self.session = ReviewSession()

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
        messages = self.prompts.assemble(prompt=prompt)
        reply, meta = self.llm.chat(messages, settings)

        self.calls += 1
        self.tokens_in += int(meta.get("tokens_in", 0))
        self.tokens_out += int(meta.get("tokens_out", 0))
        self.model_used = meta.get("model") or settings.model
        logger.debug(
            "%s: tokens_in=%s tokens_out=%s",
            step,
            meta.get("tokens_in", 0),
            meta.get("tokens_out", 0),
        )
        return reply

    def _require_submission(self) -> CodeSubmission:
        submission = self.session.submission
        if submission is None or not submission.code.strip():
            raise NoCodeProvided()
        return submission

    def submit(self, submission: CodeSubmission) -> CodeSubmission:
        """Commit the session's submission. Blank code ends the session."""
        if not submission.code.strip():
            raise NoCodeProvided()
        self.session.submission = submission
        return submission

    def analyze(self) -> str:
        submission = self._require_submission()
        prompt = self.prompts.code_analysis(submission=submission)
        self.session.analysis = self._complete("analysis", prompt)
        return self.session.analysis

    def refactor(self) -> str:
        submission = self._require_submission()
        if self.session.analysis is None:
            raise RuntimeError("Run analyze() before refactor().")
        prompt = self.prompts.code_refactor(
            submission=submission, analysis=self.session.analysis
        )
        self.session.refactored = self._complete("refactor", prompt)
        return self.session.refactored

    def document(self) -> str:
        submission = self._require_submission()
        prompt = self.prompts.documentation(submission=submission)
        self.session.documentation = self._complete("documentation", prompt)
        return self.session.documentation

    def save_documentation(self, directory: Union[str, Path, None] = None) -> Path:
        """Write the documentation text, unchanged, next to the working dir."""
        submission = self._require_submission()
        if self.session.documentation is None:
            raise RuntimeError("Run document() before save_documentation().")
        target = Path(directory or ".") / documentation_filename(submission.filename)
        try:
            target.write_text(self.session.documentation, encoding="utf-8")
        except OSError as e:
            reason = getattr(e, "strerror", None) or str(e)
            raise DocumentationWriteError(str(target), reason) from e
        self.session.saved_path = target
        logger.info("Documentation saved to %s", target)
        return target

    def usage_summary(self) -> str:
        return (
            f"{self.calls} completion call(s) to {self.model_used or self.model}, "
            f"{self.tokens_in} tokens in / {self.tokens_out} tokens out"
        )

    # ------------------------------------------------------------------
    # Interactive session
    # ------------------------------------------------------------------
    def show_supported_types(self, terminal: Terminal) -> None:
        terminal.show()
        terminal.show("🔍 Supported File Types for Code Analysis:")
        terminal.show("=" * 50)
        for ext, language in SUPPORTED_EXTENSIONS.items():
            terminal.show(f"{ext:<6} - {language}")
        terminal.show("=" * 50)

    def collect(self, terminal: Terminal) -> CodeSubmission:
        """Ask for a file or a pasted snippet and commit it to the session."""
        mode = ReviewMode.from_selection(
            terminal.ask(
                "\nChoose mode:\n"
                "1. Analyze file from current directory\n"
                "2. Analyze code snippet\n"
                "Enter choice (1 or 2): "
            )
        )

        if mode is ReviewMode.FILE:
            filename = terminal.ask("Enter filename to analyze: ")
            submission = load_file_submission(filename)
            if not is_supported(filename):
                ext = extension_of(filename) or "(no extension)"
                logger.warning("Unsupported extension %s; using %s", ext, GENERIC_LANGUAGE)
                terminal.warn(
                    f"Warning: {ext} files are not explicitly supported, "
                    "but I'll analyze as generic code."
                )
        else:
            terminal.show("\nPaste your code snippet (end with 'END' on a new line):")
            lines = terminal.read_until(config.SNIPPET_SENTINEL)
            language = terminal.ask("Enter language (e.g., JavaScript, Python, Java): ")
            submission = snippet_submission(lines, language)

        return self.submit(submission)

    def run(self, terminal: Terminal) -> ReviewSession:
        """
        Full review flow: collect -> analyze -> (refactor) -> (document -> save).
        Raises InputError before any call when the input is unusable.
        """
        self.show_supported_types(terminal)
        submission = self.collect(terminal)

        terminal.show(
            f"\n🔄 Analyzing {submission.language} code "
            f"({len(submission.code)} characters)...\n"
        )
        terminal.show("📊 Running comprehensive code analysis...")
        analysis = self.analyze()
        terminal.banner("📋 CODE ANALYSIS RESULTS", analysis)

        if confirmed(terminal.ask("\n🛠️  Would you like to see refactored code? (y/n): ")):
            terminal.show("\n🔄 Generating refactored code...")
            refactored = self.refactor()
            terminal.banner("🚀 REFACTORED CODE & IMPROVEMENTS", refactored)

        if confirmed(terminal.ask("\n📚 Would you like to generate documentation? (y/n): ")):
            terminal.show("\n🔄 Generating documentation...")
            docs = self.document()
            terminal.banner("📖 GENERATED DOCUMENTATION", docs)

            if confirmed(terminal.ask("\n💾 Save documentation to file? (y/n): ")):
                path = self.save_documentation()
                terminal.show(f"✅ Documentation saved to: {path.name}")

        terminal.show(
            "\n🎉 Code review complete! Your code has been analyzed for security, "
            "performance, and quality improvements."
        )
        return self.session
