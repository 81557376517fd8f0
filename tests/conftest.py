"""
Shared fakes for controller tests.

- FakeLLM: scripted replies, records every call, can fail on the Nth call.
- FakeTerminal: scripted answers for ask()/read_until(), captures output.
"""

from __future__ import annotations

from typing import Optional

import pytest

from gpt_studio.core.errors import UnexpectedResponse


class FakeLLM:
    def __init__(self, replies=None, *, default: str = "reply", fail_on: Optional[int] = None):
        self.replies = list(replies or [])
        self.default = default
        self.fail_on = fail_on
        self.calls: list[dict] = []

    def chat(self, messages, settings, system=None):
        self.calls.append({"messages": messages, "settings": settings})
        if self.fail_on is not None and len(self.calls) == self.fail_on:
            raise UnexpectedResponse("boom", status_code=500)
        text = self.replies.pop(0) if self.replies else self.default
        return text, {"model": settings.model, "tokens_in": 10, "tokens_out": 5}

    def user_prompt(self, index: int) -> str:
        return self.calls[index]["messages"][-1]["content"]

    def system_prompt(self, index: int) -> str:
        return self.calls[index]["messages"][0]["content"]


class FakeTerminal:
    def __init__(self, answers=None, pasted=None):
        self.answers = list(answers or [])
        self.pasted = list(pasted or [])
        self.prompts: list[str] = []
        self.output: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError(prompt)
        return self.answers.pop(0).strip()

    def read_until(self, sentinel: str) -> list[str]:
        lines = []
        while self.pasted:
            line = self.pasted.pop(0)
            if line.strip() == sentinel:
                break
            lines.append(line)
        return lines

    def show(self, text: str = "") -> None:
        self.output.append(text)

    def banner(self, title: str, body: str, *, width: int = 80) -> None:
        self.output.extend([title, body])

    def framed(self, text: str, *, width: int = 60) -> None:
        self.output.append(text)

    def warn(self, text: str) -> None:
        self.warnings.append(text)

    def error(self, text: str) -> None:
        self.errors.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def make_llm():
    return FakeLLM


@pytest.fixture
def make_terminal():
    return FakeTerminal
