"""Code review prompts: analysis, refactor, documentation."""

from __future__ import annotations
from textwrap import dedent

from ..models import CodeSubmission, RenderedPrompt
from .common import fenced, numbered

ANALYSIS_TEMPERATURE = 0.3
ANALYSIS_MAX_TOKENS = 1500
REFACTOR_TEMPERATURE = 0.2
REFACTOR_MAX_TOKENS = 1200
DOCS_TEMPERATURE = 0.4
DOCS_MAX_TOKENS = 1000

# Scored sections requested from the reviewer, in order.
_ANALYSIS_SECTIONS = [
    (
        "**SECURITY ANALYSIS** (Score: /10)",
        [
            "Identify potential security vulnerabilities",
            "Check for input validation issues",
            "Look for injection attack vectors",
            "Assess authentication/authorization concerns",
        ],
    ),
    (
        "**PERFORMANCE ANALYSIS** (Score: /10)",
        [
            "Identify performance bottlenecks",
            "Suggest optimization opportunities",
            "Check for inefficient algorithms or data structures",
            "Memory usage considerations",
        ],
    ),
    (
        "**CODE QUALITY** (Score: /10)",
        [
            "Readability and maintainability assessment",
            "Code organization and structure",
            "Naming conventions and clarity",
            "Code complexity analysis",
        ],
    ),
    (
        "**BEST PRACTICES** (Score: /10)",
        [
            "Language-specific best practices",
            "Design patterns usage",
            "Error handling implementation",
            "Code documentation quality",
        ],
    ),
    (
        "**IMPROVEMENT SUGGESTIONS**",
        [
            "Prioritized list of specific improvements",
            "Code refactoring recommendations",
            "Architecture suggestions if applicable",
        ],
    ),
]


def _analysis_checklist() -> str:
    blocks = []
    for i, (title, items) in enumerate(_ANALYSIS_SECTIONS, start=1):
        lines = [f"{i}. {title}"] + [f"   - {item}" for item in items]
        blocks.append("\n".join(lines))
    blocks.append(f"{len(_ANALYSIS_SECTIONS) + 1}. **OVERALL SCORE**: X/40 with summary")
    return "\n\n".join(blocks)


def build_analysis_system(language: str) -> str:
    return (
        "You are a senior software engineer and code review expert with "
        f"expertise in {language} and software best practices. Provide thorough, "
        "constructive, and actionable code reviews. Be specific about issues and "
        "provide concrete improvement suggestions."
    )


def code_analysis(*, submission: CodeSubmission) -> RenderedPrompt:
    language = submission.language
    user = (
        f"Perform a comprehensive code review and analysis of this {language} code:\n\n"
        f"FILENAME: {submission.filename}\n"
        "CODE:\n"
        f"{fenced(submission.code, language)}\n\n"
        "Provide a detailed analysis covering:\n\n"
        f"{_analysis_checklist()}\n\n"
        "Format your response clearly with markdown headers and provide specific "
        "line numbers when referencing issues."
    )
    return RenderedPrompt(
        system=build_analysis_system(language),
        user=user,
        temperature=ANALYSIS_TEMPERATURE,
        max_tokens=ANALYSIS_MAX_TOKENS,
    )


def code_refactor(*, submission: CodeSubmission, analysis: str) -> RenderedPrompt:
    language = submission.language
    deliverables = numbered(
        [
            "**REFACTORED CODE** - Complete improved version",
            "**KEY CHANGES MADE** - Bulleted list of specific improvements",
            "**RATIONALE** - Explanation of why each change improves the code",
        ]
    )
    user = (
        "Based on the following code analysis, provide a refactored version of the "
        "code that addresses the identified issues:\n\n"
        "ORIGINAL CODE:\n"
        f"{fenced(submission.code, language)}\n\n"
        "ANALYSIS RESULTS:\n"
        f"{analysis}\n\n"
        "Please provide:\n"
        f"{deliverables}\n\n"
        "Focus on the most impactful improvements that address security, "
        "performance, and maintainability concerns."
    )
    system = (
        "You are an expert software engineer specializing in code refactoring and "
        "optimization. Provide clean, efficient, and well-documented refactored code "
        f"that follows {language} best practices."
    )
    return RenderedPrompt(
        system=system,
        user=user,
        temperature=REFACTOR_TEMPERATURE,
        max_tokens=REFACTOR_MAX_TOKENS,
    )


def documentation(*, submission: CodeSubmission) -> RenderedPrompt:
    language = submission.language
    sections = numbered(
        [
            "**OVERVIEW** - Purpose and functionality summary",
            "**API DOCUMENTATION** - Functions, classes, and methods with parameters",
            "**USAGE EXAMPLES** - Code examples showing how to use the module",
            "**DEPENDENCIES** - Required libraries and imports",
            "**CONFIGURATION** - Setup and configuration requirements",
            "**TROUBLESHOOTING** - Common issues and solutions",
        ]
    )
    user = (
        f"Generate comprehensive technical documentation for this {language} code:\n\n"
        f"FILENAME: {submission.filename}\n"
        "CODE:\n"
        f"{fenced(submission.code, language)}\n\n"
        "Provide:\n"
        f"{sections}\n\n"
        "Format as professional technical documentation with clear sections and "
        "examples."
    )
    system = dedent(
        """\
        You are a technical writer and software documentation expert. Create clear,
        comprehensive, and user-friendly documentation that helps developers
        understand and use the code effectively."""
    )
    return RenderedPrompt(
        system=system,
        user=user,
        temperature=DOCS_TEMPERATURE,
        max_tokens=DOCS_MAX_TOKENS,
    )
