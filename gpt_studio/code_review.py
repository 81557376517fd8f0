"""
Code review tool entry point.
Analyzes a source file or pasted snippet, then optionally refactors it and
writes documentation. All logic lives in CodeReviewController.
"""

import sys

from .core.review_controller import CodeReviewController
from .runner import run_interactive


def main() -> int:
    return run_interactive(
        title="🔍 Advanced Code Review & Analysis Tool",
        subtitle=(
            "Comprehensive code analysis with security, performance, and quality "
            "insights"
        ),
        make_controller=CodeReviewController,
    )


if __name__ == "__main__":
    sys.exit(main())
