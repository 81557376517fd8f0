"""
Purpose: Transcript storage for one process run (in-memory only).
Ordered, append-only history of generated segments. Story continuation
prompts render from joined(); choice prompts use latest().

Testing: simple state tests.
"""


class TranscriptStore:
    def __init__(self) -> None:
        self._segments: list[str] = []

    def append(self, segment: str) -> None:
        self._segments.append(segment)

    def latest(self) -> str:
        if not self._segments:
            raise IndexError("Transcript is empty.")
        return self._segments[-1]

    def joined(self, separator: str = "\n\n") -> str:
        return separator.join(self._segments)

    def snapshot(self) -> list[str]:
        return self._segments[:]

    def __len__(self) -> int:
        return len(self._segments)
