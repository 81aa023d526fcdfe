from dataclasses import dataclass
from difflib import SequenceMatcher, unified_diff


@dataclass(frozen=True)
class DiffStats:
    inserted: int
    deleted: int
    replaced: int

    def to_summary(self) -> str:
        parts: list[str] = []
        if self.replaced:
            parts.append(f"{self.replaced} words changed")
        if self.inserted:
            parts.append(f"{self.inserted} added")
        if self.deleted:
            parts.append(f"{self.deleted} removed")
        return ", ".join(parts) if parts else "no changes"


def unified_line_diff(original: str, enhanced: str) -> str:
    """Line-level unified diff of the original and enhanced letter."""
    lines = unified_diff(
        original.splitlines(),
        enhanced.splitlines(),
        fromfile="original",
        tofile="enhanced",
        lineterm="",
    )
    return "\n".join(lines)


def word_diff_summary(original: str, enhanced: str) -> DiffStats:
    matcher = SequenceMatcher(None, original.split(), enhanced.split())
    inserted = deleted = replaced = 0
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "replace":
            replaced += max(i2 - i1, j2 - j1)
        elif tag == "insert":
            inserted += j2 - j1
        elif tag == "delete":
            deleted += i2 - i1
    return DiffStats(inserted=inserted, deleted=deleted, replaced=replaced)
