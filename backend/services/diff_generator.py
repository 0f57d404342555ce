"""
Diff Generator Service - Compare two titled contents for a diff window
"""

from __future__ import annotations

from difflib import SequenceMatcher, unified_diff

from models.diff import DiffHunk, DiffResult


class DiffGenerator:
    """Generate unified diffs and change hunks between two contents"""

    def generate_diff(
        self,
        left_content: str,
        right_content: str,
        left_title: str = "",
        right_title: str = "",
        context_lines: int = 3,
    ) -> DiffResult:
        """Generate structured diff from left and right content"""
        left_lines = _split_lines(left_content)
        right_lines = _split_lines(right_content)

        unified = list(
            unified_diff(
                left_lines,
                right_lines,
                fromfile=left_title or "left",
                tofile=right_title or "right",
                n=context_lines,
            )
        )

        return DiffResult(
            left_title=left_title,
            right_title=right_title,
            hunks=self._extract_hunks(left_lines, right_lines),
            unified_diff="".join(unified),
        )

    def _extract_hunks(
        self,
        left: list[str],
        right: list[str],
    ) -> list[DiffHunk]:
        """Extract individual change hunks from diff"""
        matcher = SequenceMatcher(None, left, right)
        hunks = []

        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                continue

            change_type = "add" if tag == "insert" else "delete" if tag == "delete" else "modify"

            hunks.append(
                DiffHunk(
                    start_line=i1 + 1,  # 1-indexed for IDE
                    end_line=i2,
                    original_content="".join(left[i1:i2]),
                    new_content="".join(right[j1:j2]),
                    change_type=change_type,
                )
            )

        return hunks


def _split_lines(content: str) -> list[str]:
    lines = content.splitlines(keepends=True)
    # Ensure last line has a newline for proper diff
    if lines and not lines[-1].endswith("\n"):
        lines[-1] += "\n"
    return lines
