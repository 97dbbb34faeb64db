"""Whitespace clean-up for rendered markdown."""

from __future__ import annotations

from typing import List

_FENCE = "```"


class MarkdownLinter:
    """Normalises line endings and blank-line runs left behind by template blocks."""

    def lint(self, markdown: str) -> str:
        if not markdown.strip():
            return ""
        text = markdown.replace("\r\n", "\n").replace("\r", "\n")
        output: List[str] = []
        in_fence = False

        for raw in text.split("\n"):
            line = raw.rstrip()
            if line.lstrip().startswith(_FENCE):
                in_fence = not in_fence
            elif not in_fence and not line and (not output or output[-1] == ""):
                # collapse blank runs and drop leading blanks
                continue
            output.append(line)

        while output and output[-1] == "":
            output.pop()
        return "\n".join(output) + "\n"


__all__ = ["MarkdownLinter"]
