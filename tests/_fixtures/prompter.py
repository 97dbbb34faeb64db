"""Scripted stand-in for the terminal prompt capability."""

from __future__ import annotations

from collections import deque
from typing import Iterable, List, Optional, Tuple, Union

Answer = Union[str, bool, None]


class ScriptedPrompter:
    """Replays queued answers in order and records every question asked.

    ``None`` in the script, or an exhausted script, simulates end of input.
    A ``str`` answer to ``ask`` of ``""`` is returned as the initial value, the
    same way the console prompter treats an empty reply.
    """

    def __init__(self, answers: Iterable[Answer] = ()) -> None:
        self._answers = deque(answers)
        self.asked: List[Tuple[str, str, object]] = []

    def ask(self, question: str, initial: str = "") -> Optional[str]:
        self.asked.append(("ask", question, initial))
        answer = self._next()
        if answer is None:
            return None
        if not isinstance(answer, str):
            raise AssertionError(f"Expected a text answer for {question!r}, got {answer!r}")
        return answer if answer else initial

    def confirm(self, question: str, default: bool) -> Optional[bool]:
        self.asked.append(("confirm", question, default))
        answer = self._next()
        if answer is None:
            return None
        if not isinstance(answer, bool):
            raise AssertionError(f"Expected a yes/no answer for {question!r}, got {answer!r}")
        return answer

    @property
    def remaining(self) -> int:
        return len(self._answers)

    def questions(self) -> List[str]:
        return [question for _, question, _ in self.asked]

    def _next(self) -> Answer:
        if not self._answers:
            return None
        return self._answers.popleft()


__all__ = ["ScriptedPrompter"]
