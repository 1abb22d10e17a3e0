"""Data model: questions, categories, leaderboard entries and session state."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

DELIMITER = "|"


class Category(Enum):
    """Fixed set of categories offered by the add-question flow."""

    HISTORY = "History"
    GEOGRAPHY = "Geography"
    SCIENCE = "Science"
    ENTERTAINMENT = "Entertainment"
    ART = "Art"

    @classmethod
    def from_choice(cls, choice: int) -> "Category":
        """Map a 1-based menu number to a category."""
        members = list(cls)
        if not 1 <= choice <= len(members):
            raise ValueError(f"Invalid category choice: {choice}")
        return members[choice - 1]


def _check_field(name: str, value: str):
    if DELIMITER in value or "\n" in value or "\r" in value:
        raise ValueError(f"{name} must not contain '{DELIMITER}' or a line break: {value!r}")


@dataclass(frozen=True)
class Question:
    """One bank record. Fields are non-empty and free of line breaks."""

    prompt: str
    answer: str
    category: str

    def __post_init__(self):
        for name in ("prompt", "answer", "category"):
            value = getattr(self, name)
            if not value:
                raise ValueError(f"{name} must not be empty")
            # category may hold '|': it is the rest of a bank line
            if name == "category":
                if "\n" in value or "\r" in value:
                    raise ValueError(f"category must not contain a line break: {value!r}")
            else:
                _check_field(name, value)


@dataclass
class ScoreEntry:
    """One leaderboard row."""

    score: int
    name: str

    def sort_key(self) -> Tuple[int, str]:
        return (-self.score, self.name)


@dataclass
class SessionState:
    """Transient state of one play-through."""

    current_score: int = 0
    question_index: int = 0
    correct_count: int = 0
    asked: List[Question] = field(default_factory=list)
