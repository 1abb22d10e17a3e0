"""Question Store: loads, appends and exposes the question bank."""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from trivia_game.models import DELIMITER, Question

logger = logging.getLogger(__name__)

DEFAULT_QUESTION_FILE = "questions.txt"


def parse_line(line: str) -> Optional[Question]:
    """Parse one ``prompt|answer|category`` record.

    The category takes the remainder of the line. Returns None when the line
    does not hold three non-empty fields.
    """
    fields = line.split(DELIMITER, 2)
    if len(fields) != 3:
        return None
    try:
        return Question(*fields)
    except ValueError:
        return None


def serialize(question: Question) -> str:
    return DELIMITER.join((question.prompt, question.answer, question.category)) + "\n"


class QuestionStore:
    """Owns the question bank and its backing file."""

    def __init__(self, path=DEFAULT_QUESTION_FILE):
        self.path = Path(path)
        self._questions: List[Question] = []

    def load(self) -> Tuple[Question, ...]:
        """Replace the bank with the contents of the file.

        An unreadable file leaves the bank empty; malformed lines are skipped.
        """
        self._questions = []
        try:
            with open(self.path, "r", encoding="utf-8", newline="") as f:
                for line_no, raw in enumerate(f, start=1):
                    line = raw.rstrip("\r\n")
                    if not line:
                        continue
                    question = parse_line(line)
                    if question is None:
                        logger.error(f"Invalid line in file {self.path}:{line_no}: {line}")
                        continue
                    self._questions.append(question)
        except OSError as e:
            logger.error(f"Error opening file: {self.path} ({e})")
            return self.snapshot()
        except UnicodeDecodeError as e:
            self._questions = []
            logger.error(f"Error reading file: {self.path} is not valid UTF-8 ({e})")
            return self.snapshot()

        logger.info(f"Loaded {len(self._questions)} questions from {self.path}")
        return self.snapshot()

    def append(self, question: Question) -> bool:
        """Append to the file, then to the bank. Returns False if the file write failed."""
        try:
            with open(self.path, "a", encoding="utf-8", newline="") as f:
                f.write(serialize(question))
        except OSError as e:
            logger.error(f"Unable to open {self.path} for appending ({e})")
            return False
        self._questions.append(question)
        logger.info(f"Appended question to {self.path}: {question.prompt}")
        return True

    def snapshot(self) -> Tuple[Question, ...]:
        return tuple(self._questions)

    def __len__(self) -> int:
        return len(self._questions)
