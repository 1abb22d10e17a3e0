"""Score Board: top-10 leaderboard persisted in a flat text file."""

import contextlib
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Callable, List

from trivia_game.models import ScoreEntry

logger = logging.getLogger(__name__)

DEFAULT_SCORE_FILE = "high_scores.txt"
MAX_ENTRIES = 10
DEFAULT_NAME = "Player"

_LINE_RE = re.compile(r"\s*(\d+)\s*(.*)")


def parse_scores(lines) -> List[ScoreEntry]:
    """Parse ``<score> <name>`` lines in file order.

    Blank lines are skipped. The first line that does not start with an
    integer ends the read; everything after it is ignored.
    """
    entries = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        match = _LINE_RE.match(line)
        if match is None:
            logger.warning(f"Stopped reading scores at unparseable line: {line!r}")
            break
        entries.append(ScoreEntry(int(match.group(1)), match.group(2) or DEFAULT_NAME))
    return entries


def sort_entries(entries: List[ScoreEntry]) -> List[ScoreEntry]:
    """Score descending, then name ascending."""
    return sorted(entries, key=ScoreEntry.sort_key)


def format_entry(entry: ScoreEntry) -> str:
    return f"{entry.score} {entry.name}\n"


class ScoreBoard:
    """Loads, updates and persists the leaderboard.

    Nothing is cached between calls: every operation re-reads the file.
    """

    def __init__(self, path=DEFAULT_SCORE_FILE,
                 read_line: Callable[[str], str] = input,
                 write_line: Callable[[str], None] = print):
        self.path = Path(path)
        self.read_line = read_line
        self.write_line = write_line

    def load(self) -> List[ScoreEntry]:
        """Read the leaderboard.

        Raises OSError if the file cannot be opened and UnicodeDecodeError if it
        is not valid UTF-8.
        """
        with open(self.path, "r", encoding="utf-8", newline="") as f:
            return parse_scores(f)

    def _load_for_update(self) -> List[ScoreEntry]:
        try:
            return self.load()
        except FileNotFoundError:
            logger.info(f"No leaderboard at {self.path}; starting a new one")
            return []

    def submit(self, score: int) -> List[ScoreEntry]:
        """Insert ``score``, ask for a name if it ranks, keep the top 10 and save.

        Returns the board as persisted (or as it would have been, if the save
        failed).
        """
        if score < 0:
            raise ValueError(f"Score must be non-negative, got {score}")
        try:
            entries = self._load_for_update()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Unable to read high scores file {self.path} ({e}); score not recorded")
            return []

        tentative = ScoreEntry(score, DEFAULT_NAME)
        entries = sort_entries(entries + [tentative])
        position = next(i for i, entry in enumerate(entries) if entry is tentative)

        if position < MAX_ENTRIES:
            self.write_line("Congratulations! You made it to the leaderboard.")
            name = self.read_line("Enter your name: ").strip()
            if name:
                tentative.name = name
            entries = sort_entries(entries)
            # a player who was asked for a name stays on the board
            while len(entries) > MAX_ENTRIES:
                evict = max(i for i, entry in enumerate(entries) if entry is not tentative)
                del entries[evict]
        else:
            logger.debug(f"Score {score} ranks {position + 1}; not on the leaderboard")
            entries = entries[:MAX_ENTRIES]

        self.save(entries)
        return entries

    def save(self, entries: List[ScoreEntry]) -> bool:
        """Write to a temporary sibling file, then replace the original."""
        directory = self.path.parent
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w", encoding="utf-8", newline="", dir=directory,
                prefix=f".{self.path.name}.", suffix=".tmp", delete=False,
            ) as tmp:
                tmp_path = tmp.name
                for entry in entries:
                    tmp.write(format_entry(entry))
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Unable to write high scores file {self.path} ({e})")
            if tmp_path is not None:
                with contextlib.suppress(OSError):
                    os.remove(tmp_path)
            return False
        logger.info(f"Saved {len(entries)} high scores to {self.path}")
        return True

    def display(self) -> bool:
        """Print the leaderboard in rank order. Returns False if it could not be read."""
        try:
            entries = self.load()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Unable to open high scores file {self.path} ({e})")
            return False

        self.write_line("")
        self.write_line("High Scores:")
        for rank, entry in enumerate(entries, start=1):
            self.write_line(f"{rank}. {entry.name}: {entry.score} points")
        return True
