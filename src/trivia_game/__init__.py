"""Terminal trivia game: timed quiz, persistent question bank and leaderboard."""

__version__ = "0.1.0"
