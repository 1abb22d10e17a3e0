"""Quiz Session: one timed play-through of up to MAX_QUESTIONS questions."""

import logging
from typing import Callable

from trivia_game import scorer
from trivia_game.clock import Clock, elapsed_seconds
from trivia_game.models import Question, SessionState

logger = logging.getLogger(__name__)

MAX_QUESTIONS = 20
TIME_LIMIT_SECONDS = 15


class QuizSession:
    """
    Orchestrates a single game: shuffles the bank, asks the questions, times
    each answer, accumulates the score and hands it to the leaderboard.
    """

    def __init__(
        self,
        question_store,
        scoreboard,
        clock: Clock,
        random_source,
        read_line: Callable[[str], str],
        write_line: Callable[[str], None],
    ):
        self.store = question_store
        self.scoreboard = scoreboard
        self.clock = clock
        self.random = random_source
        self.read_line = read_line
        self.write_line = write_line

    def ask(self, question: Question, state: SessionState, number: int, total: int):
        """Ask one question and fold the result into ``state``."""
        self.write_line("")
        self.write_line(f"Current Score: {state.current_score}")
        self.write_line("")
        self.write_line(f"Question {number} of {total}")
        self.write_line(f"Category: {question.category}")
        self.write_line(f"Question: {question.prompt}")

        start = self.clock.now()
        user_answer = self.read_line("Your answer: ")
        elapsed = elapsed_seconds(start, self.clock.now())

        correct = scorer.check_answer(user_answer, question.answer)
        points = scorer.score(correct, elapsed, TIME_LIMIT_SECONDS)
        if correct:
            self.write_line("Correct!")
            state.correct_count += 1
            state.current_score += points
        else:
            self.write_line("Incorrect!")
            self.write_line(f"The correct answer is: {question.answer}")

        if elapsed >= TIME_LIMIT_SECONDS:
            self.write_line("Out of time! No points awarded for this question.")

        state.asked.append(question)
        state.question_index += 1
        logger.debug(
            f"Answered {number}/{total}: correct={correct}, elapsed={elapsed:.2f}s, points={points}"
        )

    def play(self) -> SessionState:
        """Run the full session and submit the final score."""
        state = SessionState()
        self.write_line("Welcome to the Quiz Game!")

        questions = list(self.store.snapshot())
        if not questions:
            self.write_line("There are no questions in the bank. Add some from the main menu.")
        self.random.shuffle(questions)
        total = min(MAX_QUESTIONS, len(questions))

        for number, question in enumerate(questions[:total], start=1):
            self.ask(question, state, number, total)

        self.write_line("")
        self.write_line(f"Game Over! Final Score: {state.current_score}")
        if total:
            self.write_line(f"You answered {state.correct_count} of {total} questions correctly.")
        self.write_line("")
        logger.info(f"Session complete: score={state.current_score}, asked={total}")

        self.scoreboard.submit(state.current_score)
        return state
