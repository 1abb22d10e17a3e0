"""Menu: top-level game loop, console IO and command-line entry point."""

import argparse
import logging
import sys
from typing import Callable, Optional

from trivia_game.clock import MonotonicClock
from trivia_game.config import load_config
from trivia_game.models import Category, Question
from trivia_game.question_store import QuestionStore
from trivia_game.quiz_session import MAX_QUESTIONS, TIME_LIMIT_SECONDS, QuizSession
from trivia_game.random_source import RandomSource
from trivia_game.scoreboard import ScoreBoard

logger = logging.getLogger(__name__)

PLAY, ADD, HIGH_SCORES, RULES, QUIT = range(1, 6)

MENU_TEXT = (
    "\nWhat Would You Like to Do?\n"
    "1. Play the Game\n"
    "2. Add Questions\n"
    "3. View High Scores\n"
    "4. Game Rules\n"
    "5. Quit"
)

RULES_TEXT = (
    "\nWelcome to the Quiz Game!\n\n"
    "Game Rules:\n"
    f"1. You will be asked a series of {MAX_QUESTIONS} random questions.\n"
    "2. Each correct answer earns you points.\n"
    "3. The faster you answer, the more points you get.\n"
    f"4. There is a {TIME_LIMIT_SECONDS} second time limit for each question.\n"
    "5. If you don't answer in time, no points are awarded.\n"
    "6. Capitalization doesn't matter for answers.\n"
    "7. After the game, your score may be added to the leaderboard.\n"
    "8. To add new questions to the game, choose option 2 and follow the instructions.\n"
    "9. Ensure correct spelling for new questions.\n"
)


class ConsoleIO:
    """Line-oriented stdin/stdout."""

    def read_line(self, prompt: str = "") -> str:
        return input(prompt)

    def write_line(self, text: str = ""):
        print(text)


class Menu:
    """Reads menu choices and dispatches to the game components."""

    def __init__(
        self,
        question_store: QuestionStore,
        scoreboard: ScoreBoard,
        session: QuizSession,
        read_line: Callable[[str], str],
        write_line: Callable[[str], None],
    ):
        self.store = question_store
        self.scoreboard = scoreboard
        self.session = session
        self.read_line = read_line
        self.write_line = write_line

    def read_choice(self) -> int:
        """Read an integer, re-prompting until the input is numeric."""
        text = self.read_line("Enter your choice: ")
        while True:
            try:
                return int(text.strip())
            except ValueError:
                text = self.read_line("Invalid input. Please enter a number: ")

    def add_question(self) -> Optional[Question]:
        """Prompt for a new question and append it to the bank."""
        self.write_line("")
        prompt = self.read_line("Enter the new question: ")
        answer = self.read_line("Enter the answer: ")

        self.write_line("Select the category:")
        for number, category in enumerate(Category, start=1):
            self.write_line(f"{number}. {category.value}")
        choice = self.read_line("Enter the number corresponding to the category: ")

        try:
            category = Category.from_choice(int(choice.strip()))
        except ValueError:
            logger.error(f"Invalid category choice: {choice!r}")
            return None

        try:
            question = Question(prompt, answer, category.value)
        except ValueError as e:
            logger.error(f"Question not added: {e}")
            return None

        if not self.store.append(question):
            return None
        self.write_line("Question added successfully!")
        return question

    def show_rules(self):
        self.write_line(RULES_TEXT)

    def run(self) -> int:
        """Loop until the player quits. Returns the process exit code."""
        while True:
            self.write_line(MENU_TEXT)
            try:
                choice = self.read_choice()
                if choice == PLAY:
                    self.session.play()
                elif choice == ADD:
                    self.add_question()
                elif choice == HIGH_SCORES:
                    self.scoreboard.display()
                elif choice == RULES:
                    self.show_rules()
                elif choice == QUIT:
                    break
                else:
                    self.write_line("Invalid choice. Try again.")
            except EOFError:
                logger.info("End of input; quitting")
                break

        self.write_line("Goodbye!")
        return 0


def build_menu(questions_path, scores_path, io=None, clock=None, random_source=None) -> Menu:
    """Wire the components together and load the question bank."""
    io = io or ConsoleIO()
    store = QuestionStore(questions_path)
    store.load()
    scoreboard = ScoreBoard(scores_path, read_line=io.read_line, write_line=io.write_line)
    session = QuizSession(
        question_store=store,
        scoreboard=scoreboard,
        clock=clock or MonotonicClock(),
        random_source=random_source or RandomSource(),
        read_line=io.read_line,
        write_line=io.write_line,
    )
    return Menu(store, scoreboard, session, io.read_line, io.write_line)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Terminal trivia quiz game")
    parser.add_argument("--config", default="config.yaml", help="Config file path")
    parser.add_argument("--questions", default=None, help="Question bank path")
    parser.add_argument("--scores", default=None, help="High score file path")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    files_cfg = config["files"]
    log_cfg = config["logging"]

    log_level = logging.DEBUG if args.verbose else getattr(
        logging, str(log_cfg.get("level", "WARNING")).upper(), logging.WARNING
    )
    logging.basicConfig(level=log_level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    menu = build_menu(
        questions_path=args.questions or files_cfg["questions"],
        scores_path=args.scores or files_cfg["high_scores"],
    )
    return menu.run()


if __name__ == "__main__":
    sys.exit(main())
