"""Tests for the Menu module, configuration loading and the CLI entry point."""
import logging
from unittest.mock import MagicMock

import pytest
from trivia_game.config import load_config, DEFAULT_CONFIG
from trivia_game.menu import Menu, build_menu, main
from trivia_game.models import Category, Question
from trivia_game.question_store import QuestionStore


@pytest.fixture
def menu_parts(tmp_path):
    store = QuestionStore(tmp_path / "questions.txt")
    store.load()
    return store, MagicMock(), MagicMock()


def make_menu(parts, io):
    store, scoreboard, session = parts
    return Menu(store, scoreboard, session, io.read_line, io.write_line)


# --- Menu dispatch ---

def test_quit_returns_zero(menu_parts, make_io):
    io = make_io(["5"])
    assert make_menu(menu_parts, io).run() == 0
    assert "Goodbye!" in io.output


def test_end_of_input_quits(menu_parts, make_io):
    io = make_io([])
    assert make_menu(menu_parts, io).run() == 0
    assert io.output[-1] == "Goodbye!"


def test_non_numeric_input_reprompts(menu_parts, make_io):
    io = make_io(["abc", "", "5"])
    make_menu(menu_parts, io).run()
    assert io.prompts.count("Invalid input. Please enter a number: ") == 2
    # menu shown once; re-prompting does not redisplay it
    assert sum("What Would You Like to Do?" in line for line in io.output) == 1


def test_out_of_range_choice_redisplays_menu(menu_parts, make_io):
    io = make_io(["9", "5"])
    make_menu(menu_parts, io).run()
    assert "Invalid choice. Try again." in io.output
    assert sum("What Would You Like to Do?" in line for line in io.output) == 2


def test_dispatch_play_and_scores(menu_parts, make_io):
    _, scoreboard, session = menu_parts
    io = make_io(["1", "3", "5"])
    make_menu(menu_parts, io).run()
    session.play.assert_called_once()
    scoreboard.display.assert_called_once()


def test_rules_use_game_constants(menu_parts, make_io):
    io = make_io(["4", "5"])
    make_menu(menu_parts, io).run()
    assert "20 random questions" in io.text
    assert "15 second time limit" in io.text


# --- Add question flow ---

def test_add_question(menu_parts, make_io):
    store = menu_parts[0]
    io = make_io(["Largest planet?", "Jupiter", "3"])
    added = make_menu(menu_parts, io).add_question()
    assert added == Question("Largest planet?", "Jupiter", "Science")
    assert store.snapshot() == (added,)
    assert store.path.read_text(encoding="utf-8") == "Largest planet?|Jupiter|Science\n"
    assert "Question added successfully!" in io.output


@pytest.mark.parametrize("choice", ["0", "6", "x", ""])
def test_invalid_category_aborts(menu_parts, make_io, caplog, choice):
    store = menu_parts[0]
    io = make_io(["Q", "A", choice])
    with caplog.at_level(logging.ERROR):
        assert make_menu(menu_parts, io).add_question() is None
    assert store.snapshot() == ()
    assert not store.path.exists()
    assert "Invalid category choice" in caplog.text


def test_question_with_delimiter_not_added(menu_parts, make_io, caplog):
    store = menu_parts[0]
    io = make_io(["A|B", "C", "1"])
    with caplog.at_level(logging.ERROR):
        assert make_menu(menu_parts, io).add_question() is None
    assert store.snapshot() == ()
    assert not store.path.exists()


def test_category_choices_listed(menu_parts, make_io):
    io = make_io(["Q", "A", "5"])
    make_menu(menu_parts, io).add_question()
    for number, category in enumerate(Category, start=1):
        assert f"{number}. {category.value}" in io.output


# --- End to end ---

def test_add_then_play_after_restart(tmp_path, make_io, make_clock):
    questions = tmp_path / "questions.txt"
    scores = tmp_path / "high_scores.txt"

    first = make_io(["2", "What is H2O?", "Water", "3", "5"])
    build_menu(questions, scores, io=first).run()

    second = make_io(["1", "water", "Ann", "5"])
    menu = build_menu(questions, scores, io=second, clock=make_clock([0.0, 0.0]))
    assert menu.run() == 0

    assert "Category: Science" in second.output
    assert "Question: What is H2O?" in second.output
    assert "Game Over! Final Score: 25" in second.output
    assert scores.read_text(encoding="utf-8") == "25 Ann\n"


def test_main_uses_command_line_paths(tmp_path, monkeypatch, capsys):
    questions = tmp_path / "q.txt"
    questions.write_text("Q|A|Art\n", encoding="utf-8")
    inputs = iter(["4", "5"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))

    code = main([
        "--config", str(tmp_path / "missing.yaml"),
        "--questions", str(questions),
        "--scores", str(tmp_path / "s.txt"),
    ])

    assert code == 0
    assert "Goodbye!" in capsys.readouterr().out


# --- Configuration ---

def test_config_defaults_when_missing(tmp_path):
    assert load_config(tmp_path / "absent.yaml") == DEFAULT_CONFIG


def test_config_overrides_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("files:\n  questions: bank.txt\nextra:\n  ignored: 1\n", encoding="utf-8")
    config = load_config(path)
    assert config["files"]["questions"] == "bank.txt"
    assert config["files"]["high_scores"] == "high_scores.txt"
    assert "extra" not in config


def test_config_must_be_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)
