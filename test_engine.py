"""
Tests for the GameEngine wrapper and the console front end.
"""

import pytest

import main
from logic.config import EngineConfig
from logic.engine import GameEngine
from logic.game_state import EMPTY_BOARD, Mark
from logic.move_validator import MoveError
from logic.win_checker import Outcome


def scripted(*answers):
    """Input function that replays answers, then ends input."""
    remaining = list(answers)

    def _input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)
    return _input


def test_engine_starts_fresh():
    engine = GameEngine(verbose=False)
    assert engine.state.board == EMPTY_BOARD
    assert engine.state.turn == Mark.X
    assert engine.status.outcome == Outcome.IN_PROGRESS
    assert engine.message == "Next player: X"
    assert engine.winning_line is None


def test_engine_replaces_state_on_accepted_move():
    engine = GameEngine(verbose=False)
    before = engine.state
    result = engine.play(4)
    assert result.is_valid
    assert engine.state is result.state
    assert before.board == EMPTY_BOARD


def test_engine_keeps_state_on_rejected_move():
    engine = GameEngine(verbose=False)
    engine.play(0)
    held = engine.state
    result = engine.play(0)
    assert result.error == MoveError.CELL_OCCUPIED
    assert engine.state is held


def test_engine_reports_win_and_resets():
    engine = GameEngine(verbose=False)
    for index in [0, 4, 1, 5, 2]:
        engine.play(index)
    assert engine.is_over
    assert engine.status.winner == Mark.X
    assert engine.winning_line == (0, 1, 2)
    assert engine.valid_moves() == []
    assert engine.play(8).error == MoveError.GAME_ALREADY_OVER

    state = engine.reset()
    assert state.board == EMPTY_BOARD
    assert engine.state.turn == Mark.X
    assert not engine.is_over


def test_verbose_engine_prints_rejections(capsys):
    engine = GameEngine(verbose=True)
    engine.play(9)
    assert "Move 9 rejected" in capsys.readouterr().out


def test_quiet_engine_prints_nothing(capsys):
    engine = GameEngine(verbose=False)
    engine.play(9)
    assert capsys.readouterr().out == ""


def test_render_board_shows_marks():
    engine = GameEngine(verbose=False)
    engine.play(0)
    engine.play(4)
    text = main.render_board(engine.state)
    assert "0 | X |   |   |" in text
    assert "1 |   | O |   |" in text


@pytest.mark.parametrize("text,index", [("4", 4), ("1 2", 5), ("2,0", 6), (" 0 ", 0)])
def test_parse_move(text, index):
    assert main.parse_move(text) == index


@pytest.mark.parametrize("text", ["", "abc", "1 2 3", "3 3"])
def test_parse_move_rejects_garbage(text):
    with pytest.raises(ValueError):
        main.parse_move(text)


def test_console_plays_to_a_win(capsys):
    engine = GameEngine(verbose=False)
    main.play_console(engine, scripted("0", "4", "1", "5", "2", "n"))
    out = capsys.readouterr().out
    assert "Winner: X!" in out
    assert "Goodbye!" in out
    assert engine.status.winner == Mark.X


def test_console_play_again_resets(capsys):
    engine = GameEngine(verbose=False)
    main.play_console(engine, scripted("0", "4", "1", "5", "2", "y", "q"))
    assert engine.state.board == EMPTY_BOARD


def test_console_reports_bad_input(capsys):
    main.play_console(GameEngine(verbose=True), scripted("abc", "0", "0", "quit"))
    out = capsys.readouterr().out
    assert "Invalid input" in out
    assert "Move 0 rejected: Cell is already occupied!" in out


def test_console_handles_end_of_input(capsys):
    main.play_console(GameEngine(verbose=False), scripted())
    out = capsys.readouterr().out
    assert "Game interrupted by user." in out
    assert "Goodbye!" in out


def test_main_no_ui_quiet(monkeypatch):
    seen = {}
    monkeypatch.setattr(main, "play_console", lambda engine: seen.setdefault("engine", engine))
    main.main(["--no-ui", "--quiet"])
    assert seen["engine"].verbose is False


def test_engine_uses_injected_config(capsys):
    class QuietConfig(EngineConfig):
        DEBUG_MODE = False

    engine = GameEngine(config=QuietConfig())
    assert engine.verbose is False
    engine.play(9)
    assert capsys.readouterr().out == ""


def test_engine_defaults_to_config_debug_mode():
    assert GameEngine().verbose is EngineConfig.DEBUG_MODE


def test_console_prompt_counts_moves():
    prompts = []
    answers = iter(["4", "q"])

    def _input(prompt=""):
        prompts.append(prompt)
        return next(answers)

    main.play_console(GameEngine(verbose=False), _input)
    assert prompts == ["Move 1 (X) > ", "Move 2 (O) > "]


class FakeCell:
    """Records the options a board button was last configured with."""

    def __init__(self):
        self.options = {}

    def configure(self, **options):
        self.options.update(options)


def _board_view(engine):
    """TicTacToeUI with stand-in cells, so the board can be drawn without a display."""
    tk = pytest.importorskip("tkinter")
    ui_module = pytest.importorskip("ui")

    view = ui_module.TicTacToeUI.__new__(ui_module.TicTacToeUI)
    view.engine = engine
    view.config = ui_module.GameConfig
    view.board_cells = [FakeCell() for _ in range(9)]
    view._update_board_display()
    return tk, view


def test_board_buttons_follow_valid_moves():
    engine = GameEngine(verbose=False)
    engine.play(0)
    engine.play(4)
    tk, view = _board_view(engine)

    states = [cell.options["state"] for cell in view.board_cells]
    assert states[0] == tk.DISABLED
    assert states[4] == tk.DISABLED
    assert [i for i, s in enumerate(states) if s == tk.NORMAL] == engine.valid_moves()
    assert view.board_cells[0].options["text"] == "X"


def test_board_buttons_disabled_after_win():
    engine = GameEngine(verbose=False)
    for index in [0, 4, 1, 5, 2]:
        engine.play(index)
    tk, view = _board_view(engine)

    assert all(cell.options["state"] == tk.DISABLED for cell in view.board_cells)
    for index in (0, 1, 2):
        assert view.board_cells[index].options["bg"] == view.config.CELL_WIN_COLOR
