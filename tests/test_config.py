"""
Tests for configuration, logging setup and the command line.
"""

import json
import logging

import pytest
import yaml

from padthai import config as config_module
from padthai.config import Config, get_config, get_config_file, reset_config
from padthai.board import Board
from padthai.types import Cell
from padthai.utils import setup_logger
from padthai.__main__ import main


@pytest.fixture
def clean_padthai_logger():
    """Remove handlers that setup_logger attaches during a test."""
    logger = logging.getLogger("padthai")
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)


class TestConfig:
    """Tests for Config loading and saving."""

    def test_defaults(self):
        config = Config()

        assert config.search.difficulty == "medium"
        assert config.search.max_depth == 12
        assert config.evaluation.to_weights() == {'man': 1.0, 'king': 5.0, 'advancement': 0.1}

    def test_save_load_round_trip(self, tmp_path):
        path = tmp_path / "settings.yaml"
        config = Config()
        config.search.depth = 3
        config.search.seed = 42
        config.evaluation.weight_king = 4.0
        config.logging.level = "DEBUG"
        config.save(path)

        loaded = Config.load(path)
        assert loaded.to_dict() == config.to_dict()

    def test_partial_file(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.dump({'search': {'difficulty': 'hard'}}))

        loaded = Config.load(path)
        assert loaded.search.difficulty == "hard"
        assert loaded.evaluation.weight_man == 1.0

    def test_missing_file_gives_defaults(self, tmp_path):
        assert Config.load(tmp_path / "nope.yaml").to_dict() == Config().to_dict()

    def test_broken_file_falls_back(self, tmp_path, caplog):
        path = tmp_path / "settings.yaml"
        path.write_text("search: {difficulty: [unclosed\n")

        with caplog.at_level(logging.WARNING, logger="padthai"):
            loaded = Config.load(path)

        assert loaded.to_dict() == Config().to_dict()
        assert "Failed to load config" in caplog.text

    def test_unknown_key_falls_back(self, tmp_path, caplog):
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.dump({'search': {'bogus': 1}}))

        with caplog.at_level(logging.WARNING, logger="padthai"):
            loaded = Config.load(path)

        assert loaded.search.difficulty == "medium"

    def test_global_config_reads_settings_file(self):
        path = get_config_file()
        config = Config()
        config.search.difficulty = "easy"
        config.save(path)

        config_module.set_config(None)
        assert get_config().search.difficulty == "easy"

    def test_reset_config_writes_defaults(self):
        config = reset_config()

        assert get_config() is config
        assert get_config_file().exists()


class TestLogging:
    """Tests for logger setup."""

    def test_setup_logger_is_idempotent(self, clean_padthai_logger, tmp_path):
        log_file = tmp_path / "logs" / "engine.log"
        logger = setup_logger("padthai", log_file=log_file, level="DEBUG")
        again = setup_logger("padthai", level=logging.INFO)

        assert logger is again
        assert len(logger.handlers) == 2
        assert logger.level == logging.INFO
        assert log_file.exists()

    def test_engine_warnings_reach_log_file(self, clean_padthai_logger, tmp_path):
        from padthai.transition import apply_move

        log_file = tmp_path / "engine.log"
        logger = setup_logger("padthai", log_file=log_file, level=logging.WARNING)
        apply_move(Board.initial(), None)
        for handler in logger.handlers:
            handler.flush()

        assert "Invalid move passed to apply_move" in log_file.read_text()


class TestCommandLine:
    """Tests for the command line entry point."""

    def test_suggests_move_for_initial_position(self, clean_padthai_logger, capsys):
        assert main(["--depth", "2", "--seed", "3"]) == 0

        out = capsys.readouterr().out
        assert "White plays Move(" in out

    def test_board_file_and_black(self, clean_padthai_logger, tmp_path, capsys):
        path = tmp_path / "board.json"
        board = Board.from_pieces({(2, 3): Cell.BLACK_MAN, (3, 4): Cell.WHITE_MAN})
        path.write_text(json.dumps(board.to_compact()))

        assert main(["--board", str(path), "--player", "black", "--difficulty", "easy"]) == 0
        assert "Black plays Move((2,3)x(4,5), captured=(3,4))" in capsys.readouterr().out

    def test_no_legal_move(self, clean_padthai_logger, tmp_path, capsys):
        path = tmp_path / "board.yaml"
        path.write_text(yaml.dump({'black_men': [[2, 3]]}))

        assert main(["--board", str(path), "--depth", "1"]) == 1
        assert "White has no legal move." in capsys.readouterr().out

    def test_config_option(self, clean_padthai_logger, tmp_path, capsys):
        path = tmp_path / "custom.yaml"
        config = Config()
        config.search.difficulty = "custom"
        config.search.depth = 1
        config.save(path)

        assert main(["--config", str(path)]) == 0
        assert "White plays" in capsys.readouterr().out

    def test_lost_position(self, clean_padthai_logger, tmp_path, capsys):
        path = tmp_path / "board.yaml"
        path.write_text(yaml.dump({'white_men': [[4, 3]], 'black_men': [[2, 1], [2, 5]]}))

        assert main(["--board", str(path), "--depth", "3", "--seed", "0"]) == 1
        assert "White loses whatever it plays." in capsys.readouterr().out

    def test_seed_does_not_touch_global_config(self, clean_padthai_logger, capsys):
        assert main(["--depth", "1", "--seed", "3"]) == 0
        assert get_config().search.seed is None

    def test_depth_option_uses_search_settings(self, clean_padthai_logger, tmp_path, capsys, caplog):
        path = tmp_path / "custom.yaml"
        config = Config()
        config.search.max_depth = 1
        config.save(path)

        with caplog.at_level(logging.WARNING, logger="padthai"):
            assert main(["--config", str(path), "--depth", "3"]) == 0

        assert "Search depth 3 capped at 1" in caplog.text
