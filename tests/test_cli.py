from __future__ import annotations

from pathlib import Path

import pytest

from repertoire_tutor import constants
from repertoire_tutor.cli.main import main


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(constants.USERNAME_ENV_VAR, raising=False)
    monkeypatch.delenv(constants.LOG_LEVEL_ENV_VAR, raising=False)


class TestClassifyMoves:
    def test_white(self, capsys: pytest.CaptureFixture[str]):
        main(["classify-moves", "e4", "e5", "Nf3", "Nc6", "Bb5"])
        assert capsys.readouterr().out.strip() == "ruy_lopez | Ruy Lopez"

    def test_black(self, capsys: pytest.CaptureFixture[str]):
        main(["classify-moves", "--color", "black", "d4", "d5", "c4", "dxc4"])
        out = capsys.readouterr().out
        assert out.startswith("queens_gambit_accepted |")

    def test_single_move(self, capsys: pytest.CaptureFixture[str]):
        main(["classify-moves", "e4"])
        assert capsys.readouterr().out.strip() == "unclassified"

    def test_invalid_color(self):
        with pytest.raises(SystemExit):
            main(["classify-moves", "--color", "green", "e4", "e5"])


class TestLogLevel:
    def test_unknown_level_argument(self, capsys: pytest.CaptureFixture[str]):
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "verbose", "classify-moves", "e4", "e5"])
        assert exc_info.value.code == 2
        assert "--log-level" in capsys.readouterr().err

    def test_unknown_level_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ):
        monkeypatch.setenv(constants.LOG_LEVEL_ENV_VAR, "verbose")
        with pytest.raises(SystemExit) as exc_info:
            main(["classify-moves", "e4", "e5"])
        assert exc_info.value.code == 2
        assert "Unknown log level" in capsys.readouterr().err

    def test_lowercase_level(self, capsys: pytest.CaptureFixture[str]):
        main(["--log-level", "debug", "classify-moves", "e4", "e5", "f4"])
        assert capsys.readouterr().out.strip() == "kings_gambit | King's Gambit"


class TestClassifyPGN:
    def test_with_summary(
        self, sample_pgn_path: Path, capsys: pytest.CaptureFixture[str]
    ):
        status = main(
            ["--username", "testuser", "classify-pgn", str(sample_pgn_path), "--summary"]
        )
        out = capsys.readouterr().out

        assert status is None
        assert "#0 | TestUser vs Opponent1 | white | ruy_lopez | Ruy Lopez" in out
        assert "#1 | Opponent2 vs testuser | black | sicilian_najdorf" in out
        assert "#3 | TestUser vs Opponent4 | white | unclassified | Unclassified" in out
        assert "Summary:" in out
        assert "    1  queens_gambit_accepted" in out
        assert "Classified 4 games." in out

    def test_username_from_environment(
        self,
        sample_pgn_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ):
        monkeypatch.setenv(constants.USERNAME_ENV_VAR, "Opponent2")
        main(["classify-pgn", str(sample_pgn_path)])
        out = capsys.readouterr().out
        assert "#1 | Opponent2 vs testuser | white | italian_game" in out

    def test_missing_file(self, temp_dir: Path, capsys: pytest.CaptureFixture[str]):
        status = main(["--username", "x", "classify-pgn", str(temp_dir / "nope.pgn")])
        assert status == 1
        assert "PGN file not found" in capsys.readouterr().out

    def test_missing_username(
        self, sample_pgn_path: Path, capsys: pytest.CaptureFixture[str]
    ):
        status = main(["classify-pgn", str(sample_pgn_path)])
        assert status == 1
        assert "username is required" in capsys.readouterr().out


class TestListBuckets:
    def test_all(self, capsys: pytest.CaptureFixture[str]):
        main(["list-buckets"])
        out = capsys.readouterr().out
        assert "ruy_lopez | Ruy Lopez" in out
        assert "other_black | Other (Black)" in out

    def test_black_only(self, capsys: pytest.CaptureFixture[str]):
        main(["list-buckets", "--color", "black"])
        out = capsys.readouterr().out
        assert "sicilian_najdorf |" in out
        assert "ruy_lopez |" not in out
        assert "Listed 38 buckets." in out

    def test_white_only(self, capsys: pytest.CaptureFixture[str]):
        main(["list-buckets", "--color", "white"])
        out = capsys.readouterr().out
        assert "Listed 28 buckets." in out
