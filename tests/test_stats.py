from pathlib import Path

from life import PATTERNS, STATS_ENV, SparseGrid, StatsLogger, stats_path_from_env


def test_logger_writes_header_and_rows(tmp_path):
    path = tmp_path / "life_stats.csv"
    grid = SparseGrid()
    grid.seed(PATTERNS["glider"], (2, 5))

    logger = StatsLogger(path)
    logger.open()
    assert logger.enabled
    logger.log(0, grid)
    logger.log(10, SparseGrid())
    logger.close()

    lines = path.read_text().splitlines()
    assert lines[0] == StatsLogger.HEADER.strip()

    first = lines[1].split(",")
    assert first[0] == "0"
    assert first[2] == "5"
    assert first[4:] == ["2", "5", "4", "7"]

    empty = lines[2].split(",")
    assert empty[0] == "10"
    assert empty[2:] == ["0", "0", "", "", "", ""]


def test_logger_without_path_is_a_no_op():
    logger = StatsLogger(None)
    logger.open()

    assert not logger.enabled
    logger.log(0, SparseGrid([(0, 0)]))
    logger.close()


def test_logger_disables_itself_when_file_cannot_open(tmp_path):
    logger = StatsLogger(tmp_path)
    logger.open()

    assert not logger.enabled
    logger.log(0, SparseGrid())


def test_stats_path_comes_from_environment(monkeypatch):
    monkeypatch.delenv(STATS_ENV, raising=False)
    assert stats_path_from_env() is None

    monkeypatch.setenv(STATS_ENV, "  ")
    assert stats_path_from_env() is None

    monkeypatch.setenv(STATS_ENV, "out/stats.csv")
    assert stats_path_from_env() == Path("out/stats.csv")
