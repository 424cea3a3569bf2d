from life import PATTERNS
from life_bench import FakeWindow, main, seeded_grid, simulate_frame


def test_seeded_grid_centres_pattern_in_view():
    grid = seeded_grid("glider", 10, 20)

    assert grid.population == len(PATTERNS["glider"])
    assert grid.bounds() == (9, 4, 11, 6)


def test_simulate_frame_draws_and_times_each_component():
    grid = seeded_grid("block", 8, 16)
    window = FakeWindow(8, 16)

    timings = simulate_frame(grid, 3, window)

    assert set(timings) == {"render_frame", "draw", "candidates"}
    assert all(t >= 0 for t in timings.values())
    assert window.lines[6] == "generation: 3"
    assert window.calls == 7


def test_line_timing_report(capsys):
    main(["-n", "4", "--rows", "8", "--cols", "16", "--pattern", "blinker", "--line-timing"])

    out = capsys.readouterr().out
    assert "Pattern: blinker" in out
    assert "tick()" in out
    assert "Final population: 3" in out
