from matplotlib.figure import Figure

from vesselsim.chart import collect_series, plot_state_history

HISTORY = [
    (0.5, {"env": 0, "R": 5, "A": 3}),
    (1.5, {"env": 1, "R": 4, "A": 2}),
]


def test_collect_series_excludes_env_and_sorts():
    series = collect_series(HISTORY)
    assert list(series) == ["A", "R"]
    assert series["A"] == ([0.5, 1.5], [3.0, 2.0])
    assert series["R"] == ([0.5, 1.5], [5.0, 4.0])


def test_collect_series_empty():
    assert collect_series([]) == {}


def test_plot_draws_one_line_per_agent():
    ax = Figure().add_subplot()
    returned = plot_state_history(HISTORY, ax)
    assert returned is ax
    assert [line.get_label() for line in ax.get_lines()] == ["A", "R"]
    assert list(ax.get_lines()[1].get_ydata()) == [5.0, 4.0]


def test_plot_creates_axes_when_missing():
    ax = plot_state_history(HISTORY)
    assert len(ax.get_lines()) == 2