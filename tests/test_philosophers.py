import io

from hivelib.philo_args import SimulationParams
from hivelib.philosophers import USAGE, Simulation, main, now_ms, sleep_until


def _lines(out):
    return out.getvalue().splitlines()


def _events(lines):
    return [line.split(" ", 2) for line in lines if not line.startswith("Each")]


def test_sleep_until_reaches_deadline():
    deadline = now_ms() + 20
    sleep_until(deadline)
    assert now_ms() >= deadline


def test_sleep_until_past_deadline_returns_quickly():
    start = now_ms()
    sleep_until(start - 1000)
    assert now_ms() - start < 50


def test_single_philosopher_dies():
    out = io.StringIO()
    survived = Simulation(SimulationParams(1, 50, 10, 10), out).run()
    lines = _lines(out)
    assert survived is False
    assert len(lines) == 2
    assert lines[0].split(" ", 1)[1] == "1 has taken a fork"
    stamp, who, what = lines[1].split(" ", 2)
    assert (who, what) == ("1", "died")
    assert int(stamp) >= 50


def test_meal_limit_ends_simulation():
    out = io.StringIO()
    sim = Simulation(SimulationParams(4, 800, 20, 20, 3), out)
    survived = sim.run()
    lines = _lines(out)
    assert survived is True
    assert lines[-1] == "Each philosopher ate 3 times"
    events = _events(lines)
    assert all(what != "died" for _, _, what in events)
    for pid in ("1", "2", "3", "4"):
        meals = [e for e in events if e[1] == pid and e[2] == "is eating"]
        assert len(meals) == 3
    assert all(p.times_eaten == 3 for p in sim.philosophers)


def test_timestamps_never_decrease():
    out = io.StringIO()
    Simulation(SimulationParams(4, 800, 20, 20, 2), out).run()
    stamps = [int(stamp) for stamp, _, _ in _events(_lines(out))]
    assert stamps == sorted(stamps)


def test_starving_philosopher_reports_single_death_last():
    out = io.StringIO()
    sim = Simulation(SimulationParams(2, 30, 50, 10), out)
    survived = sim.run()
    lines = _lines(out)
    assert survived is False
    assert sim.is_dead is True
    deaths = [line for line in lines if line.endswith(" died")]
    assert len(deaths) == 1
    assert lines[-1] == deaths[0]
    assert not any(line.startswith("Each") for line in lines)


def test_forks_are_shared_between_neighbours():
    sim = Simulation(SimulationParams(3, 100, 10, 10), io.StringIO())
    p0, p1, p2 = sim.philosophers
    assert p0.first_fork is p0.left_fork
    assert p0.second_fork is p1.left_fork
    assert p1.first_fork is p2.left_fork
    assert p1.second_fork is p1.left_fork
    assert p2.second_fork is p0.left_fork


def test_main_usage_on_bad_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == USAGE + "\n"


def test_main_range_message(capsys):
    assert main(["0", "800", "200", "200"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Please use number philosophers in range 1 to 200", USAGE]


def test_main_runs_simulation(capsys):
    assert main(["1", "40", "10", "10"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1].endswith(" 1 died")
    assert len(lines) == 2