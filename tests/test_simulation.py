import io

from dining.config import Config
from dining.simulation import Table, run_simulation
from dining.utils import now_ms


def _lines(stream):
    return [line.split(" ", 2) for line in stream.getvalue().splitlines()]


def test_single_philosopher_takes_one_fork_and_dies():
    stream = io.StringIO()
    survived = run_simulation(Config(1, 60, 60, 60), stream)
    lines = _lines(stream)
    assert survived is False
    assert [status for _, _, status in lines] == ["has taken a fork", "died"]
    assert all(ident == "1" for _, ident, _ in lines)
    assert int(lines[-1][0]) >= 60


def test_everyone_eats_the_requested_meals_without_dying():
    stream = io.StringIO()
    config = Config(5, 800, 200, 200, 2)
    survived = run_simulation(config, stream)
    lines = _lines(stream)
    assert survived is True
    assert not any(status == "died" for _, _, status in lines)
    for ident in range(1, 6):
        meals = [s for _, i, s in lines if i == str(ident) and s == "is eating"]
        assert len(meals) == 2


def test_timestamps_never_decrease():
    stream = io.StringIO()
    run_simulation(Config(4, 800, 100, 100, 1), stream)
    stamps = [int(t) for t, _, _ in _lines(stream)]
    assert stamps == sorted(stamps)


def test_starvation_ends_with_single_death_line():
    stream = io.StringIO()
    survived = run_simulation(Config(4, 100, 200, 100), stream)
    lines = _lines(stream)
    assert survived is False
    deaths = [line for line in lines if line[2] == "died"]
    assert len(deaths) == 1
    assert lines[-1][2] == "died"


def test_forks_are_shared_between_neighbours():
    table = Table(Config(3, 800, 200, 200), io.StringIO())
    first, second, third = table.philosophers
    assert first.right is second.left
    assert second.right is third.left
    assert third.right is first.left
    assert [p.id for p in table.philosophers] == [1, 2, 3]


def test_time_remaining_counts_down_from_time_to_die():
    table = Table(Config(2, 500, 60, 60), io.StringIO())
    philosopher = table.philosophers[0]
    philosopher.last_meal = now_ms()
    remaining = philosopher.time_remaining()
    assert 0 <= 500 - remaining <= 20


def test_check_death_declares_starved_philosopher():
    stream = io.StringIO()
    table = Table(Config(2, 100, 60, 60), stream)
    philosopher = table.philosophers[1]
    philosopher.last_meal = now_ms() - 100
    assert table.check_death(philosopher) is True
    assert table.is_dead is True
    assert stream.getvalue().splitlines()[-1].endswith(" 2 died")


def test_check_death_false_for_fed_philosopher():
    stream = io.StringIO()
    table = Table(Config(2, 1000, 60, 60), stream)
    philosopher = table.philosophers[0]
    philosopher.last_meal = now_ms()
    assert table.check_death(philosopher) is False
    assert stream.getvalue() == ""


def test_log_is_silent_once_someone_died():
    stream = io.StringIO()
    table = Table(Config(2, 1000, 60, 60), stream)
    table.log(table.philosophers[0], "is thinking")
    table.is_dead = True
    table.log(table.philosophers[0], "is sleeping")
    lines = stream.getvalue().splitlines()
    assert len(lines) == 1
    assert lines[0].endswith(" 1 is thinking")