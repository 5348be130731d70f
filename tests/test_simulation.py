import io

from philosophers.config import Settings
from philosophers.simulation import (
    DIED,
    EATING,
    SLEEPING,
    TAKEN_FORK,
    THINKING,
    Simulation,
)
from philosophers.utils import now_ms


def _parse(out):
    entries = []
    for line in out.getvalue().splitlines():
        stamp, philo_id, message = line.split(" ", 2)
        entries.append((int(stamp), int(philo_id), message))
    return entries


def _make(nb=3, die=100, eat=5, sleep=5, must_eat=-1):
    out = io.StringIO()
    return Simulation(Settings(nb, die, eat, sleep, must_eat), out), out


def test_display_format():
    sim, out = _make()
    sim.display(2, THINKING)
    [(stamp, philo_id, message)] = _parse(out)
    assert stamp >= 0
    assert philo_id == 2
    assert message == THINKING


def test_display_silent_after_end():
    sim, out = _make()
    sim.ended = True
    sim.display(1, EATING)
    assert out.getvalue() == ""


def test_take_and_release_forks_even():
    sim, out = _make(nb=3)
    sim.take_forks(2)
    assert sim.forks[0].locked() and sim.forks[1].locked()
    assert not sim.forks[2].locked()
    messages = [m for _, i, m in _parse(out) if i == 2]
    assert messages == [TAKEN_FORK, TAKEN_FORK]
    sim.release_forks(2)
    assert not any(fork.locked() for fork in sim.forks)


def test_first_philosopher_uses_last_fork():
    sim, _ = _make(nb=3)
    sim.take_forks(1)
    assert sim.forks[0].locked() and sim.forks[2].locked()
    assert not sim.forks[1].locked()
    sim.release_forks(1)
    assert not any(fork.locked() for fork in sim.forks)


def test_eat_records_meal():
    sim, out = _make()
    before = now_ms()
    sim.eat(1)
    philosopher = sim.philosophers[0]
    assert philosopher.meals_eaten == 1
    assert philosopher.last_meal >= before
    assert EATING in [m for _, _, m in _parse(out)]
    assert not any(fork.locked() for fork in sim.forks)


def test_eat_does_nothing_after_end():
    sim, out = _make()
    sim.ended = True
    sim.eat(1)
    assert sim.philosophers[0].meals_eaten == 0
    assert out.getvalue() == ""


def test_sleep_and_think_messages():
    sim, out = _make()
    sim.sleep(3)
    sim.think(3)
    assert [(i, m) for _, i, m in _parse(out)] == [(3, SLEEPING), (3, THINKING)]


def test_all_eaten_without_limit():
    sim, _ = _make(must_eat=-1)
    for philosopher in sim.philosophers:
        philosopher.meals_eaten = 10
    assert sim.all_eaten() is False
    assert sim.ended is False


def test_all_eaten_with_limit():
    sim, _ = _make(must_eat=2)
    for philosopher in sim.philosophers:
        philosopher.meals_eaten = 2
    sim.philosophers[1].meals_eaten = 1
    assert sim.all_eaten() is False
    sim.philosophers[1].meals_eaten = 2
    assert sim.all_eaten() is True
    assert sim.ended is True


def test_starved_reports_death():
    sim, out = _make(die=100)
    for philosopher in sim.philosophers:
        philosopher.last_meal = now_ms()
    sim.philosophers[1].last_meal = now_ms() - 1000
    assert sim.starved() is True
    assert sim.ended is True
    assert [(i, m) for _, i, m in _parse(out)] == [(2, DIED)]


def test_handle_one():
    sim, out = _make(nb=1, die=100)
    sim.run()
    entries = _parse(out)
    assert [(i, m) for _, i, m in entries] == [(1, TAKEN_FORK), (1, DIED)]
    assert entries[-1][0] >= 100


def test_run_with_zero_meals_prints_nothing():
    sim, out = _make(nb=3, must_eat=0)
    sim.run()
    assert out.getvalue() == ""


def test_run_until_everyone_has_eaten():
    sim, out = _make(nb=4, die=600, eat=20, sleep=20, must_eat=2)
    sim.run()
    entries = _parse(out)
    assert all(m != DIED for _, _, m in entries)
    for philo_id in range(1, 5):
        meals = sum(1 for _, i, m in entries if i == philo_id and m == EATING)
        assert meals >= 2
    stamps = [s for s, _, _ in entries]
    assert stamps == sorted(stamps)
    assert sim.ended is True


def test_run_ends_with_a_death():
    sim, out = _make(nb=2, die=100, eat=200, sleep=100)
    sim.run()
    entries = _parse(out)
    deaths = [e for e in entries if e[2] == DIED]
    assert len(deaths) == 1
    assert entries[-1][2] == DIED
    assert not any(fork.locked() for fork in sim.forks)