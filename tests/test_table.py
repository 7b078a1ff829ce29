import pytest

from dining.clock import now
from dining.table import Settings, Table, parse_settings


def test_parse_settings_without_must_eat():
    assert parse_settings(["5", "800", "200", "100"]) == Settings(5, 800, 200, 100, -1)


def test_parse_settings_with_must_eat():
    assert parse_settings(["5", "800", "200", "100", "7"]).must_eat == 7


def test_parse_settings_zero_philosophers_means_nothing_to_do():
    assert parse_settings(["0", "800", "200", "200"]) is None


def test_parse_settings_zero_meals_means_nothing_to_do():
    assert parse_settings(["3", "800", "200", "200", "0"]) is None


def test_table_ids_and_counts():
    table = Table(Settings(5, 800, 200, 200))
    assert [p.id for p in table.philosophers] == [1, 2, 3, 4, 5]
    assert len(table.forks) == 5
    assert table.end is False


def test_table_forks_are_shared_with_neighbours():
    table = Table(Settings(4, 800, 200, 200))
    philos = table.philosophers
    for left, right in zip(philos, philos[1:] + philos[:1]):
        assert left.right_fork is right.left_fork


def test_single_philosopher_has_one_fork():
    table = Table(Settings(1, 800, 200, 200))
    philo = table.philosophers[0]
    assert philo.left_fork is philo.right_fork


def test_initial_meal_state():
    before = now()
    table = Table(Settings(2, 800, 200, 200))
    for philo in table.philosophers:
        assert philo.meal == 0
        assert philo.last_meal >= before


@pytest.mark.parametrize("count", [0, -3])
def test_table_rejects_empty(count):
    with pytest.raises(ValueError):
        Table(Settings(count, 800, 200, 200))