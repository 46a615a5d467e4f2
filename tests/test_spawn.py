import pytest

from particlefx.spawn import Burst, BurstSpawnStrategy, RateSpawnStrategy, SpawnStrategy


def test_strategy_is_abstract():
    with pytest.raises(TypeError):
        SpawnStrategy()


def test_burst_fires_in_its_step():
    strategy = BurstSpawnStrategy([Burst(0.5, 3), Burst(1.0, 2)])
    assert strategy.spawn_count(0.5) == 3
    assert strategy.spawn_count(0.5) == 2
    assert strategy.spawn_count(1.0) == 0


def test_bursts_in_same_step_add_up():
    strategy = BurstSpawnStrategy([Burst(0.25, 4), Burst(0.5, 6)])
    assert strategy.spawn_count(1.0) == 4 + 6


def test_burst_at_time_zero_never_fires():
    strategy = BurstSpawnStrategy([Burst(0.0, 5)])
    assert strategy.spawn_count(0.0) == 0
    assert strategy.spawn_count(1.0) == 0


def test_burst_before_its_time_waits():
    strategy = BurstSpawnStrategy([Burst(2.0, 7)])
    assert strategy.spawn_count(1.0) == 0
    assert strategy.spawn_count(1.0) == 7


def test_burst_accepts_generator():
    strategy = BurstSpawnStrategy(Burst(t, 1) for t in (0.5, 1.5))
    assert strategy.spawn_count(2.0) == 2


def test_rate_whole_step():
    assert RateSpawnStrategy(4.0).spawn_count(1.0) == 4


def test_rate_carries_fraction_over():
    strategy = RateSpawnStrategy(3.0)
    counts = [strategy.spawn_count(0.25) for _ in range(4)]
    assert counts[0] == 0
    assert sum(counts) == 3


@pytest.mark.parametrize("rate", [1.0, 2.5, 20.0])
def test_rate_total_matches_time(rate):
    strategy = RateSpawnStrategy(rate)
    total = sum(strategy.spawn_count(0.125) for _ in range(64))
    assert total == int(rate * 8.0)


def test_rate_zero_never_spawns():
    strategy = RateSpawnStrategy(0.0)
    assert sum(strategy.spawn_count(1.0) for _ in range(10)) == 0