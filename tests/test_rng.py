from gumshoe.util.rng import Rng


def _draws(rng: Rng) -> list:
    return [
        rng.range_int(1, 6),
        rng.range_float(0.0, 1.0),
        rng.choice(["a", "b", "c"]),
        rng.chance(0.5),
    ]


def test_same_seed_same_sequence():
    assert _draws(Rng(42)) == _draws(Rng(42))


def test_seed_replays_stream():
    rng = Rng(7)
    first = _draws(rng)
    rng.seed(7)
    assert _draws(rng) == first


def test_choice_on_empty_sequence_is_none():
    assert Rng(1).choice([]) is None
    assert Rng(1).choice(()) is None


def test_range_int_inclusive_and_ordered():
    rng = Rng(3)
    values = {rng.range_int(5, 2) for _ in range(200)}
    assert values == {2, 3, 4, 5}


def test_range_float_within_bounds():
    rng = Rng(3)
    for _ in range(100):
        value = rng.range_float(2.0, -1.0)
        assert -1.0 <= value <= 2.0


def test_chance_clamps_probability():
    rng = Rng(11)
    assert not any(rng.chance(-0.5) for _ in range(50))
    assert all(rng.chance(3.0) for _ in range(50))


def test_fork_is_stable_and_independent():
    parent = Rng(99)
    assert parent.fork("npc:1").current_seed == Rng(99).fork("npc:1").current_seed
    assert parent.fork("npc:1").current_seed != parent.fork("npc:2").current_seed


def test_sample_caps_at_population():
    assert sorted(Rng(5).sample([1, 2, 3], 10)) == [1, 2, 3]
