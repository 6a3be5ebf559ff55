from mazecarver.utils.rng import SeededRNG, default_rng, get_global_seed, set_global_seed


def test_shuffled_returns_permutation_without_mutating():
    rng = SeededRNG(3)
    items = [(0, 2), (2, 0), (0, -2), (-2, 0)]
    result = rng.shuffled(items)

    assert sorted(result) == sorted(items)
    assert items == [(0, 2), (2, 0), (0, -2), (-2, 0)]


def test_same_seed_same_sequence():
    a, b = SeededRNG(11), SeededRNG(11)
    assert [a.shuffled(range(10)) for _ in range(5)] == [b.shuffled(range(10)) for _ in range(5)]


def test_set_seed_restarts_sequence():
    rng = SeededRNG(5)
    first = rng.shuffled(range(10))
    rng.set_seed(5)
    assert rng.shuffled(range(10)) == first
    assert rng.seed == 5


def test_shuffle_choice_is_roughly_uniform():
    rng = SeededRNG(0)
    counts = {key: 0 for key in "abcd"}
    for _ in range(4000):
        counts[rng.shuffled("abcd").pop()] += 1
    assert all(800 < count < 1200 for count in counts.values())


def test_global_seed():
    previous = get_global_seed()
    try:
        set_global_seed(21)
        assert get_global_seed() == 21
        assert default_rng.seed == 21
    finally:
        set_global_seed(previous)


def test_fresh_until_first_draw():
    rng = SeededRNG(9)
    assert rng.fresh
    rng.shuffled([1, 2, 3])
    assert not rng.fresh
    rng.set_seed(9)
    assert rng.fresh
