from shadowcombat.core.rng import RNG


def test_rng_determinism_same_seed() -> None:
    rng_a = RNG(12345)
    rng_b = RNG(12345)

    draws_a = [rng_a() for _ in range(5)]
    draws_b = [rng_b.random() for _ in range(5)]

    assert draws_a == draws_b
    assert all(0.0 <= value < 1.0 for value in draws_a)


def test_rng_different_seed() -> None:
    rng_a = RNG(11111)
    rng_b = RNG(22222)

    assert [rng_a() for _ in range(5)] != [rng_b() for _ in range(5)]
