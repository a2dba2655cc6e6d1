import pytest

from rankcore.query_enhancer import QueryEnhancerBuilder, rewrite_range_with


def _check(enhancer, expected):
    for real, (start, stop) in expected.items():
        assert enhancer.replacement(real) == range(start, stop), real


def test_original_unmodified():
    builder = QueryEnhancerBuilder(["new", "york", "city", "subway"])
    builder.declare(range(0, 2), 4, ["new", "york", "city"])
    enhancer = builder.build()
    _check(
        enhancer,
        {0: (0, 1), 1: (1, 2), 2: (2, 3), 3: (3, 4), 4: (0, 1), 5: (1, 2), 6: (2, 3)},
    )


def test_simple_growing():
    builder = QueryEnhancerBuilder(["new", "york", "subway"])
    builder.declare(range(0, 2), 3, ["new", "york", "city"])
    enhancer = builder.build()
    _check(enhancer, {0: (0, 1), 1: (1, 3), 2: (3, 4), 3: (0, 1), 4: (1, 2), 5: (2, 3)})


def test_same_place_growings():
    builder = QueryEnhancerBuilder(["NY", "subway"])
    builder.declare(range(0, 1), 2, ["new", "york"])
    builder.declare(range(0, 1), 4, ["new", "york", "city"])
    builder.declare(range(0, 1), 7, ["NYC"])
    builder.declare(range(0, 1), 8, ["new", "york", "city"])
    builder.declare(range(1, 2), 11, ["underground", "train"])
    enhancer = builder.build()
    _check(
        enhancer,
        {
            0: (0, 3),
            1: (3, 5),
            2: (0, 1),
            3: (1, 3),
            4: (0, 1),
            5: (1, 2),
            6: (2, 3),
            7: (0, 3),
            8: (0, 1),
            9: (1, 2),
            10: (2, 3),
            11: (3, 4),
            12: (4, 5),
        },
    )


def test_bigger_growing():
    builder = QueryEnhancerBuilder(["NYC", "subway"])
    builder.declare(range(0, 1), 2, ["new", "york", "city"])
    enhancer = builder.build()
    _check(enhancer, {0: (0, 3), 1: (3, 4), 2: (0, 1), 3: (1, 2), 4: (2, 3)})


def test_middle_query_growing():
    builder = QueryEnhancerBuilder(["great", "awesome", "NYC", "subway"])
    builder.declare(range(2, 3), 4, ["new", "york", "city"])
    enhancer = builder.build()
    _check(
        enhancer,
        {0: (0, 1), 1: (1, 2), 2: (2, 5), 3: (5, 6), 4: (2, 3), 5: (3, 4), 6: (4, 5)},
    )


def test_end_query_growing():
    builder = QueryEnhancerBuilder(["NYC", "subway"])
    builder.declare(range(1, 2), 2, ["underground", "train"])
    enhancer = builder.build()
    _check(enhancer, {0: (0, 1), 1: (1, 3), 2: (1, 2), 3: (2, 3)})


def test_multiple_growings():
    builder = QueryEnhancerBuilder(["great", "awesome", "NYC", "subway"])
    builder.declare(range(2, 3), 4, ["new", "york", "city"])
    builder.declare(range(3, 4), 7, ["underground", "train"])
    enhancer = builder.build()
    _check(
        enhancer,
        {
            0: (0, 1),
            1: (1, 2),
            2: (2, 5),
            3: (5, 7),
            4: (2, 3),
            5: (3, 4),
            6: (4, 5),
            7: (5, 6),
            8: (6, 7),
        },
    )


def test_multiple_probable_growings():
    builder = QueryEnhancerBuilder(["great", "awesome", "NYC", "subway"])
    builder.declare(range(2, 3), 4, ["new", "york", "city"])
    builder.declare(range(3, 4), 7, ["underground", "train"])
    builder.declare(range(0, 2), 9, ["good"])
    builder.declare(range(1, 3), 10, ["NY"])
    builder.declare(range(2, 4), 11, ["metro"])
    enhancer = builder.build()
    _check(
        enhancer,
        {
            0: (0, 1),
            1: (1, 2),
            2: (2, 5),
            3: (5, 7),
            4: (2, 3),
            5: (3, 4),
            6: (4, 5),
            7: (5, 6),
            8: (6, 7),
            9: (0, 2),
            10: (1, 5),
            11: (2, 5),
        },
    )


def test_rewrite_refused_when_already_in_query():
    query = ["new", "york", "city", "subway"]
    assert rewrite_range_with(query, range(0, 2), ["new", "york", "city"]) is False


def test_rewrite_refused_when_not_longer():
    query = ["new", "york", "city", "subway"]
    assert rewrite_range_with(query, range(0, 3), ["new", "york"]) is False
    assert rewrite_range_with(query, range(0, 1), ["ny"]) is False


def test_rewrite_accepted_when_longer_and_new():
    query = ["NYC", "subway"]
    assert rewrite_range_with(query, range(0, 1), ["new", "york", "city"]) is True


def test_undeclared_real_index_raises():
    enhancer = QueryEnhancerBuilder(["alpha"]).build()
    assert enhancer.replacement(0) == range(0, 1)
    with pytest.raises(ValueError):
        enhancer.replacement(5)