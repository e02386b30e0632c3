import random

import pytest

from inscripta.featureloc.exc import LocationException
from inscripta.featureloc.location import (
    Ambiguous,
    Between,
    Complemented,
    Joined,
    Ordered,
    Point,
    Ranged,
    join,
    location_key,
    location_less,
    order,
    parse_location,
)


class TestJoin:
    @pytest.mark.parametrize(
        "locations,expected",
        [
            ([Point(0)], Point(0)),
            ([Ranged(0, 3), Ranged(0, 3)], Ranged(0, 3)),
            ([Between(3), Ranged(3, 6)], Ranged(3, 6)),
            ([Ranged(0, 3), Between(3)], Ranged(0, 3)),
            ([Point(2), Between(3)], Point(2)),
            ([Between(2), Ranged(3, 6)], Joined([Between(2), Ranged(3, 6)])),
            ([Ranged(0, 3, False, True), Ranged(3, 6)], Ranged(0, 6)),
            ([Ranged(0, 3), Ranged(3, 6, True, False)], Ranged(0, 6)),
            ([Ranged(0, 3, True, True), Ranged(3, 6, True, True)], Ranged(0, 6, True, True)),
            ([Ranged(0, 3), Ranged(3, 6)], Joined([Ranged(0, 3), Ranged(3, 6)])),
            (
                [Ranged(0, 3, True, False), Ranged(3, 6, False, True)],
                Joined([Ranged(0, 3, True), Ranged(3, 6, False, True)]),
            ),
            ([Point(2), Point(3)], Joined([Point(2), Point(3)])),
            ([Ranged(0, 3), Ranged(6, 9)], Joined([Ranged(0, 3), Ranged(6, 9)])),
            (
                [Complemented(Ranged(3, 6)), Complemented(Ranged(0, 3, False, True))],
                Complemented(Ranged(0, 6)),
            ),
            (
                [Complemented(Point(2)), Between(3)],
                Joined([Complemented(Point(2)), Between(3)]),
            ),
            (
                [Joined([Ranged(0, 3), Ranged(6, 9)]), Ranged(12, 15)],
                Joined([Ranged(0, 3), Ranged(6, 9), Ranged(12, 15)]),
            ),
            ([Ambiguous(0, 3), Ambiguous(0, 3)], Ambiguous(0, 3)),
        ],
    )
    def test_join(self, locations, expected):
        assert join(*locations) == expected

    @pytest.mark.parametrize(
        "locations,expected",
        [
            ([Ranged(0, 3), Ranged(3, 6)], Ranged(0, 6)),
            ([Point(2), Point(3)], Ranged(2, 4)),
            ([Point(2), Ranged(3, 6, False, True)], Ranged(2, 6, False, True)),
            ([Ranged(0, 3), Ranged(4, 6)], Joined([Ranged(0, 3), Ranged(4, 6)])),
        ],
    )
    def test_join_force(self, locations, expected):
        assert join(*locations, force=True) == expected

    def test_join_error(self):
        with pytest.raises(LocationException):
            join()

    def test_constructor_does_not_merge(self):
        joined = Joined([Ranged(0, 3, False, True), Ranged(3, 6)])
        assert joined.num_locations == 2
        assert str(joined) == "join(1..>3,4..6)"


class TestOrder:
    def test_order(self):
        assert order(Point(0)) == Point(0)
        assert order(Point(0), Point(5)) == Ordered([Point(0), Point(5)])
        assert order(Ranged(0, 3), Ranged(3, 6)) == Ordered([Ranged(0, 3), Ranged(3, 6)])

    def test_order_error(self):
        with pytest.raises(LocationException):
            order()


class TestLocationLess:
    def test_text_order(self):
        expected = [parse_location(text) for text in ["1", "1..42", "42", "42..723", "723"]]
        shuffled = list(expected)
        random.Random(0).shuffle(shuffled)
        assert sorted(shuffled) == expected
        assert sorted(shuffled, key=location_key) == expected
        for a, b in zip(expected, expected[1:]):
            assert location_less(a, b)
            assert not location_less(b, a)

    @pytest.mark.parametrize(
        "a,b",
        [
            (Ranged(0, 42), Ranged(0, 42, True)),
            (Ranged(0, 42, True), Ranged(0, 42, True, True)),
            (Between(0), Point(0)),
            (Ranged(0, 3), Joined([Ranged(0, 3), Ranged(6, 9)])),
            (Joined([Ranged(0, 3), Ranged(6, 9)]), Joined([Ranged(0, 3), Ranged(7, 9)])),
            (Complemented(Ranged(0, 3)), Ranged(1, 3)),
            (Ranged(0, 3), Complemented(Ranged(0, 4))),
        ],
    )
    def test_less(self, a, b):
        assert location_less(a, b)
        assert a < b
        assert not location_less(b, a)

    def test_irreflexive(self):
        for location in [Point(3), Ranged(3, 6), Complemented(Ranged(3, 6)), Joined([Point(0), Point(4)])]:
            assert not location_less(location, location)

    def test_complement_sorts_as_its_location(self):
        assert location_key(Complemented(Ranged(3, 6))) == location_key(Ranged(3, 6))
