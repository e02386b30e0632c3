import random

import pytest

from inscripta.featureloc.exc import UnsupportedOperationException
from inscripta.featureloc.region import (
    Modifier,
    Head,
    Tail,
    HeadTail,
    HeadHead,
    TailTail,
    Segment,
    Regions,
    minimize,
    segment_key,
    invert_linear,
    invert_circular,
)
from inscripta.featureloc.sequence import Sequence, Topology


class TestSegment:
    def test_init(self):
        segment = Segment(3, 6)
        assert segment.head == 3
        assert segment.tail == 6
        assert len(segment) == 3
        assert not segment.is_reversed
        reversed_segment = Segment(6, 3)
        assert len(reversed_segment) == 3
        assert reversed_segment.is_reversed
        assert (reversed_segment.start, reversed_segment.end) == (3, 6)
        assert len(Segment(4, 4)) == 0

    @pytest.mark.parametrize(
        "segment,modifier,expected",
        [
            (Segment(3, 6), Head(0), Segment(3, 3)),
            (Segment(3, 6), Tail(0), Segment(6, 6)),
            (Segment(3, 6), HeadTail(2, -2), Segment(5, 5)),
            (Segment(3, 6), HeadTail(-1, 1), Segment(2, 7)),
            (Segment(3, 6), HeadHead(0, -1), Segment(3, 3)),
            (Segment(3, 6), TailTail(2, -1), Segment(8, 8)),
            (Segment(6, 3), HeadTail(0, 1), Segment(6, 2)),
            (Segment(6, 3), Head(1), Segment(5, 5)),
        ],
    )
    def test_resize(self, segment, modifier, expected):
        assert segment.resize(modifier) == expected

    def test_complement(self):
        assert Segment(3, 6).complement() == Segment(6, 3)
        assert Segment(3, 6).complement().complement() == Segment(3, 6)

    def test_equals(self):
        assert Segment(1, 2) == Segment(1, 2)
        assert Segment(1, 2) != Segment(2, 1)
        assert Segment(1, 2) != Regions([Segment(1, 2)])
        assert len({Segment(1, 2), Segment(1, 2)}) == 1


class TestRegions:
    def test_init(self):
        regions = Regions([Segment(3, 6), Segment(13, 16)])
        assert len(regions) == 6
        assert regions.head == 3
        assert regions.tail == 16
        assert regions.num_regions == 2
        assert list(regions) == [Segment(3, 6), Segment(13, 16)]
        empty = Regions()
        assert len(empty) == 0
        assert (empty.head, empty.tail) == (0, 0)

    def test_init_error(self):
        with pytest.raises(TypeError):
            Regions([(3, 6)])

    @pytest.mark.parametrize(
        "regions,modifier,expected",
        [
            (Regions([Segment(3, 6), Segment(13, 16)]), Head(7), Segment(17, 17)),
            (Regions([Segment(3, 6), Segment(13, 16)]), Tail(-7), Segment(2, 2)),
            (Regions([Segment(3, 6), Segment(13, 16)]), HeadTail(4, -4), Segment(14, 14)),
            (
                Regions([Segment(3, 6), Segment(13, 16)]),
                HeadHead(-2, 4),
                Regions([Segment(1, 6), Segment(13, 14)]),
            ),
            (
                Regions([Segment(3, 6), Segment(13, 16)]),
                TailTail(-4, 2),
                Regions([Segment(5, 6), Segment(13, 18)]),
            ),
            (Regions([Segment(13, 16), Segment(3, 6)]), Head(7), Segment(7, 7)),
            (
                Regions([Segment(0, 10), Segment(20, 30)]),
                HeadTail(2, -3),
                Regions([Segment(2, 10), Segment(20, 27)]),
            ),
            # an offset reaching the end of a member stays in that member
            (Regions([Segment(0, 10), Segment(20, 30)]), Head(10), Segment(10, 10)),
            (Regions([Segment(0, 10), Segment(20, 30)]), HeadTail(0, 0), Regions([Segment(0, 10), Segment(20, 30)])),
            # members outside of the resized span are dropped
            (
                Regions([Segment(0, 10), Segment(20, 30), Segment(40, 50)]),
                HeadTail(12, -12),
                Segment(22, 28),
            ),
            # the new head lies after the new tail
            (Regions([Segment(0, 10), Segment(20, 30)]), HeadHead(15, 5), Segment(25, 25)),
            (Regions(), HeadTail(1, -1), Regions()),
        ],
    )
    def test_resize(self, regions, modifier, expected):
        assert regions.resize(modifier) == expected

    def test_resize_never_grows(self):
        regions = Regions([Segment(0, 10), Segment(20, 30), Segment(40, 50)])
        for modifier in [HeadTail(-5, 5), HeadHead(-5, 35), TailTail(-35, 5), HeadTail(5, -5)]:
            resized = regions.resize(modifier)
            assert not isinstance(resized, Regions) or resized.num_regions <= regions.num_regions

    def test_complement(self):
        regions = Regions([Segment(0, 2), Segment(4, 6)])
        assert regions.complement() == Regions([Segment(6, 4), Segment(2, 0)])
        assert regions.complement().complement() == regions

    def test_resize_unknown_modifier(self):
        class Stretch(Modifier):
            def _apply_forward(self, head, tail):
                return head, tail + 1

            def complement(self):
                return self

            def __str__(self):
                return "stretch"

        assert Segment(0, 2).resize(Stretch()) == Segment(0, 3)
        with pytest.raises(UnsupportedOperationException):
            Regions([Segment(0, 2), Segment(4, 6)]).resize(Stretch())


class TestLocate:
    @pytest.mark.parametrize(
        "region,expected",
        [
            (Segment(2, 6), "GCAT"),
            (Segment(6, 2), "ATGC"),
            (Regions([Segment(0, 2), Segment(4, 6)]), "ATAT"),
            (Regions([Segment(6, 4), Segment(2, 0)]), "ATAT"),
        ],
    )
    def test_locate(self, region, expected):
        sequence = Sequence("ATGCATGC")
        assert str(region.locate(sequence)) == expected
        assert len(region.complement()) == len(region)
        assert str(region.complement().locate(sequence)) == str(Sequence(expected).reverse_complement())

    @pytest.mark.parametrize(
        "region,expected",
        [
            (Segment(-3, 20), "AAAAACCCCCGGGGGTTTTT"),
            (Segment(-2, 5), "AAAAA"),
            (Segment(18, 23), "TT"),
            (Segment(22, 25), ""),
            (Segment(-10, -5), ""),
            (Segment(23, 15), "AAAAA"),
            (Segment(5, -2), "TTTTT"),
            (Regions([Segment(-2, 2), Segment(10, 12)]), "AAGG"),
        ],
    )
    def test_locate_overhang_linear(self, region, expected):
        assert str(region.locate(Sequence("AAAAACCCCCGGGGGTTTTT"))) == expected

    @pytest.mark.parametrize(
        "region,expected",
        [
            (Segment(-3, 20), "TTTAAAAACCCCCGGGGGTTTTT"),
            (Segment(18, 23), "TTAAA"),
            (Segment(23, 15), "TTTAAAAA"),
            (Segment(-25, -20), "TTTTT"),
            (Regions([Segment(-2, 2), Segment(10, 12)]), "TTAAGG"),
        ],
    )
    def test_locate_overhang_circular(self, region, expected):
        sequence = Sequence("AAAAACCCCCGGGGGTTTTT", topology=Topology.CIRCULAR)
        assert str(region.locate(sequence)) == expected


class TestMinimize:
    def test_segment_key(self):
        expected = [Segment(3, 13), Segment(4, 13), Segment(6, 14), Segment(6, 16)]
        shuffled = list(expected)
        random.Random(0).shuffle(shuffled)
        assert sorted(shuffled, key=segment_key) == expected
        reversed_expected = [Segment(13, 3), Segment(13, 4), Segment(14, 6), Segment(16, 6)]
        assert sorted(reversed(reversed_expected), key=segment_key) == reversed_expected

    def test_minimize(self):
        region = Regions([Segment(1, 3), Segment(6, 9), Segment(5, 3), Segment(6, 8), Segment(1, 3)])
        assert minimize(region) == [Segment(1, 5), Segment(6, 9)]
        assert minimize(Regions(minimize(region))) == minimize(region)

    def test_minimize_nested(self):
        region = Regions([Regions([Segment(10, 12), Segment(0, 2)]), Segment(2, 4)])
        assert minimize(region) == [Segment(0, 4), Segment(10, 12)]
        assert minimize(Segment(5, 1)) == [Segment(1, 5)]
        assert minimize(Regions()) == []


class TestInvert:
    @pytest.mark.parametrize(
        "region,length,expected",
        [
            (Segment(3, 5), 7, [Segment(0, 3), Segment(5, 7)]),
            (Segment(0, 7), 7, []),
            (Regions([Segment(5, 3), Segment(0, 1)]), 7, [Segment(1, 3), Segment(5, 7)]),
            (Regions(), 7, [Segment(0, 7)]),
        ],
    )
    def test_invert_linear(self, region, length, expected):
        assert invert_linear(region, length) == expected

    @pytest.mark.parametrize(
        "region,length,expected",
        [
            (Segment(3, 5), 7, [Regions([Segment(5, 7), Segment(0, 3)])]),
            (Segment(0, 3), 7, [Segment(3, 7)]),
            (Segment(5, 7), 7, [Segment(0, 5)]),
            (
                Regions([Segment(1, 2), Segment(4, 5)]),
                7,
                [Segment(2, 4), Regions([Segment(5, 7), Segment(0, 1)])],
            ),
        ],
    )
    def test_invert_circular(self, region, length, expected):
        assert invert_circular(region, length) == expected
