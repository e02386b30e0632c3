import pytest

from inscripta.featureloc.exc import LocatorSyntaxError
from inscripta.featureloc.feature import parse_selector
from inscripta.featureloc.locator import (
    all_locator,
    as_locator,
    filter_locator,
    location_locator,
    relative_locator,
    resize_locator,
)
from inscripta.featureloc.location import Complemented, Point, Ranged
from inscripta.featureloc.region import HeadHead, HeadTail, Segment


class TestAsLocator:
    @pytest.mark.parametrize(
        "text,locator",
        [
            ("^..$", relative_locator(HeadTail(0, 0))),
            ("1", location_locator(Point(0))),
            ("3..6", location_locator(Ranged(2, 6))),
            ("complement(3..6)", location_locator(Complemented(Ranged(2, 6)))),
            ("exon", filter_locator(parse_selector("exon"))),
            ("exon/gene=INS", filter_locator(parse_selector("exon"))),
            ("/gene=INS", filter_locator(parse_selector("/gene=INS"))),
            ("@^-20..^", resize_locator(all_locator, HeadHead(-20, 0))),
            ("@^..$", resize_locator(all_locator, HeadTail(0, 0))),
            ("exon@^..$", resize_locator(filter_locator(parse_selector("exon")), HeadTail(0, 0))),
        ],
    )
    def test_as_locator(self, ins_table, ins_sequence, text, locator):
        assert as_locator(text)(ins_table, ins_sequence) == locator(ins_table, ins_sequence)

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("^..$", [Segment(0, 465)]),
            ("^", [Segment(0, 0)]),
            ("$-10..$", [Segment(455, 465)]),
            ("3..6", [Segment(2, 6)]),
            ("10^11", [Segment(10, 10)]),
            ("complement(3..6)", [Segment(6, 2)]),
            ("exon", [Segment(0, 42), Segment(42, 246), Segment(246, 465)]),
            ("exon@^+5..$-5", [Segment(5, 37), Segment(47, 241), Segment(251, 460)]),
            ("CDS@^..^+3", [Segment(59, 62)]),
            ("CDS@$-3..$", [Segment(389, 392)]),
            ("complement(3..6)@^..^+1", [Segment(6, 5)]),
            ("mat_peptide/product=chain", [Segment(131, 221), Segment(326, 389)]),
            ("misc_feature", []),
        ],
    )
    def test_regions(self, ins_table, ins_sequence, text, expected):
        assert as_locator(text)(ins_table, ins_sequence) == expected

    def test_all_locator(self, ins_table, ins_sequence):
        regions = as_locator("@^..$")(ins_table, ins_sequence)
        assert regions == [feature.region() for feature in ins_table]
        assert regions[0] == Segment(0, 465)

    def test_only_length_is_used(self, ins_table):
        assert as_locator("$..$")(ins_table, "ACGT") == [Segment(4, 4)]
        assert as_locator("^-2..$+2")([], range(10)) == [Segment(-2, 12)]

    @pytest.mark.parametrize(
        "text,position",
        [
            ("@", 1),
            ("exon/gene=[@", 12),
            ("exon/gene=INS@", 14),
            ("a@^@$", 3),
            ("ex on", 0),
            ("exon@^..x", 8),
            ("exon/=INS", 5),
        ],
    )
    def test_as_locator_error(self, text, position):
        with pytest.raises(LocatorSyntaxError) as e:
            as_locator(text)
        assert e.value.text == text
        assert e.value.position == position
