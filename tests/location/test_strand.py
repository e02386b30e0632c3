import pytest

from inscripta.featureloc.location import Strand


class TestStrand:
    @pytest.mark.parametrize("symbol,strand", [("+", Strand.PLUS), ("-", Strand.MINUS)])
    def test_symbol(self, symbol, strand):
        assert Strand.from_symbol(symbol) == strand
        assert strand.to_symbol() == symbol
        assert str(strand) == symbol

    def test_from_symbol_error(self):
        with pytest.raises(ValueError):
            Strand.from_symbol(".")

    def test_from_int(self):
        assert Strand.from_int(1) == Strand.PLUS
        assert Strand.from_int(-1) == Strand.MINUS
        with pytest.raises(ValueError):
            Strand.from_int(0)

    def test_reverse(self):
        assert Strand.PLUS.reverse() == Strand.MINUS
        assert Strand.MINUS.reverse() == Strand.PLUS

    def test_order(self):
        assert Strand.PLUS < Strand.MINUS
        assert sorted([Strand.MINUS, Strand.PLUS]) == [Strand.PLUS, Strand.MINUS]
        with pytest.raises(ValueError):
            Strand.PLUS < 1
