from enum import Enum
from functools import total_ordering

from inscripta.featureloc.exc import UnsupportedOperationException


@total_ordering
class Strand(Enum):
    PLUS = 1
    MINUS = -1

    def __str__(self):
        return str(self.to_symbol())

    @staticmethod
    def from_symbol(value: str):
        """Converts string representation of a strand to a Strand"""
        if value == "+":
            return Strand.PLUS
        if value == "-":
            return Strand.MINUS
        raise ValueError("{} is not a valid string representation of a strand".format(value))

    def to_symbol(self) -> str:
        return "+" if self == Strand.PLUS else "-"

    @staticmethod
    def from_int(value: int):
        """Converts integer representation of a strand to a Strand"""
        return Strand(value)  # Raises ValueError for invalid int

    def __lt__(self, other):
        if not type(other) is Strand:
            raise ValueError("Cannot compare {} to {}".format(type(self).__name__, type(other).__name__))
        return self.value > other.value

    def reverse(self):
        """Returns the opposite of this Strand"""
        if self == Strand.PLUS:
            return Strand.MINUS
        if self == Strand.MINUS:
            return Strand.PLUS
        raise UnsupportedOperationException("Not implemented for {}".format(self))
