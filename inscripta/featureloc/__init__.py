__version__ = "0.3.0"

from abc import ABC, abstractmethod
from typing import Optional, Tuple, Union

from Bio.SeqFeature import SimpleLocation, CompoundLocation


class AbstractRegion(ABC):
    """Shared AbstractRegion base class simplifies imports for type checking"""

    # The first coordinate of this Region in reading order
    head: int

    # The last coordinate of this Region in reading order
    tail: int

    # The number of bases spanned by this Region
    length: int

    def __len__(self):
        return self.length

    @abstractmethod
    def __eq__(self, other):
        """Returns True iff this Region is equal to other object"""

    @abstractmethod
    def __hash__(self):
        """Returns a hash code satisfying region1 == region2 => hash(region1) == hash(region2)"""

    @abstractmethod
    def resize(self, modifier: "AbstractModifier") -> "AbstractRegion":
        """Returns a new Region resized by the given Modifier"""

    @abstractmethod
    def complement(self) -> "AbstractRegion":
        """Returns the equivalent Region read on the opposite strand"""

    @abstractmethod
    def locate(self, sequence: "AbstractSequence") -> "AbstractSequence":
        """Returns the subsequence of the given sequence covered by this Region, in reading order"""


class AbstractModifier(ABC):
    """Shared AbstractModifier base class simplifies imports for type checking"""

    @abstractmethod
    def apply(self, head: int, tail: int) -> Tuple[int, int]:
        """Returns the resized (head, tail) pair"""

    @abstractmethod
    def complement(self) -> "AbstractModifier":
        """Returns the equivalent Modifier for the complement strand"""

    @abstractmethod
    def __str__(self):
        """Returns the textual form of this Modifier"""


class AbstractLocation(ABC):
    """Shared AbstractLocation base class simplifies imports for type checking"""

    # The number of bases covered by this Location. Zero-length boundaries have length 0,
    # single-base ambiguity windows have length 1.
    length: int

    def __len__(self):
        """Returns the number of bases covered by this Location."""
        return self.length

    @abstractmethod
    def __str__(self):
        """Returns the canonical text form of this Location (1-based)"""

    @abstractmethod
    def __eq__(self, other):
        """Returns True iff this Location is structurally equal to other object"""

    @abstractmethod
    def __hash__(self):
        """Returns a hash code satisfying location1 == location2 => hash(location1) == hash(location2)"""

    @abstractmethod
    def __repr__(self):
        """Returns the 'official' string representation of this Location"""

    @property
    @abstractmethod
    def is_contiguous(self) -> bool:
        """Returns True iff this Location describes a single span (or boundary) on its sequence"""

    @property
    @abstractmethod
    def partial_count(self) -> int:
        """Returns the number of boundaries of this Location flagged as partial"""

    @abstractmethod
    def region(self) -> AbstractRegion:
        """Lowers this Location to a concrete Region. List locations produce one Region per element."""

    @abstractmethod
    def complement(self) -> "AbstractLocation":
        """Returns this Location read on the opposite strand. Complementing twice returns the original."""

    @abstractmethod
    def reverse(self, length: int) -> "AbstractLocation":
        """Returns this Location on the reversed (not complemented) sequence of the given length.

        Parameters
        ----------
        length
            Length of the sequence this Location is anchored to
        """

    @abstractmethod
    def normalize(self, length: int) -> "AbstractLocation":
        """Returns this Location reduced to the ``[0, length)`` window of a circular sequence.

        Parameters
        ----------
        length
            Length of the circular sequence
        """

    @abstractmethod
    def shift(self, at: int, n: int) -> "AbstractLocation":
        """Returns this Location updated for an insertion (``n > 0``) or deletion (``n < 0``)
        of ``abs(n)`` bases at position ``at``.

        Parameters
        ----------
        at
            0-based position of the edit
        n
            Number of bases inserted (positive) or deleted (negative)
        """

    @abstractmethod
    def expand(self, at: int, n: int) -> "AbstractLocation":
        """Same as :meth:`shift`, except that a single base sitting exactly at the insertion
        point anchors the insertion instead of moving with it."""

    @abstractmethod
    def crop(self, start: int, end: int) -> Optional["AbstractLocation"]:
        """Returns the part of this Location lying within ``[start, end)``, re-anchored so that ``start`` becomes
        position 0. Ends cut off by the window are flagged partial where the Location can record it.

        Parameters
        ----------
        start
            0-based start of the window
        end
            0-based exclusive end of the window

        Returns
        -------
        The cropped Location, or None if no part of this Location lies within the window.
        """

    @abstractmethod
    def to_biopython(self) -> Union[SimpleLocation, CompoundLocation]:
        """Returns a BioPython location; since they do not have a shared base class, we need a union"""


class AbstractSequence(ABC):
    """Shared AbstractSequence base class simplifies imports for type checking"""

    _len: int

    def __len__(self):
        return self._len

    @property
    @abstractmethod
    def is_circular(self) -> bool:
        """Returns True iff the end of this Sequence is joined to its start"""

    @abstractmethod
    def __getitem__(self, key) -> "AbstractSequence":
        """Returns a slice of this Sequence"""

    @abstractmethod
    def reverse_complement(self) -> "AbstractSequence":
        """Returns the reverse complement of this Sequence"""

    @abstractmethod
    def append(self, other: "AbstractSequence") -> "AbstractSequence":
        """Returns a new Sequence with other appended to this one"""
