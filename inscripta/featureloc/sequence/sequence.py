from typing import Optional, Union

from Bio.Seq import Seq

from inscripta.featureloc import AbstractSequence
from inscripta.featureloc.exc import AlphabetError, InvalidPositionException, TopologyException
from inscripta.featureloc.sequence.alphabet import Alphabet
from inscripta.featureloc.sequence.topology import Topology
from inscripta.featureloc.util.object_validation import ObjectValidation


class Sequence(AbstractSequence):
    """A sequence with an alphabet and a topology. Sequences are immutable; edits return new Sequences."""

    sequence: Seq

    def __init__(
        self,
        data: Union[str, Seq],
        alphabet: Alphabet = Alphabet.NT_EXTENDED_GAPPED,
        id: Optional[str] = None,
        topology: Topology = Topology.LINEAR,
        validate_alphabet: bool = True,
    ):
        """
        Parameters
        ----------
        data
            The contents of the sequence
        alphabet
            Alphabet
        id
            Sequence name
        topology
            Linear or circular
        validate_alphabet
            Whether to validate this sequence against its alphabet
        """
        self.sequence = Seq(str(data))
        self.alphabet = alphabet
        self.id = id
        self.topology = topology
        self._len = len(self.sequence)
        if validate_alphabet:
            self._validate_alphabet()

    def __eq__(self, other):
        if type(other) is not Sequence:
            return False
        if self.id != other.id:
            return False
        if self.alphabet != other.alphabet:
            return False
        if self.topology != other.topology:
            return False
        return self.sequence == other.sequence

    def __hash__(self):
        return hash((self.id, self.alphabet, self.topology, str(self.sequence)))

    def __str__(self):
        """Returns the sequence data as a string"""
        return str(self.sequence)

    def __len__(self):
        return self._len

    def __getitem__(self, key: Union[int, slice]) -> "Sequence":
        """Returns a slice of the current Sequence as a new linear Sequence object"""
        if isinstance(key, int):
            key = slice(key, key + 1 if key != -1 else None)
        return self._derive(self.sequence[key], topology=Topology.LINEAR)

    def __repr__(self):
        return "<{}>".format(self.summary())

    def summary(self) -> str:
        """Returns a short string summary of this Sequence"""
        if self.id:
            id = self.id
        elif len(self) <= 20:
            id = "Sequence={}".format(str(self))
        else:
            id = "Sequence"
        return "{};\n  Alphabet={};\n  Length={};\n  Topology={}".format(
            id, self.alphabet.name, len(self), self.topology.value
        )

    def _validate_alphabet(self):
        """Raises AlphabetError if this Sequence does not conform to its alphabet"""
        if not self.alphabet.accepts(str(self)):
            raise AlphabetError("Invalid sequence for alphabet {}".format(self.alphabet.name))

    def _derive(self, data: Union[str, Seq], topology: Optional[Topology] = None) -> "Sequence":
        return Sequence(
            data,
            self.alphabet,
            id=self.id,
            topology=topology or self.topology,
            validate_alphabet=False,
        )

    @property
    def is_circular(self) -> bool:
        return self.topology is Topology.CIRCULAR

    @property
    def is_empty(self) -> bool:
        """Is this a len 0 sequence?"""
        return self._len == 0

    def reverse_complement(self) -> "Sequence":
        """Returns a new Sequence corresponding to the reverse complement of this Sequence"""
        if not self.alphabet.is_nucleotide_alphabet():
            raise AlphabetError("Cannot reverse complement sequence with alphabet {}".format(self.alphabet))
        return self._derive(self.sequence.reverse_complement())

    def append(self, other: "Sequence") -> "Sequence":
        """Returns a new Sequence consisting of other sequence appended to the end of this Sequence"""
        if self.alphabet != other.alphabet:
            raise ValueError("Sequences must have same alphabet: {} != {}".format(self.alphabet, other.alphabet))
        return self._derive(self.sequence + other.sequence)

    def _coerce(self, data: Union[str, "Sequence"]) -> str:
        data = str(data)
        if not self.alphabet.accepts(data):
            raise AlphabetError("Invalid sequence for alphabet {}".format(self.alphabet.name))
        return data

    def insert(self, at: int, data: Union[str, "Sequence"]) -> "Sequence":
        """Returns a new Sequence with data inserted before position ``at``

        Parameters
        ----------
        at
            0-based insertion point. ``len(self)`` appends.
        data
            Bases to insert
        """
        ObjectValidation.require_position_in_range(at, self._len)
        data = self._coerce(data)
        content = str(self)
        return self._derive(content[:at] + data + content[at:])

    def delete(self, at: int, count: int) -> "Sequence":
        """Returns a new Sequence with ``count`` bases removed starting at position ``at``"""
        if count < 0:
            raise InvalidPositionException("Cannot delete a negative number of bases: {}".format(count))
        ObjectValidation.require_position_in_range(at, self._len)
        ObjectValidation.require_position_in_range(at + count, self._len)
        content = str(self)
        return self._derive(content[:at] + content[at + count :])

    def replace(self, at: int, data: Union[str, "Sequence"]) -> "Sequence":
        """Returns a new Sequence with the bases starting at position ``at`` overwritten by data"""
        data = self._coerce(data)
        ObjectValidation.require_position_in_range(at, self._len)
        ObjectValidation.require_position_in_range(at + len(data), self._len)
        content = str(self)
        return self._derive(content[:at] + data + content[at + len(data) :])

    def rotate(self, n: int) -> "Sequence":
        """Returns a new circular Sequence whose first base is the base at position ``n`` of this Sequence.
        Negative values rotate the other way."""
        if not self.is_circular:
            raise TopologyException("Only circular sequences can be rotated")
        if self.is_empty:
            return self
        n %= self._len
        content = str(self)
        return self._derive(content[n:] + content[:n])
