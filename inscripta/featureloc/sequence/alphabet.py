from enum import Enum


class Alphabet(Enum):
    NT_STRICT = "ACGT"
    NT_EXTENDED = "ATUCGNWSMKRYBDHV"
    NT_STRICT_GAPPED = "ACGT-"
    NT_EXTENDED_GAPPED = "ATUCGNWSMKRYBDHV-"
    AA = "GALMFWKQESPVICYHRNDT*"
    GENERIC = "ABCDEFGHIJKLMNOPQRSTUVWXYZ-"

    def is_nucleotide_alphabet(self) -> bool:
        return self in (
            Alphabet.NT_STRICT,
            Alphabet.NT_EXTENDED,
            Alphabet.NT_STRICT_GAPPED,
            Alphabet.NT_EXTENDED_GAPPED,
        )

    def accepts(self, data: str) -> bool:
        """Returns True iff every character of data (case-insensitive) belongs to this Alphabet"""
        return set(data.upper()).issubset(self.value)
