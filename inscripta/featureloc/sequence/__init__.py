"""
The :class:`Sequence` class defines an immutable sequence with an :class:`Alphabet` and a :class:`Topology`.
Editing a :class:`Sequence` returns a new one; :class:`~inscripta.featureloc.record.Record` keeps feature
locations in step with such edits.
"""

from inscripta.featureloc.sequence.alphabet import Alphabet  # noqa: F401
from inscripta.featureloc.sequence.topology import Topology  # noqa: F401
from inscripta.featureloc.sequence.sequence import Sequence  # noqa: F401
