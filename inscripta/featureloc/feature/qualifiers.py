"""
Feature qualifiers. :class:`Qualifiers` is an immutable, ordered multimap of qualifier names to values.

How a qualifier is written depends on its name: quoted qualifiers are written as ``/name="value"``, literal
qualifiers as ``/name=value`` and toggle qualifiers as a bare ``/name``. The name lists live in an immutable
:class:`QualifierClassification` that is passed to :func:`format_qualifier` and :func:`parse_qualifier`.
Parsing a name that is not classified yet returns a new classification that includes it.
"""
import logging
import re
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union

from inscripta.featureloc.constants import (
    DEFAULT_LITERAL_QUALIFIERS,
    DEFAULT_QUOTED_QUALIFIERS,
    DEFAULT_TOGGLE_QUALIFIERS,
)
from inscripta.featureloc.exc import ValidationException

logger = logging.getLogger(__name__)

QualifierValue = Optional[str]
QualifierPair = Tuple[str, QualifierValue]

_QUALIFIER_REGEX = re.compile(r"/([A-Za-z0-9_'*-]+)(?:=(.*))?", re.S)


class Qualifiers:
    """Ordered multimap of qualifier names to values. A value of None denotes a toggle qualifier."""

    def __init__(self, pairs: Iterable[QualifierPair] = ()):
        self._pairs: Tuple[QualifierPair, ...] = tuple((str(name), value) for name, value in pairs)

    @staticmethod
    def from_dict(qualifiers: Dict[str, Union[QualifierValue, List[QualifierValue]]]) -> "Qualifiers":
        """Builds Qualifiers from a dictionary. List values produce one pair per element, in order."""
        pairs = []
        for name, values in qualifiers.items():
            if isinstance(values, (list, tuple)):
                pairs.extend((name, value) for value in values)
            else:
                pairs.append((name, values))
        return Qualifiers(pairs)

    def to_dict(self) -> Dict[str, List[QualifierValue]]:
        """Returns a dictionary of names to the list of their values, in order of first appearance"""
        result: Dict[str, List[QualifierValue]] = {}
        for name, value in self._pairs:
            result.setdefault(name, []).append(value)
        return result

    def __repr__(self):
        return "<Qualifiers {}>".format(", ".join(f"{name}={value!r}" for name, value in self._pairs))

    def __eq__(self, other):
        if type(other) is not Qualifiers:
            return False
        return self._pairs == other._pairs

    def __hash__(self):
        return hash(self._pairs)

    def __iter__(self) -> Iterator[QualifierPair]:
        return iter(self._pairs)

    def __len__(self):
        return len(self._pairs)

    def __contains__(self, name: str) -> bool:
        return any(key == name for key, _ in self._pairs)

    def items(self) -> List[QualifierPair]:
        return list(self._pairs)

    def names(self) -> List[str]:
        """Distinct qualifier names in order of first appearance"""
        return list(dict.fromkeys(name for name, _ in self._pairs))

    def get(self, name: str) -> List[str]:
        """Returns every non-toggle value recorded for the given name"""
        return [value for key, value in self._pairs if key == name and value is not None]

    def first(self, name: str, default: QualifierValue = None) -> QualifierValue:
        values = self.get(name)
        return values[0] if values else default

    def with_value(self, name: str, value: QualifierValue = None) -> "Qualifiers":
        """Returns a copy with the given pair appended"""
        return Qualifiers(self._pairs + ((name, value),))

    def without(self, name: str) -> "Qualifiers":
        """Returns a copy with every value of the given name removed"""
        return Qualifiers(pair for pair in self._pairs if pair[0] != name)


@dataclass(frozen=True)
class QualifierClassification:
    """Names of the qualifiers written with quotes, without quotes, and without a value"""

    quoted: FrozenSet[str] = frozenset()
    literal: FrozenSet[str] = frozenset()
    toggle: FrozenSet[str] = frozenset()

    def extend(
        self,
        quoted: Iterable[str] = (),
        literal: Iterable[str] = (),
        toggle: Iterable[str] = (),
    ) -> "QualifierClassification":
        """Returns a new classification including the given names"""
        return QualifierClassification(
            quoted=self.quoted.union(quoted),
            literal=self.literal.union(literal),
            toggle=self.toggle.union(toggle),
        )

    def is_classified(self, name: str) -> bool:
        return name in self.quoted or name in self.literal or name in self.toggle


DEFAULT_CLASSIFICATION = QualifierClassification(
    quoted=DEFAULT_QUOTED_QUALIFIERS,
    literal=DEFAULT_LITERAL_QUALIFIERS,
    toggle=DEFAULT_TOGGLE_QUALIFIERS,
)


def format_qualifier(
    name: str, value: QualifierValue, classification: QualifierClassification = DEFAULT_CLASSIFICATION
) -> str:
    """Writes a single qualifier. Names that are not classified are written quoted."""
    if value is None or name in classification.toggle:
        return f"/{name}"
    if name in classification.literal:
        return f"/{name}={value}"
    escaped = value.replace('"', '""')
    return f'/{name}="{escaped}"'


def parse_qualifier(
    text: str, classification: QualifierClassification = DEFAULT_CLASSIFICATION
) -> Tuple[str, QualifierValue, QualifierClassification]:
    """Reads a single qualifier written as ``/name``, ``/name=value`` or ``/name="value"``.

    Parameters
    ----------
    text
        The qualifier text
    classification
        Known qualifier names

    Returns
    -------
    The name, the value (None for toggles) and the classification. If the name was not classified, the returned
    classification is extended with it according to how it was written; the input classification is unchanged.
    """
    match = _QUALIFIER_REGEX.fullmatch(text)
    if not match:
        raise ValidationException(f"Invalid qualifier: {text!r}")
    name, raw = match.group(1), match.group(2)
    if raw is None:
        value, style = None, "toggle"
    elif len(raw) >= 2 and raw.startswith('"') and raw.endswith('"'):
        value, style = raw[1:-1].replace('""', '"'), "quoted"
    else:
        value, style = raw, "literal"
    if not classification.is_classified(name):
        logger.debug(f"Classifying unknown qualifier {name} as {style}")
        classification = classification.extend(**{style: [name]})
    return name, value, classification
