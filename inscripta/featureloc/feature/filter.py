"""
Feature filters and the selector syntax that builds them.

A selector is a feature key followed by any number of ``/``-delimited qualifier clauses, for example
``CDS/gene=INS/pseudo``. An empty key matches every feature. A clause ``name=value`` matches features that have a
``name`` qualifier containing ``value``; a bare ``name`` matches features that have the qualifier at all. A ``\\``
makes the next character literal, so that ``/`` and ``=`` can appear in values.
"""
from typing import Callable, Iterator, List, Optional, Tuple

from inscripta.featureloc.constants import (
    SELECTOR_CLAUSE_DELIMITER,
    SELECTOR_ESCAPE,
    SELECTOR_KEY_REGEX,
    SELECTOR_QUALIFIER_REGEX,
    SELECTOR_VALUE_DELIMITER,
)
from inscripta.featureloc.exc import SelectorSyntaxError
from inscripta.featureloc.feature.feature import Feature


class Filter:
    """Predicate over Features. Filters combine with ``&``, ``|`` and ``~``."""

    def __init__(self, predicate: Callable[[Feature], bool], description: str):
        self._predicate = predicate
        self.description = description

    def __call__(self, feature: Feature) -> bool:
        return self._predicate(feature)

    def __repr__(self):
        return f"<Filter {self.description}>"

    def __and__(self, other: "Filter") -> "Filter":
        return and_(self, other)

    def __or__(self, other: "Filter") -> "Filter":
        return or_(self, other)

    def __invert__(self) -> "Filter":
        return not_(self)


any_feature = Filter(lambda feature: True, "*")


def key(name: str) -> Filter:
    """Matches Features with the given key. An empty key matches every Feature."""
    if not name:
        return any_feature
    return Filter(lambda feature: feature.key == name, f"key={name}")


def qualifier(name: str, query: str = "") -> Filter:
    """Matches Features with a ``name`` qualifier whose value contains ``query``. Toggle qualifiers only match an
    empty query."""

    def predicate(feature: Feature) -> bool:
        for qualifier_name, value in feature.qualifiers:
            if qualifier_name != name:
                continue
            if value is None:
                if not query:
                    return True
            elif query in value:
                return True
        return False

    return Filter(predicate, f"{name}~{query}")


def and_(*filters: Filter) -> Filter:
    return Filter(
        lambda feature: all(f(feature) for f in filters),
        "({})".format(" & ".join(f.description for f in filters)),
    )


def or_(*filters: Filter) -> Filter:
    return Filter(
        lambda feature: any(f(feature) for f in filters),
        "({})".format(" | ".join(f.description for f in filters)),
    )


def not_(inner: Filter) -> Filter:
    return Filter(lambda feature: not inner(feature), f"~{inner.description}")


_Character = Tuple[int, str, bool]


def _scan(text: str) -> Iterator[_Character]:
    """Yields ``(position, character, escaped)`` for every character of a selector"""
    pos = 0
    while pos < len(text):
        character = text[pos]
        if character == SELECTOR_ESCAPE:
            if pos + 1 == len(text):
                raise SelectorSyntaxError(text, pos, "dangling escape")
            yield pos, text[pos + 1], True
            pos += 2
        else:
            yield pos, character, False
            pos += 1


def _split_clauses(text: str) -> List[Tuple[int, List[_Character]]]:
    clauses = [(0, [])]
    for pos, character, escaped in _scan(text):
        if character == SELECTOR_CLAUSE_DELIMITER and not escaped:
            clauses.append((pos + 1, []))
        else:
            clauses[-1][1].append((pos, character, escaped))
    return clauses


def _parse_qualifier_clause(text: str, start: int, characters: List[_Character]) -> Filter:
    name_characters: List[str] = []
    value_characters: Optional[List[str]] = None
    for _, character, escaped in characters:
        if value_characters is None and character == SELECTOR_VALUE_DELIMITER and not escaped:
            value_characters = []
        elif value_characters is None:
            name_characters.append(character)
        else:
            value_characters.append(character)
    name = "".join(name_characters)
    if not name:
        raise SelectorSyntaxError(text, start, "empty qualifier name")
    if not SELECTOR_QUALIFIER_REGEX.fullmatch(name):
        raise SelectorSyntaxError(text, start, f"invalid qualifier name {name!r}")
    return qualifier(name, "".join(value_characters or []))


def parse_selector(text: str) -> Filter:
    """Builds a Filter from a selector such as ``exon/gene=INS``. Clauses are combined left to right with AND.

    Raises
    ------
    SelectorSyntaxError
        If the key or a qualifier name is invalid, or the selector ends with an escape character.
    """
    clauses = _split_clauses(text)
    _, key_characters = clauses[0]
    key_name = "".join(character for _, character, _ in key_characters)
    if not SELECTOR_KEY_REGEX.fullmatch(key_name):
        raise SelectorSyntaxError(text, 0, f"invalid feature key {key_name!r}")
    result = key(key_name)
    for start, characters in clauses[1:]:
        result = and_(result, _parse_qualifier_clause(text, start, characters))
    return result
