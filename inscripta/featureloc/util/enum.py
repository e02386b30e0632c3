"""
Enumeration utilities.
"""
from enum import Enum


class HasMemberMixin(Enum):
    """Adds `has_value()` and case-insensitive `from_value()` lookups to string-valued enumerations."""

    @classmethod
    def has_value(cls, value) -> bool:
        return str(value).lower() in cls._value2member_map_

    @classmethod
    def from_value(cls, value: str):
        """Looks up a member by its (case-insensitive) value. Raises ValueError for unknown values."""
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                "{!r} is not a valid {}; expected one of {}".format(
                    value, cls.__name__, ", ".join(sorted(cls._value2member_map_))
                )
            )
