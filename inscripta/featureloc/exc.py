class FeatureLocException(Exception):
    """
    Base exception class for FeatureLoc.
    """

    pass


class LocationException(FeatureLocException):
    """
    Raised when a Location constructor is given invalid inputs, such as a span whose end does not lie after its
    start, or a join with no elements. These indicate a programming error in the caller.
    """

    pass


class InvalidPositionException(FeatureLocException):
    """
    Raised when a position is outside of a valid range for the operation being performed.
    """

    pass


class UnsupportedOperationException(FeatureLocException):
    """
    Raised when an object is being used in a way that is unsupported.
    """

    pass


class ValidationException(FeatureLocException):
    """
    Raised when object constructors are given invalid inputs that are not LocationExceptions.
    """

    pass


class AlphabetError(FeatureLocException):
    """
    Raised when an operation on an Alphabet is unsupported for the provided Alphabet.
    """

    pass


class TopologyException(FeatureLocException):
    """
    Raised when an operation requires a circular sequence and is given a linear one.
    """

    pass


class FeatureLocSyntaxError(FeatureLocException, ValueError):
    """
    Base class for malformed Location, Modifier, Selector and Locator text. Stores the text being parsed and the
    0-based offset where parsing failed.
    """

    kind = "text"

    def __init__(self, text: str, position: int = 0, reason: str = None):
        self.text = text
        self.position = position
        self.reason = reason
        message = f"invalid {self.kind} {text!r}: unexpected {self.offending!r} at position {position}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)

    @property
    def offending(self) -> str:
        """The part of the text starting at the failure offset."""
        return self.text[self.position :]


class LocationSyntaxError(FeatureLocSyntaxError):
    """
    Raised when a Location string does not follow the feature table location grammar.
    """

    kind = "location"


class ModifierSyntaxError(FeatureLocSyntaxError):
    """
    Raised when a Modifier string such as ``^-20..$`` is malformed.
    """

    kind = "modifier"


class SelectorSyntaxError(FeatureLocSyntaxError):
    """
    Raised when a feature Selector clause is malformed.
    """

    kind = "selector"


class LocatorSyntaxError(FeatureLocSyntaxError):
    """
    Raised when a Locator string matches none of the modifier, location or selector grammars.
    """

    kind = "locator"
