from inscripta.featureloc.exc import LocationException, InvalidPositionException


class ObjectValidation:
    @staticmethod
    def require_non_negative(*positions: int):
        for position in positions:
            if position < 0:
                raise LocationException("Positions must be non-negative: {}".format(positions))

    @staticmethod
    def require_positive_span(start: int, end: int):
        ObjectValidation.require_non_negative(start, end)
        if end <= start:
            raise LocationException("Spans must satisfy start < end. Start: {}, end: {}".format(start, end))

    @staticmethod
    def require_nonempty_locations(locations, kind: str):
        if not locations:
            raise LocationException("{} must contain at least one location".format(kind))

    @staticmethod
    def require_object_has_type(obj, required_type):
        if not isinstance(obj, required_type):
            raise TypeError("Object must have type {}, got {}".format(required_type.__name__, type(obj).__name__))

    @staticmethod
    def require_all_have_type(objs, required_type):
        for obj in objs:
            ObjectValidation.require_object_has_type(obj, required_type)

    @staticmethod
    def require_position_in_range(position: int, length: int):
        if not 0 <= position <= length:
            raise InvalidPositionException(
                "Position {} lies outside of a sequence of length {}".format(position, length)
            )
