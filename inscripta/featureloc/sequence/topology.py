from inscripta.featureloc.util.enum import HasMemberMixin


class Topology(str, HasMemberMixin):
    """Shape of a sequence molecule. Circular sequences wrap around from their last base to their first."""

    LINEAR = "linear"
    CIRCULAR = "circular"

    @staticmethod
    def from_string(value: str) -> "Topology":
        return Topology.from_value(value)
