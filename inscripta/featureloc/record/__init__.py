from inscripta.featureloc.record.record import Record  # noqa: F401
