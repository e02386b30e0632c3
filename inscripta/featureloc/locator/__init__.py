from inscripta.featureloc.locator.locator import (  # noqa: F401
    Locator,
    as_locator,
    relative_locator,
    location_locator,
    filter_locator,
    all_locator,
    resize_locator,
)
