"""Exception hierarchy for the lookup session."""


class SolarLookupError(Exception):
    """Base exception for all solar_lookup errors."""


class DatasetNotLoaded(SolarLookupError):
    """A search was made before any addresses were loaded."""

    def __init__(self, query: str):
        self.query = query
        super().__init__(
            f"Solar panel data is not loaded yet; cannot look up '{query}'"
        )


class NoActiveRecord(SolarLookupError):
    """A field was edited while no address is selected."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Cannot edit '{field}': no address has been selected")
