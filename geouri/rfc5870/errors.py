"""Error codes and exception type for geo URI processing."""

import enum


class ErrorCode(enum.Enum):
    """Reasons a geo URI is rejected.

    ``NO_MATCH`` covers every purely syntactic failure: the grammar is
    unambiguous, so "the text does not match" needs no finer breakdown.
    The remaining codes are raised after the grammar has matched.
    """

    NO_MATCH = "no match"
    BAD_NUMBER = "bad number"
    DUPLICATE_CRS = "duplicate crs parameter"
    DUPLICATE_UNCERTAINTY = "duplicate uncertainty parameter"
    UNORDERED_CRS = "crs parameter must precede uncertainty parameter"

    @property
    def message(self) -> str:
        return self.value


class GeoUriError(ValueError):
    """A geo URI could not be parsed or composed.

    Attributes:
        code: The ``ErrorCode`` describing the failure.
        position: Index into the input text where the failure was detected,
            or None when the error did not come from scanning text.
    """

    def __init__(self, code: ErrorCode, position: int | None = None) -> None:
        self.code = code
        self.position = position
        if position is None:
            super().__init__(code.message)
        else:
            super().__init__(f"{code.message} at position {position}")
