"""Parse policy, per-call parse state, and parse results."""

from dataclasses import dataclass

from geouri.rfc5870.errors import ErrorCode, GeoUriError
from geouri.uri.types import GeoUri


@dataclass(frozen=True)
class ParsePolicy:
    """Options controlling how label text is normalized while parsing.

    Attributes:
        lowercase_label_text: Fold the CRS label and parameter names to
            lowercase as they are consumed. RFC 5870 declares both case
            insensitive with lowercase preferred. Parameter values are
            never folded.
    """

    lowercase_label_text: bool = True


DEFAULT_PARSE_POLICY = ParsePolicy()
STRICT_PARSE_POLICY = ParsePolicy(lowercase_label_text=False)


@dataclass
class ParseState:
    """Which at-most-once clauses one parse call has consumed so far.

    The grammar alone cannot forbid a second ``crs`` or ``u`` parameter, or
    a ``crs`` parameter after ``u``: both reappear as generic parameters.
    These flags let the parameter production reject them.
    """

    crs_seen: bool = False
    uncertainty_seen: bool = False


@dataclass
class ParseResult:
    """Outcome of one parse call.

    Exactly one of ``uri`` and ``error`` is set.

    Attributes:
        uri: The parsed location on success, otherwise None.
        position: The index just past the matched text on success. On
            failure, the index the parse started from: a failed parse
            consumes nothing.
        error: The failure reason, or None on success.
        error_position: Index where the failure was detected, or None on
            success.
    """

    uri: GeoUri | None
    position: int
    error: ErrorCode | None = None
    error_position: int | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> GeoUri:
        """Return the parsed ``GeoUri`` or raise the failure.

        Raises:
            GeoUriError: If the parse failed.
        """
        if self.error is not None or self.uri is None:
            raise GeoUriError(self.error or ErrorCode.NO_MATCH, self.error_position)
        return self.uri
