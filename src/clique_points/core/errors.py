"""Error taxonomy for points computation."""


class CliqueError(Exception):
    """Base class for all errors raised by clique_points."""

    code = "internal"


class InvalidParameterError(CliqueError, ValueError):
    """
    A query parameter was rejected.

    Raised for unknown granularity tokens and malformed time bounds,
    always before any data is read.
    """

    code = "invalid_parameter"


class StoreUnavailableError(CliqueError, RuntimeError):
    """
    The message store could not be read.

    Transient: the computation holds no state, so callers may simply retry.
    """

    code = "database_connection"


class InvariantViolationError(CliqueError, RuntimeError):
    """Data reached the engine in a state that upstream code should have prevented."""

    code = "invariant_violation"
