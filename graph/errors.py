class GraphConfigError(ValueError):
    """Malformed graph or missing input an algorithm requires.

    Raised before any Step is produced, so a trace is never half-built.
    """
