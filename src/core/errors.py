"""
Exceptions raised by the benchmark engine.

Every argument check in the engine raises :class:`InvalidArgumentError`, which
is also a ``ValueError`` so callers that only know the builtin still catch it.
Failures inside a benchmarked algorithm are never wrapped: they propagate as
whatever the algorithm (or its comparator) raised.
"""


class BenchmarkError(Exception):
    """Base exception for all benchmark engine errors."""

    pass


class InvalidArgumentError(BenchmarkError, ValueError):
    """A caller supplied an argument the engine cannot work with."""

    pass


class ConfigurationError(InvalidArgumentError):
    """The YAML configuration holds a value of the wrong type or range."""

    pass
