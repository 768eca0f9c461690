"""Errors raised by lazystream."""


class InvalidArgument(ValueError):
    """An argument to a stream operation was out of its accepted domain.

    Raised synchronously, before the stream is pulled.
    """
