class LyricFinderError(RuntimeError):
    pass


class TransportError(LyricFinderError):
    """The request could not be completed or the server answered with an error status."""


class DecodeError(LyricFinderError):
    """The response body does not have the expected lyrics shape."""
