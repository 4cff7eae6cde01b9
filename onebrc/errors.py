class OneBrcError(Exception):
    """Base class for every fatal condition raised by the engine."""


class ConfigError(OneBrcError):
    pass


class AlignmentError(OneBrcError):
    """No line terminator was found inside the bounded lookahead window."""


class MalformedMeasurement(OneBrcError, ValueError):
    pass


class VerificationError(OneBrcError):
    pass
