"""Exception hierarchy for MotionLab."""


class MotionLabError(Exception):
    """Base class for all MotionLab errors."""


class ConfigurationError(MotionLabError):
    """Raised when settings are missing or invalid."""


class ClassifierError(MotionLabError):
    """Raised by a classifier backend that could not produce a result."""


class ProviderError(ClassifierError):
    """The hosted language model call failed (network, auth, quota...)."""


class MalformedResponseError(ClassifierError):
    """The language model answered, but not with a usable JSON object."""

    def __init__(self, message: str, raw_text: str | None = None):
        super().__init__(message)
        self.raw_text = raw_text


class SimulationError(MotionLabError):
    """Raised on misuse of an animation session (e.g. two clocks at once)."""
