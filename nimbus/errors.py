"""Error taxonomy for the normalization engine."""


class NimbusError(Exception):
    """Base class for all engine errors."""


class UnknownConditionCode(NimbusError, LookupError):
    """Raised when a provider returns a condition code absent from its table."""

    def __init__(self, provider: str, code: str | int):
        super().__init__(f"Unknown {provider} condition code: {code!r}")
        self.provider = provider
        self.code = code


class MissingAstronomicalData(NimbusError, LookupError):
    """Raised when a day has no sunrise/sunset/moon record."""

    def __init__(self, day: str):
        super().__init__(f"Missing sun and moon data for {day}")
        self.day = day


class InvalidArgument(NimbusError, ValueError):
    """Raised when a codec query is called outside its precondition."""


class MissingConditionData(NimbusError, LookupError):
    """Raised when no record of a day or hour carries a condition code."""

    def __init__(self, when: str):
        super().__init__(f"No condition code available for {when}")
        self.when = when
