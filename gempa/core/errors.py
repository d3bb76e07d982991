"""Error taxonomy for the BMKG earthquake client."""


class GempaError(Exception):
    """Base class for client failures."""

    error_code = "GEMPA_ERROR"


class ConfigError(GempaError):
    """Raised for invalid configuration files or values."""

    error_code = "CONFIG_ERROR"


class NetworkError(GempaError):
    """Raised for transport-level failures (unreachable host, timeout, bad status)."""

    error_code = "NETWORK_ERROR"

    def __init__(self, message: str, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DecodeError(GempaError):
    """Raised when a payload is not valid JSON or lacks a required field.

    Attributes:
        raw: The raw bytes of the offending payload
    """

    error_code = "DECODE_ERROR"

    def __init__(self, message: str, raw: bytes = b"") -> None:
        super().__init__(message)
        self.raw = raw


class CoordinateParseError(GempaError):
    """Raised by the strict normalizer when a coordinate string is unparseable."""

    error_code = "COORDINATE_PARSE_ERROR"

    def __init__(self, message: str, raw: str) -> None:
        super().__init__(message)
        self.raw = raw
