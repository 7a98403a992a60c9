"""Exception classes for the version gate."""


class VersionGateError(Exception):
    """Base error for the version gate."""


class ParseError(VersionGateError, ValueError):
    """A string is not a well-formed version."""

    def __init__(self, raw: str, reason: str) -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"invalid version {raw!r}: {reason}")


class ManifestError(VersionGateError):
    """A version could not be read from a manifest."""

    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        self.detail = detail
        super().__init__(f"{source}: {detail}")
