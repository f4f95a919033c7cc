class ValidationError(Exception):
    """The inbound request is malformed. Always the caller's to fix."""


class UpstreamUnavailable(Exception):
    """A remote service could not be used.

    `status_code` is set when the remote answered with a non-success status
    and is `None` when it could not be reached at all.
    """

    def __init__(self, msg: str, *, status_code: int | None = None) -> None:
        super().__init__(msg)
        self.status_code = status_code

    @property
    def unreachable(self) -> bool:
        return self.status_code is None


class InternalFault(Exception):
    pass
