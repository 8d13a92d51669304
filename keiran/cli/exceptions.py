"""
Exceptions raised by the `keiran.cli` client when talking to the sharing service.
"""

### stdlib imports
import typing

### vendor imports

### local imports


class KeiranError(Exception):
    """Base class for every failure reported by the client."""


class NetworkError(KeiranError):
    def __init__(self, url: str, reason: typing.Any) -> None:
        self._url = url
        self._reason = reason

    def __str__(self) -> str:
        return f"Could not reach '{self._url}': {self._reason}"


class RejectedStatus(KeiranError):
    # Subclasses only change the action named in the message
    _action = "complete request"

    def __init__(self, status: str) -> None:
        self.status = status

    def __str__(self) -> str:
        return f"failed to {self._action}: {self.status}"


class UploadRejected(RejectedStatus):
    _action = "upload file"


class PasteRejected(RejectedStatus):
    _action = "create paste"


class ShortenRejected(RejectedStatus):
    _action = "shorten URL"


class MalformedResponse(KeiranError):
    def __init__(self, key: str, detail: typing.Optional[str] = None) -> None:
        self.key = key
        self._detail = detail

    def __str__(self) -> str:
        if self._detail:
            return f"{self.key} not found in response ({self._detail})"
        return f"{self.key} not found in response"


class ClipboardError(KeiranError):
    def __init__(self, reason: typing.Any) -> None:
        self._reason = reason

    def __str__(self) -> str:
        return str(self._reason)
