"""
Thin client for the keiran.cc sharing service.

Every call is a single POST against the service API, the reply is decoded as a
JSON object and the one field the caller cares about is handed back. Nothing is
retried; any failure surfaces as an exception from `keiran.cli.exceptions`.
"""

### stdlib imports
import logging
import pathlib
import typing

### vendor imports
import requests

### local imports
from .exceptions import (
    MalformedResponse,
    NetworkError,
    PasteRejected,
    RejectedStatus,
    ShortenRejected,
    UploadRejected,
)


logger = logging.getLogger(__name__)

BASE_URL = "https://keiran.cc/api"


class PasteFields(typing.TypedDict):
    title: str
    description: str
    content: str
    language: str
    expirationTime: str
    domain: str


class KeiranClient:
    def __init__(
        self,
        baseUrl: str = BASE_URL,
        session: typing.Optional[requests.Session] = None,
    ) -> None:
        self.baseUrl = baseUrl.rstrip("/")
        self._session = session or requests.Session()

    def _post(
        self,
        endpoint: str,
        rejection: type[RejectedStatus],
        **kwargs,
    ) -> requests.Response:
        url = f"{self.baseUrl}/{endpoint}"

        logger.debug("POST %s", url)
        try:
            response = self._session.post(url, **kwargs)
        except requests.RequestException as e:
            raise NetworkError(url, e) from e
        logger.debug("%s answered %s %s", url, response.status_code, response.reason)

        if response.status_code != 200:
            raise rejection(f"{response.status_code} {response.reason}".strip())

        return response

    @staticmethod
    def _extract(response: requests.Response, key: str) -> str:
        try:
            result = response.json()
        except ValueError as e:
            raise MalformedResponse(key, "body is not valid JSON") from e

        if not isinstance(result, dict):
            raise MalformedResponse(key, "body is not a JSON object")

        value = result.get(key)
        if not isinstance(value, str):
            raise MalformedResponse(key)
        return value

    def uploadFile(self, path: typing.Union[str, pathlib.Path]) -> str:
        """
        Upload a local file and return the image URL the service assigns to it.

        The file is sent as the `file` part of a multipart form, named after the
        file's base name. `OSError` is raised as-is if the file can't be opened.
        """
        path = pathlib.Path(path)

        with path.open("rb") as handle:
            response = self._post(
                "upload",
                UploadRejected,
                files={"file": (path.name, handle)},
            )

        return self._extract(response, "imageUrl")

    def createPaste(
        self,
        title: str = "",
        description: str = "",
        content: str = "",
        language: str = "",
        expirationTime: str = "",
        domain: str = "",
    ) -> str:
        """Submit a paste and return its URL. No field is validated."""
        fields: PasteFields = {
            "title": title,
            "description": description,
            "content": content,
            "language": language,
            "expirationTime": expirationTime,
            "domain": domain,
        }
        response = self._post("pastes", PasteRejected, json=fields)
        return self._extract(response, "url")

    def shortenUrl(self, url: str) -> str:
        """Return a shortened alias for `url`. The url is sent exactly as given."""
        response = self._post("shorten", ShortenRejected, json={"url": url})
        return self._extract(response, "shortUrl")
