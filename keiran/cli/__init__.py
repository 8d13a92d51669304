"""
Client and command-line tool for the keiran.cc file, paste and URL-shortening service.
"""

# local imports
from .client import BASE_URL, KeiranClient, PasteFields
from .clipboard import copyToClipboard
from .exceptions import (
    ClipboardError,
    KeiranError,
    MalformedResponse,
    NetworkError,
    PasteRejected,
    RejectedStatus,
    ShortenRejected,
    UploadRejected,
)
