"""Public interface for the credential registry adapter."""

from __future__ import annotations

from .client import HttpCredentialRegistry
from .schema import IssuedPdaPayload, IssuedPdaPayloadInput, IssuedPdasResponse
from .translator import create_request, parse_credential, update_request

__all__ = [
    "HttpCredentialRegistry",
    "IssuedPdaPayload",
    "IssuedPdaPayloadInput",
    "IssuedPdasResponse",
    "create_request",
    "parse_credential",
    "update_request",
]
