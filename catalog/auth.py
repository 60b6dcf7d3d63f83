# catalog/auth.py
import secrets
from typing import Mapping, NamedTuple, Optional

from .config import AuthMode

COLLECTION_PATH = "/products"
API_KEY_HEADER = "x-api-key"
BEARER_PREFIX = "Bearer "
PUBLIC_METHODS = frozenset({"GET", "HEAD"})


class AuthDecision(NamedTuple):
    allowed: bool
    error: Optional[str] = None
    message: Optional[str] = None
    challenge: Optional[str] = None


ALLOW = AuthDecision(allowed=True)


def is_gated_path(path: str) -> bool:
    return path == COLLECTION_PATH or path.startswith(COLLECTION_PATH + "/")


def check_api_key(headers: Mapping[str, str], expected: Optional[str]) -> AuthDecision:
    provided = headers.get(API_KEY_HEADER)
    if not expected or not provided:
        return AuthDecision(False, "Unauthorized", "Unauthorized: Invalid API Key")
    # bytes, so a non-ASCII header value is a mismatch rather than a TypeError
    if not secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8")):
        return AuthDecision(False, "Unauthorized", "Unauthorized: Invalid API Key")
    return ALLOW


def check_bearer(method: str, headers: Mapping[str, str]) -> AuthDecision:
    # any non-empty token is accepted; it is never verified
    if method.upper() in PUBLIC_METHODS:
        return ALLOW
    header = headers.get("authorization") or ""
    if header.startswith(BEARER_PREFIX) and header[len(BEARER_PREFIX):].strip():
        return ALLOW
    return AuthDecision(
        False,
        "Authentication required",
        "Please include a valid Bearer token in Authorization header",
        challenge="Bearer",
    )


def evaluate(
    mode: AuthMode,
    method: str,
    path: str,
    headers: Mapping[str, str],
    api_key: Optional[str] = None,
) -> AuthDecision:
    """Decide whether a request may proceed to the router.

    Only the product collection is gated. ``headers`` must look up names
    case-insensitively (Starlette's ``Headers`` does) or be lower-cased.
    """
    if mode is AuthMode.NONE or not is_gated_path(path):
        return ALLOW
    if mode is AuthMode.API_KEY:
        return check_api_key(headers, api_key)
    return check_bearer(method, headers)
