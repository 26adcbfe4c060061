import hmac
from enum import Enum
from typing import Optional


class AuthResult(Enum):
    OK = "ok"
    MISSING = "missing"
    INVALID = "invalid"


def check_api_key(provided: Optional[str], expected: str) -> AuthResult:
    if not provided:
        return AuthResult.MISSING
    if not hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8")):
        return AuthResult.INVALID
    return AuthResult.OK
