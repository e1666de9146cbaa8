"""
Session identifier generation.

Human-shareable session identifiers of the form ``VV-XXXXXX``. Uniqueness
is not checked here; the sessions table carries a unique constraint and the
session service retries with a fresh identifier when it fires.

Dependencies: secrets, uuid
System role: Identifier generator for sessions
"""

import re
import secrets
import string
import uuid

SESSION_CODE_PREFIX = "VV-"
SESSION_CODE_ALPHABET = string.ascii_uppercase + string.digits
SESSION_CODE_LENGTH = 6
SESSION_CODE_PATTERN = r"^VV-[A-Z0-9]{6,8}$"

_SESSION_CODE_RE = re.compile(SESSION_CODE_PATTERN)


def generate_session_code(length: int = SESSION_CODE_LENGTH) -> str:
    """
    Generate a random session identifier.

    Each character is drawn independently and uniformly from A-Z0-9.

    Args:
        length: Number of random characters after the prefix

    Returns:
        str: Identifier such as ``VV-7K2Q9A``
    """
    suffix = "".join(secrets.choice(SESSION_CODE_ALPHABET) for _ in range(length))
    return f"{SESSION_CODE_PREFIX}{suffix}"


def generate_uuid_session_code() -> str:
    """
    Generate a session identifier from the prefix of a random UUID.

    Returns:
        str: Identifier with 8 upper-cased hex characters, e.g. ``VV-1F0C9B2E``
    """
    return f"{SESSION_CODE_PREFIX}{str(uuid.uuid4())[:8].upper()}"


def is_valid_session_code(session_code: str | None) -> bool:
    """Check a session identifier against ``^VV-[A-Z0-9]{6,8}$``."""
    if not isinstance(session_code, str):
        return False
    return _SESSION_CODE_RE.fullmatch(session_code) is not None
