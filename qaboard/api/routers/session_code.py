"""Path validation for shareable session identifiers."""

from qaboard.core.constants import Messages
from qaboard.core.exceptions import ValidationError
from qaboard.core.session_codes import is_valid_session_code


def require_session_code(session_id: str) -> str:
    """
    Reject malformed session identifiers before any lookup.

    Raises:
        ValidationError: If ``session_id`` does not look like ``VV-XXXXXX``
    """
    if not is_valid_session_code(session_id):
        raise ValidationError(Messages.INVALID_SESSION_ID, field="sessionId")
    return session_id
