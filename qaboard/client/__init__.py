"""
Board client: API access, application state and question cards.
"""

from qaboard.client.api_client import ApiResult, BoardApiClient
from qaboard.client.board import QuestionBoard
from qaboard.client.cards import QuestionCard
from qaboard.client.state import AppState, QuestionFilters, StateStore, UserRole

__all__ = [
    "ApiResult",
    "BoardApiClient",
    "QuestionBoard",
    "QuestionCard",
    "AppState",
    "QuestionFilters",
    "StateStore",
    "UserRole",
]
