from teamhub.modules.events.schemas import EventSuggestion
from teamhub.core.exceptions import ExternalServiceError
from typing import List, Optional, Protocol
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)


class EventSuggester(Protocol):
    """Text-generation backed source of game event suggestions, set on app.state.event_suggester"""

    def suggest_events(self, tags: List[str], year: int) -> List[EventSuggestion]:
        ...


class EventService:
    def __init__(self, suggester: Optional[EventSuggester]):
        self.suggester = suggester

    def suggest(self, tags: List[str], year: Optional[int] = None) -> List[EventSuggestion]:
        """Ask the configured suggester; its failures never leave this module unwrapped"""
        if not tags:
            return []
        if self.suggester is None:
            raise ExternalServiceError("No event suggester is configured")

        year = year or datetime.now(timezone.utc).year
        try:
            return list(self.suggester.suggest_events(tags, year))
        except Exception as e:
            logger.warning("Event suggester failed for %s/%s: %s", tags, year, e)
            raise ExternalServiceError(str(e))
