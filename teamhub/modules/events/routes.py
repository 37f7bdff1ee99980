from fastapi import APIRouter, Depends, Request
from teamhub.modules.events.schemas import EventSuggestRequest, EventSuggestResponse
from teamhub.modules.events.service import EventService

router = APIRouter(prefix="/events", tags=["events"])


def get_event_service(request: Request) -> EventService:
    return EventService(getattr(request.app.state, "event_suggester", None))


@router.post("/suggest", response_model=EventSuggestResponse)
async def suggest_events(
    suggest_data: EventSuggestRequest,
    service: EventService = Depends(get_event_service)
):
    """Suggest game events for the given genre tags"""
    return EventSuggestResponse(events=service.suggest(suggest_data.tags, suggest_data.year))
