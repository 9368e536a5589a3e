"""Chat router: questions about the user's notes."""
from fastapi import APIRouter, Depends

from life_assistant.schemas.chat_schemas import ChatRequest, ChatResponse
from life_assistant.services.notes import NoteService, get_note_service

router = APIRouter()


@router.post("", response_model=ChatResponse)
async def ask_question(
    payload: ChatRequest,
    service: NoteService = Depends(get_note_service),
):
    """Answer a question using every stored note as context."""
    return ChatResponse(response=await service.ask(payload.question))
