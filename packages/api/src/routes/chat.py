# This project was developed with assistance from AI tools.
"""Assistant chat routes.

Posting a user message stores it, asks the assistant for a reply, stores the
reply and returns both. Assistant messages posted directly are only stored.
Provider trouble never fails the request; the reply is an apology instead.
"""

from fastapi import APIRouter, Depends, status

from ..schemas.chat import ChatMessageCreate, ChatMessageResponse, ChatTurnResponse
from ..services.assistant import AssistantService, get_assistant
from ..services.chat import post_chat_message
from ..services.storage import StorageFacade, get_storage

router = APIRouter()


@router.get("/", response_model=list[ChatMessageResponse])
async def list_messages(storage: StorageFacade = Depends(get_storage)) -> list[ChatMessageResponse]:
    return await storage.get_chat_messages()


@router.get("/{client_id}", response_model=list[ChatMessageResponse])
async def list_client_messages(
    client_id: int,
    storage: StorageFacade = Depends(get_storage),
) -> list[ChatMessageResponse]:
    return await storage.get_chat_messages(client_id)


@router.post("/", response_model=ChatTurnResponse, status_code=status.HTTP_201_CREATED)
async def post_message(
    body: ChatMessageCreate,
    storage: StorageFacade = Depends(get_storage),
    assistant: AssistantService = Depends(get_assistant),
) -> ChatTurnResponse:
    return await post_chat_message(body, storage, assistant)
