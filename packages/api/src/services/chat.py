# This project was developed with assistance from AI tools.
"""One chat turn: persist the user message, ask the assistant, persist the reply."""

import logging

from db.enums import MessageRole

from ..schemas.chat import ChatMessageCreate, ChatTurnResponse
from .assistant import AssistantService
from .storage import StorageFacade

logger = logging.getLogger(__name__)

# Most recent messages sent to the model as conversation history
HISTORY_LIMIT = 20


async def post_chat_message(
    data: ChatMessageCreate,
    storage: StorageFacade,
    assistant: AssistantService,
) -> ChatTurnResponse:
    """Store ``data``; for user messages also generate, store and return the reply.

    The user message is stored before the reply is requested, and the reply is
    stored before it is returned.
    """
    message = await storage.save_chat_message(data)
    if message.role != MessageRole.USER.value:
        return ChatTurnResponse(message=message)

    history = await storage.get_chat_messages(data.client_id)
    if data.client_id is None:
        history = [m for m in history if m.client_id is None]
    if not any(m.id == message.id for m in history):
        history.append(message)
    history = history[-HISTORY_LIMIT:]

    client = await storage.get_client(data.client_id) if data.client_id is not None else None
    reply_text = await assistant.generate_reply(history, client)

    reply = await storage.save_chat_message(
        ChatMessageCreate(
            client_id=data.client_id,
            role=MessageRole.ASSISTANT,
            content=reply_text,
        )
    )
    logger.debug("Chat turn stored (client_id=%s, reply_id=%s)", data.client_id, reply.id)
    return ChatTurnResponse(message=message, reply=reply)
