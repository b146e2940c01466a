from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import StreamingResponse
import logging

from assistant_chat.schemas.chat import ChatRequest
from assistant_chat.api.deps import get_generator
from assistant_chat.generator import GenerationError, ResponseGenerator

router = APIRouter(tags=["Chat"])
logger = logging.getLogger(__name__)

THREAD_ID_HEADER = "X-Thread-Id"
GENERIC_FAILURE_DETAIL = "Failed to generate response. Please try again."

@router.post("")
async def chat(
    request: ChatRequest,
    generator: ResponseGenerator = Depends(get_generator)
):
    """
    Generates one assistant reply for the posted conversation.
    The reply text is streamed back as plain text; the thread it was generated
    in is returned in the X-Thread-Id header so the client can keep using it.
    """
    logger.info(f"Received chat request (threadId: {request.thread_id}, messages: {len(request.messages)})")

    try:
        result = await generator.generate(request.messages, request.thread_id)
    except GenerationError as e:
        logger.error(f"Generation failed for threadId {request.thread_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=GENERIC_FAILURE_DETAIL)
    except Exception as e:
        logger.exception(f"Unexpected error handling chat request: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=GENERIC_FAILURE_DETAIL)

    async def body():
        yield result.text

    return StreamingResponse(
        body(),
        media_type="text/plain; charset=utf-8",
        headers={THREAD_ID_HEADER: result.thread_id},
    )
