"""
Stor-a-gentic chat service
- HTTP surface for the chat widget: replies, reference data, bookings
- Inquiry logging happens in the background after each reply
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from ..config import Settings, get_settings
from ..models import CollectionBooking
from .support_assistant import GREETING, QUICK_REPLIES, SupportAssistant

logger = logging.getLogger(__name__)


class ChatRequest(BaseModel):
    message: str
    user_id: Optional[str] = None


class ChatResponse(BaseModel):
    reply: str
    source: str


def get_assistant(request: Request) -> SupportAssistant:
    return request.app.state.assistant


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Build the assistant on startup, flush pending inquiry logs on shutdown."""
        assistant = await SupportAssistant.create(settings)
        await assistant.startup()
        app.state.assistant = assistant
        logger.info("✅ Chat service startup completed")
        yield
        await assistant.shutdown()

    app = FastAPI(title="Stor-a-gentic Chat Service", lifespan=lifespan)
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

    @app.get("/chat/welcome")
    async def welcome() -> Dict[str, Any]:
        return {
            "greeting": GREETING,
            "quick_replies": [asdict(reply) for reply in QUICK_REPLIES],
        }

    @app.post("/chat", response_model=ChatResponse)
    async def chat(body: ChatRequest, request: Request) -> ChatResponse:
        assistant = get_assistant(request)
        result = await assistant.handle_message(body.message, body.user_id)
        if result is None:
            raise HTTPException(status_code=400, detail="Message must not be empty")
        return ChatResponse(reply=result.text, source=result.source.value)

    @app.get("/faqs")
    async def faqs(request: Request) -> List[Dict[str, Any]]:
        return await get_assistant(request).fetch_faqs()

    @app.get("/locations")
    async def locations(request: Request) -> List[Dict[str, Any]]:
        return await get_assistant(request).fetch_locations()

    @app.get("/collection-slots")
    async def collection_slots(request: Request) -> List[Dict[str, Any]]:
        return await get_assistant(request).fetch_collection_slots()

    @app.get("/service-requests")
    async def service_requests(request: Request) -> List[Dict[str, Any]]:
        return await get_assistant(request).fetch_service_requests()

    @app.get("/inquiries")
    async def inquiries(request: Request) -> List[Dict[str, Any]]:
        return await get_assistant(request).fetch_inquiries()

    @app.post("/bookings/collection")
    async def book_collection(booking: CollectionBooking, request: Request) -> Dict[str, Any]:
        result = await get_assistant(request).book_collection(booking)
        return asdict(result)

    @app.get("/health")
    async def health(request: Request) -> Dict[str, Any]:
        assistant = get_assistant(request)
        status = assistant.health_checker.last_status
        return {
            "reachable": status.reachable if status else False,
            "diagnostic": status.diagnostic if status else None,
            "advisories": assistant.advisories,
            "storage_mode": "live" if assistant.storage.is_live else "mock",
            "completion_available": assistant.completion_client.is_available(),
            "faq_count": len(assistant.knowledge_base.entries),
        }

    return app


app = create_app()

# Basic logging setup
logging.basicConfig(
    level=getattr(logging, get_settings().LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storagentic.services.chat_service:app",
        host="0.0.0.0",
        port=get_settings().PORT,
        reload=False
    )
