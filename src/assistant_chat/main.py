import uvicorn
from fastapi import FastAPI
import logging

from assistant_chat.config import settings
from assistant_chat.api.endpoints import chat

# --- Logging Configuration ---
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Configure root logger
logging.basicConfig(
    level=settings.log_level.upper(),
    format=LOG_FORMAT,
    handlers=[
        logging.FileHandler(settings.log_file), # Log to a file
        logging.StreamHandler()
    ]
)

logger = logging.getLogger(__name__)

# --- Initialize FastAPI App ---
app = FastAPI(
    title="Assistant Chat API",
    description="Proxies chat messages to a hosted OpenAI assistant and returns its replies.",
    version="0.1.0",
)

# --- API Routers ---
app.include_router(chat.router, prefix="/api/chat")

# --- Root Endpoint ---
@app.get("/", tags=["Status"])
async def read_root():
    """Basic status check endpoint."""
    return {"status": "Assistant Chat API is running!"}

# --- Startup / Shutdown Events ---
@app.on_event("startup")
async def startup_event():
    logger.info("-"*20 + " Application Startup " + "-"*20)
    if not settings.openai_api_key or not settings.openai_assistant_id:
        logger.critical("OPENAI_API_KEY or OPENAI_ASSISTANT_ID not set. Chat requests will fail.")
    logger.info("Application startup complete.")

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("-"*20 + " Application Shutdown " + "-"*20)


# --- Run with Uvicorn (for local development) ---
if __name__ == "__main__":
    logger.info("Starting Uvicorn server for development...")
    uvicorn.run(
        "assistant_chat.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
