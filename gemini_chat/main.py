from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from gemini_chat.client import FAILURE_MESSAGE, AsyncGeminiClient, RequestFailed
from gemini_chat.config import Settings
from gemini_chat.models import ChatRequest, Reply

load_dotenv(override=True)

gemini: AsyncGeminiClient | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    global gemini
    gemini = AsyncGeminiClient.from_settings(Settings.from_env())
    yield
    await gemini.aclose()


app = FastAPI(title="Gemini Chat Relay", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:8080"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/api/chat", response_model=Reply)
async def chat(request: ChatRequest):
    try:
        return Reply.model_validate(await gemini.send_message(request.message))
    except (RequestFailed, ValidationError):
        raise HTTPException(status_code=502, detail=FAILURE_MESSAGE)
