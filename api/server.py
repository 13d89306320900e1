from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from config.settings import settings
from core import configure_logging, get_logger, InvalidInputError, ResidentNotFoundError
from memory.database_async import AsyncDatabase
from reminiscence import ContextBuilder, LifeStoryStore, PromptGenerator
from schemas import (
    PromptSchema,
    StoryListSchema,
    StoryOutSchema,
    StorySubmitResultSchema,
    StorySubmitSchema,
    TagSummarySchema,
)

configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle manager for the FastAPI app.
    Wires the reminiscence components to the database.
    """
    # Startup
    logger.info("Starting reminiscence API...")
    db = AsyncDatabase()
    if settings.AUTO_CREATE_TABLES:
        await db.create_tables()

    store = LifeStoryStore(db)
    app.state.db = db
    app.state.life_story_store = store
    app.state.prompt_generator = PromptGenerator(store, db)
    app.state.context_builder = ContextBuilder(store)

    yield

    # Shutdown
    logger.info("Shutting down...")
    await db.dispose()


app = FastAPI(title="Reminiscence API", lifespan=lifespan)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Dependencies ────────────────────────────────────────────────────

def get_life_story_store(request: Request) -> LifeStoryStore:
    return request.app.state.life_story_store


def get_prompt_generator(request: Request) -> PromptGenerator:
    return request.app.state.prompt_generator


def get_context_builder(request: Request) -> ContextBuilder:
    return request.app.state.context_builder


def _positive_or(value: Optional[int], default: int) -> int:
    """Missing, zero or negative query values fall back to the default."""
    return value if value and value > 0 else default


@app.get("/api/health")
async def health_check():
    return {"status": "ok"}


# ── Reminiscence Endpoints ──────────────────────────────────────────

router = APIRouter(prefix="/api/reminiscence", tags=["reminiscence"])


@router.get("/stories/{owner_id}", response_model=StoryListSchema)
async def get_stories(
    owner_id: str,
    tag: Optional[str] = None,
    limit: Optional[int] = None,
    store: LifeStoryStore = Depends(get_life_story_store),
):
    """List a resident's life stories, newest first, optionally filtered by tag."""
    try:
        stories = await store.list(
            owner_id, tag=tag or None, limit=_positive_or(limit, settings.STORY_LIST_LIMIT)
        )
        return StoryListSchema(
            stories=[StoryOutSchema.from_record(s) for s in stories],
            total=len(stories),
        )
    except Exception as e:
        logger.error("Error getting life stories", owner_id=owner_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to get life stories")


@router.get("/prompt/{owner_id}", response_model=PromptSchema, response_model_exclude_none=True)
async def get_prompt(
    owner_id: str,
    generator: PromptGenerator = Depends(get_prompt_generator),
):
    """Generate a reminiscence prompt for a resident."""
    try:
        prompt = await generator.generate(owner_id)
    except Exception as e:
        logger.error("Error generating reminiscence prompt", owner_id=owner_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to generate prompt")

    if prompt is None:
        raise HTTPException(status_code=404, detail=ResidentNotFoundError(owner_id).to_dict())
    return prompt


@router.get("/context/{owner_id}", response_class=PlainTextResponse)
async def get_context(
    owner_id: str,
    max_entries: Optional[int] = Query(default=None, alias="max"),
    builder: ContextBuilder = Depends(get_context_builder),
):
    """Life story context block for the conversational agent (may be empty)."""
    try:
        return await builder.build(owner_id, _positive_or(max_entries, settings.CONTEXT_MAX_ENTRIES))
    except Exception as e:
        logger.error("Error getting life story context", owner_id=owner_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to get context")


@router.post("/stories", response_model=StorySubmitResultSchema, response_model_exclude_none=True)
async def submit_story(
    payload: StorySubmitSchema,
    store: LifeStoryStore = Depends(get_life_story_store),
):
    """Submit an utterance; it is stored only if it looks like a life story."""
    if not (payload.user_id or "").strip() or not (payload.story or "").strip():
        error = InvalidInputError("userId/story", "userId and story required")
        raise HTTPException(status_code=400, detail=error.to_dict())

    try:
        record = await store.save(payload.user_id, payload.story, payload.warda_response or "")
    except Exception as e:
        logger.error("Error storing life story", owner_id=payload.user_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to store life story")

    if record is None:
        return StorySubmitResultSchema(stored=False, reason="No story detected")
    return StorySubmitResultSchema(stored=True, id=record.id)


@router.get("/tags/{owner_id}", response_model=TagSummarySchema)
async def get_story_tags(
    owner_id: str,
    store: LifeStoryStore = Depends(get_life_story_store),
):
    """Tag counts across a resident's recent stories, most frequent first."""
    try:
        return await store.tag_summary(owner_id)
    except Exception as e:
        logger.error("Error getting story tags", owner_id=owner_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to get tags")


app.include_router(router)
