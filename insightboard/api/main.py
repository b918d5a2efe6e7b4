import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from insightboard.api.routes.analysis import router as analysis_router
from insightboard.config import get_settings

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="InsightBoard API",
    description="Meeting transcript analysis and action item extraction",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_origin_regex=r"https://.*\.vercel\.app|http://localhost:\d+",
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analysis_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}
