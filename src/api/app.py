"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import analysis, mortgage, properties
from src.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title=settings.app_name,
    description="Long-term rental vs short-term rental vs owner-occupied economics",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analysis.router)
app.include_router(properties.router)
app.include_router(mortgage.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
