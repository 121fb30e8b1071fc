"""FastAPI application exposing the counter to remote editor hosts."""
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routers import router as wordcount_router

app = FastAPI(title="Markdown Word Count", version="0.1.0")

app.include_router(wordcount_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
