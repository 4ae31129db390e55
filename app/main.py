# app/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.api.routes import (
    assessment_routes,
    auth_routes,
    llm_routes,
    query_routes,
    root_routes,
)
from app.core.config import settings
from app.core.security import limiter
from app.core.startup import startup_event

app = FastAPI(title="Mokri Assistant API")

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root_routes.router)
app.include_router(auth_routes.router, prefix="/api")
app.include_router(query_routes.router, prefix="/api")
app.include_router(llm_routes.router, prefix="/api")
app.include_router(assessment_routes.router, prefix="/api/assessment")

@app.on_event("startup")
async def app_startup():
    await startup_event(app)
