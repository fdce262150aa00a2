import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from quizhub.routes import (
    auth,
    courses,
    questions,
    quizzes,
    leaderboard,
    admin_courses,
    admin_questions,
    admin_events,
    admin_users,
)
from quizhub.db.base import Base
from quizhub.db.sessions import engine
from quizhub.core.config import settings

# Import all models to ensure they're registered with Base
import quizhub.models

logger = logging.getLogger(__name__)

# Create tables
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="University past-question quiz practice platform"
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(auth.router)
app.include_router(courses.router)
app.include_router(questions.router)
app.include_router(quizzes.router)
app.include_router(leaderboard.router)
app.include_router(admin_courses.router)
app.include_router(admin_questions.router)
app.include_router(admin_events.router)
app.include_router(admin_users.router)


@app.on_event("startup")
async def startup_event():
    logger.info("%s v%s starting", settings.APP_NAME, settings.APP_VERSION)
    logger.info("JWT authentication enabled (%s)", settings.ALGORITHM)


@app.get("/health")
def health():
    return {"status": "ok"}
