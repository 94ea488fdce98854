# StudentDesk backend entrypoint: student records, marks, parents and messages.

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from studentdesk.app.api import marks, messages, students
from studentdesk.app.api.errors import register_error_handlers
from studentdesk.app.core.dev_seed import ensure_sample_students
from studentdesk.app.core.logging import get_logger
from studentdesk.app.core.settings import get_settings
from studentdesk.app.db.session import SessionLocal, init_db

settings = get_settings()
logger = get_logger()


def prepare_database():
    init_db()
    if settings.seed_sample_data:
        db = SessionLocal()
        try:
            ensure_sample_students(db)
        finally:
            db.close()
    logger.info("%s %s ready (%s)", settings.app_name, settings.api_version, settings.environment)


@asynccontextmanager
async def lifespan(app: FastAPI):
    prepare_database()
    yield


app = FastAPI(title=settings.app_name, version=settings.api_version, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(students.router)
app.include_router(marks.router)
app.include_router(messages.router)


@app.get("/")
def read_root():
    return {"app": "StudentDesk backend", "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/api/health")
def api_health_check():
    return {"ok": True}
