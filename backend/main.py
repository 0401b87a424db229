"""Drive — Main application entry point."""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import DATABASE_URL, LOG_LEVEL
from api.files.controllers.files_controller import router as files_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def run_migrations(database_url: str = DATABASE_URL):
    """Run Alembic migrations on startup.

    The config is built in code so installs without alembic.ini still migrate.
    """
    try:
        alembic_cfg = Config()
        alembic_cfg.set_main_option(
            "script_location", str(Path(__file__).parent / "db_migrations").replace("%", "%%")
        )
        # Config values go through ConfigParser interpolation
        alembic_cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
        command.upgrade(alembic_cfg, "head")
    except Exception as e:
        logger.warning("Migration failed, creating tables directly: %s", e)
        from database import init_db

        init_db()


app = FastAPI(title="Drive", version="0.1.0")

# Run database migrations
run_migrations()

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Health check before the catch-all /file routes
@app.get("/api/health")
async def health():
    return {"status": "ok"}


app.include_router(files_router)
