import logging

from fastapi import Depends, FastAPI
from sqlalchemy import text
from sqlalchemy.orm import Session

from . import redis_client as redis_module
from .config import settings
from .database import get_db
from .middleware.audit import audit_middleware
from .routers import property_rooms

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Property Rooms API")

app.middleware("http")(audit_middleware)

app.include_router(property_rooms.router)


@app.get("/health")
def health(db: Session = Depends(get_db)):
    try:
        db_ok = db.execute(text("SELECT 1")).scalar() == 1
    except Exception:
        logger.exception("Database health check failed")
        db_ok = False

    client = redis_module.redis_client
    if client is None:
        redis_ok = None
    else:
        try:
            redis_ok = bool(client.ping())
        except Exception:
            logger.exception("Redis health check failed")
            redis_ok = False

    return {"db": db_ok, "redis": redis_ok}
