# backend/app/redis_client.py

from typing import Optional

from redis import Redis

from .config import settings

# None when REDIS_URL is not configured: events are disabled
redis_client: Optional[Redis] = (
    Redis.from_url(settings.redis_url, decode_responses=True, socket_timeout=2.0)
    if settings.redis_url
    else None
)
