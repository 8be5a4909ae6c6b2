"""
backend/app/services/events.py

Event emitter: pushes domain events to a Redis list for downstream consumers
(notifications, search indexing).

Queue:
- events:p2p — one JSON object per event, consumers BLPOP from the head
"""

import json
import time
import logging

from .. import redis_client as redis_module

logger = logging.getLogger(__name__)

EVENTS_QUEUE = "events:p2p"


def emit_event(event_type: str, payload: dict) -> None:
    """
    Emit an event (best-effort).

    No-op when Redis is not configured; Redis errors are logged, never raised.
    """
    client = redis_module.redis_client
    if client is None:
        logger.debug(f"Redis not configured, event {event_type} dropped")
        return

    event = {
        "type": event_type,
        **payload,
        "ts": int(time.time()),
    }
    try:
        client.rpush(EVENTS_QUEUE, json.dumps(event))
        logger.info(f"Event emitted: {event_type} → {EVENTS_QUEUE}")
    except Exception as e:
        logger.error(f"Failed to emit event {event_type}: {e}")
