import logging
import os
import uuid
from contextlib import contextmanager
from typing import Iterator, Optional

import structlog


def setup_logging(level: Optional[str] = None) -> None:
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(format="%(message)s", level=getattr(logging, level, logging.INFO))
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@contextmanager
def sync_pass_context(farm_id: Optional[str] = None, pass_id: Optional[str] = None) -> Iterator[str]:
    """Tag every log line emitted during one sync pass with its pass id and farm."""
    pass_id = pass_id or str(uuid.uuid4())
    with structlog.contextvars.bound_contextvars(sync_pass_id=pass_id, farm_id=farm_id):
        yield pass_id
