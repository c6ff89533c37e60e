"""
Structured logging for Backend GiveRep.

JSON logs with timestamp, level and event_type. Use get_logger() in every
module; bind_owner() when a whole flow concerns one wallet.
"""

from backend_giverep.giverep_logging.logger import bind_owner, configure_structlog, get_logger

__all__ = ["bind_owner", "configure_structlog", "get_logger"]
