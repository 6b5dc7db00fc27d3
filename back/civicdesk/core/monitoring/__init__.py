# Local application imports
from civicdesk.core.monitoring.logging import get_contextual_logger, get_logger
from civicdesk.core.monitoring.sentry import setup_sentry

__all__ = ["get_contextual_logger", "get_logger", "setup_sentry"]
