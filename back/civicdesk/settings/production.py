# Local application imports
from civicdesk.settings.common import CommonSettings


class ProductionSettings(CommonSettings):
    DEBUG_MODE: bool = False
    SENTRY_DSN: str | None = None
    S3_SECURE: bool = True
