# Local application imports
from civicdesk.settings.common import CommonSettings


class DevSettings(CommonSettings):
    DEBUG_MODE: bool = True
    DB_ECHO: bool = True
