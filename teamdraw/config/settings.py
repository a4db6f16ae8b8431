# teamdraw/config/settings.py

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    GROUP_COUNT_DEFAULT: int = 2
    GROUP_SIZE_DEFAULT: int = 5
    # refinement pass
    MAX_ATTEMPTS: int = 100
    BALANCE_TOLERANCE: int = 2
    # top participants seeded per group before the greedy fill
    TOP_PER_GROUP: int = 2
    SHARE_TITLE: str = "Teams drawn"


    class Config:
        env_file = ".env"

settings = Settings()
