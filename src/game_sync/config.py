from pydantic_settings import BaseSettings

from game_sync.models import SortOption


class Settings(BaseSettings):
    log_level: str = "info"
    # Sort applied to partition listings when the CLI gets no --sort
    default_sort: SortOption = "title_asc"
    # ANSI colors in log lines and CLI tables. Turn off when piping to files.
    color: bool = True

    model_config = {
        "env_prefix": "GAME_SYNC_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
