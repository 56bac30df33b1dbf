import os

from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file if it exists, for local development
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()


class SorterSettings(BaseSettings):
    questions_path: str = "assets/questions.yml"
    categories_path: str = "assets/categories.yml"
    log_level: str = "INFO"
    json_logs: bool = False

    model_config = SettingsConfigDict(env_prefix='KEIRSEY_')


def get_settings() -> SorterSettings:
    return SorterSettings()
