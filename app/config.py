from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


ROOT = Path(__file__).resolve().parent.parent


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: Env = Env.local
    ping_message: str = "ping"
    recommend_url: str = (
        "https://t34tfhi733.execute-api.ap-southeast-2.amazonaws.com/prod/recommend"
    )
    auth_url: str = "https://0ectiuhd8a.execute-api.ap-southeast-2.amazonaws.com/login"
    remote_timeout: float = 10.0
    demo_username: str = "demouser"
    demo_password: str = "demo123"
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"
    html_dir: Path = ROOT / "assets" / "html"
    assets_dir: Path = ROOT / "assets"
