import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


@dataclass(frozen=True)
class Secrets:
    geogebra_api_token: str = ""

    def has_api_token(self) -> bool:
        return bool(self.geogebra_api_token)


def load_secrets(env_path: Path = Path(".env")) -> Secrets:
    """Load secrets from environment variables and .env file."""
    load_dotenv(env_path)

    return Secrets(
        geogebra_api_token=os.environ.get("GEOGEBRA_API_TOKEN", ""),
    )
