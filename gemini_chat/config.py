import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    api_url: str
    api_key: str

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            api_url=os.environ.get("GEMINI_API_URL", ""),
            api_key=os.environ.get("GEMINI_API_KEY", ""),
        )
