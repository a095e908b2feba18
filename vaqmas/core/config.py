# vaqmas/core/config.py
from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Service-account JSON used by the Admin SDK
    FIREBASE_CREDENTIALS: str = "vaqmas/core/firebase_key.json"

    # Web client project configuration (also exposed to the public site)
    FIREBASE_API_KEY: str = ""
    FIREBASE_AUTH_DOMAIN: str = ""
    FIREBASE_PROJECT_ID: str = ""
    FIREBASE_STORAGE_BUCKET: str = ""
    FIREBASE_MESSAGING_SENDER_ID: str = ""
    FIREBASE_APP_ID: str = ""
    FIREBASE_MEASUREMENT_ID: str = ""

    # Lifetime of signed image URLs when a blob has no download token
    SIGNED_URL_TTL_MINUTES: int = 60

    LOG_LEVEL: str = "INFO"
    DEBUG_MODE: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    def client_config(self) -> dict:
        """Firebase web config as the browser SDK expects it."""
        return {
            "apiKey": self.FIREBASE_API_KEY,
            "authDomain": self.FIREBASE_AUTH_DOMAIN,
            "projectId": self.FIREBASE_PROJECT_ID,
            "storageBucket": self.FIREBASE_STORAGE_BUCKET,
            "messagingSenderId": self.FIREBASE_MESSAGING_SENDER_ID,
            "appId": self.FIREBASE_APP_ID,
            "measurementId": self.FIREBASE_MEASUREMENT_ID,
        }


@lru_cache
def get_settings() -> Settings:
    return Settings()
