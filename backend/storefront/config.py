"""
storefront/config.py - Application configuration and Firestore client.

This module defines a Pydantic BaseSettings class to load configuration from environment,
and lazily initializes the Firebase Admin SDK (Firestore) on first use.
Routers receive the client through `Depends(get_db)`, so importing the app needs no credentials.
"""
import os
from functools import lru_cache
from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""
    service_name: str = Field("storefront-api", description="Service name shown on the index endpoint")
    version: str = Field("1.0.0", description="Service version")
    debug: bool = Field(False, description="Expose unexpected error details in 500 responses")
    allowed_origins: str = Field("*", description="Comma-separated list or '*' for all")

    log_level: str = Field("INFO", description="Root log level")
    log_format: str = Field("text", description="text|json")

    firebase_cred_file: str = Field("firebase_service_account.json", description="Service account JSON path")
    firebase_project_id: Optional[str] = Field(None, description="GCP project id (optional with ADC/emulator)")
    collection_prefix: str = Field(
        "",
        validation_alias="FIREBASE_COLLECTION_PREFIX",
        description="Prepended to every collection name (e.g. 'test_')",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        if not self.allowed_origins or self.allowed_origins.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    def collection(self, name: str) -> str:
        """Prefix-aware collection name."""
        prefix = self.collection_prefix.strip()
        return f"{prefix}{name}" if prefix else name


settings = Settings()


def _credentials():
    # Service account file for local development, application default credentials otherwise
    if os.path.exists(settings.firebase_cred_file):
        return credentials.Certificate(settings.firebase_cred_file)
    return credentials.ApplicationDefault()


@lru_cache
def get_db():
    """Return the process-wide Firestore client, initializing Firebase on first call."""
    try:
        firebase_app = firebase_admin.get_app()
    except ValueError:
        options = {"projectId": settings.firebase_project_id} if settings.firebase_project_id else None
        firebase_app = firebase_admin.initialize_app(_credentials(), options)
    return firestore.client(firebase_app)
