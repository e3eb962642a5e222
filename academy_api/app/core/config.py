"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for every field so the
application can be imported (and tested) without a populated
environment; the hosted collaborators (Supabase, Cloudinary) are only
contacted once the application starts serving requests.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Football Academy API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Supabase project.  The service key is preferred because row level
    # security is not configured for the academy tables; the anon key is
    # accepted as a fallback for read-only deployments.
    supabase_url: str = os.getenv("SUPABASE_URL", "")
    supabase_key: str = os.getenv("SUPABASE_SERVICE_KEY") or os.getenv("SUPABASE_KEY", "")

    # Secret used by the Supabase auth server to sign access tokens.
    # Found under Project Settings -> API -> JWT Secret.
    jwt_secret: str = os.getenv("SUPABASE_JWT_SECRET", "")
    jwt_audience: str = os.getenv("JWT_AUDIENCE", "authenticated")

    # Cloudinary credentials for player, coach and match photos.
    cloudinary_cloud_name: str = os.getenv("CLOUDINARY_CLOUD_NAME", "")
    cloudinary_api_key: str = os.getenv("CLOUDINARY_API_KEY", "")
    cloudinary_api_secret: str = os.getenv("CLOUDINARY_API_SECRET", "")
    cloudinary_folder: str = os.getenv("CLOUDINARY_FOLDER", "akademi")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # ``production`` means the platform (e.g. Vercel) owns the listener and
    # imports the ASGI app itself; ``run.py`` must not bind a port then.
    environment: str = os.getenv("APP_ENV", "development")

    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*"))
    )

    @property
    def serve_locally(self) -> bool:
        return self.environment.lower() != "production"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
