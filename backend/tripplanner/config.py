"""Runtime configuration.

Values come from environment variables (a ``.env`` file in the working
directory is loaded first). Nothing here holds secrets.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _env_list(name: str, default: str) -> list[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    """Service settings, one instance per application."""

    log_level: str = "INFO"
    cors_origins: list[str] = field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://localhost:5173",
        ]
    )

    # Geocoding
    geocoding_provider: str = "nominatim"
    nominatim_url: str = "https://nominatim.openstreetmap.org/search"
    photon_url: str = "https://photon.komoot.io/api/"
    geocode_timeout: float = 8.0
    geocode_concurrency: int = 2
    geocoder_user_agent: str = "TripPlanner/1.0 (contact@tripplanner.app)"

    # Geocode cache (coordinates only)
    geocode_cache_size: int = 512
    geocode_cache_ttl: int = 86400
    redis_url: Optional[str] = None

    # NLP
    spacy_model: str = "en_core_web_sm"

    # Remote API client
    trip_api_base_url: str = "http://localhost:8000"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment."""
        defaults = cls()
        return cls(
            log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
            cors_origins=_env_list("CORS_ORIGINS", ",".join(defaults.cors_origins)),
            geocoding_provider=os.getenv("GEOCODING_PROVIDER", defaults.geocoding_provider).lower(),
            nominatim_url=os.getenv("NOMINATIM_URL", defaults.nominatim_url),
            photon_url=os.getenv("PHOTON_URL", defaults.photon_url),
            geocode_timeout=float(os.getenv("GEOCODE_TIMEOUT", str(defaults.geocode_timeout))),
            geocode_concurrency=max(1, int(os.getenv("GEOCODE_CONCURRENCY", str(defaults.geocode_concurrency)))),
            geocoder_user_agent=os.getenv("GEOCODER_USER_AGENT", defaults.geocoder_user_agent),
            geocode_cache_size=int(os.getenv("GEOCODE_CACHE_SIZE", str(defaults.geocode_cache_size))),
            geocode_cache_ttl=int(os.getenv("GEOCODE_CACHE_TTL", str(defaults.geocode_cache_ttl))),
            redis_url=os.getenv("REDIS_URL") or None,
            spacy_model=os.getenv("SPACY_MODEL", defaults.spacy_model),
            trip_api_base_url=os.getenv("TRIP_API_BASE_URL", defaults.trip_api_base_url),
        )
