"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    APP_ENV = os.getenv("APP_ENV", "development")
    TESTING = os.getenv("TESTING", "false").lower() in {"1", "true", "yes", "on"}
    DEBUG = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes", "on"}

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Auth
    SERVICE_AUTH_SECRET = os.getenv(
        "SERVICE_AUTH_SECRET", "dev-only-secret-key-change-me-in-production"
    )
    SERVICE_AUTH_ISSUER = os.getenv("SERVICE_AUTH_ISSUER", "jobboard-api")
    SERVICE_AUTH_AUDIENCE = os.getenv("SERVICE_AUTH_AUDIENCE", "jobboard-clients")
    ACCESS_TOKEN_TTL_SECONDS: int = int(
        os.getenv("ACCESS_TOKEN_TTL_SECONDS", str(7 * 24 * 3600))
    )
    # Socket tokens are fetched right before the upgrade, so they can be short
    WS_TOKEN_TTL_SECONDS: int = int(os.getenv("WS_TOKEN_TTL_SECONDS", "300"))
    WS_TOKEN_RATE_LIMIT = os.getenv("WS_TOKEN_RATE_LIMIT", "30/minute")

    # WebSocket
    WS_PATH = os.getenv("WS_PATH", "/ws")
    MAX_MESSAGE_LENGTH: int = int(os.getenv("MAX_MESSAGE_LENGTH", "5000"))

    # Storage backend: "prisma" (PostgreSQL) or "memory"
    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "prisma").lower()
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")
    CONVERSATION_MESSAGE_LIMIT: int = int(
        os.getenv("CONVERSATION_MESSAGE_LIMIT", "50")
    )
    RECENT_MESSAGE_LIMIT: int = int(os.getenv("RECENT_MESSAGE_LIMIT", "10"))

    # Redis settings
    REDIS_ENABLED = os.getenv("REDIS_ENABLED", "false").lower() in {
        "1",
        "true",
        "yes",
        "on",
    }
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    REDIS_CACHE_TTL: int = int(os.getenv("REDIS_CACHE_TTL", "300"))


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    STORAGE_BACKEND = "memory"
    REDIS_ENABLED = False


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = Config.APP_ENV
    return config.get(env, config["default"])
