from pydantic import Field, AliasChoices, ConfigDict
from pydantic_settings import BaseSettings
from typing import List
from dotenv import load_dotenv

load_dotenv('.env.local')

class Settings(BaseSettings):
    # Environment
    ENVIRONMENT: str = Field(default="development", validation_alias=AliasChoices("ENVIRONMENT", "NODE_ENV"))
    DEBUG: bool = Field(default=False)

    # Server
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3004)
    API_PREFIX: str = Field(default="/api")

    # Database (empty -> demo mode with in-memory data)
    DATABASE_URL: str = Field(default="")
    SQLALCHEMY_DISABLE_POOL: bool = Field(default=False)

    # Auth
    AUTH_ENABLED: bool = Field(default=False)
    JWT_SECRET: str = Field(default="treloar-demo-secret-change-in-production")
    JWT_ALGORITHM: str = Field(default="HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=480)
    DEMO_USERNAME: str = Field(default="demo")
    DEMO_PASSWORD: str = Field(default="")

    # Call screening
    CALL_HISTORY_LIMIT: int = Field(default=50)
    DEFAULT_PHONE_REGION: str = Field(default="US")

    # Usage / mock billing (0 disables the limit)
    PLAN_MONTHLY_CREDIT_LIMIT: float = Field(default=25.0)

    # Keep-alive self ping (empty URL disables it)
    KEEP_ALIVE_URL: str = Field(default="")
    KEEP_ALIVE_INTERVAL_SECONDS: int = Field(default=840)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    REQUEST_LOGGING_ENABLED: bool = Field(default=False)

    # CORS
    BACKEND_CORS_ORIGINS: str = Field(default="*")


    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.BACKEND_CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def demo_mode(self) -> bool:
        return not self.DATABASE_URL.strip()


    model_config = ConfigDict(
        env_file=".env.local",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
