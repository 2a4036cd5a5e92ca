"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class DatabaseConfig(BaseModel):
    """Database connection configuration."""

    url: str = Field(
        default="sqlite+aiosqlite:///./funshop.db",
        alias="DATABASE_URL",
        description="Async database connection URL (PostgreSQL URLs are normalized to asyncpg)",
    )
    echo: bool = Field(default=False, alias="DATABASE_ECHO", description="Log every SQL statement")

    model_config = {"populate_by_name": True}


class SessionConfig(BaseModel):
    """Signed cookie session configuration."""

    secret_key: str = Field(
        default="change-me-funshop-session-secret",
        alias="SECRET_SESSION",
        description="Key used to sign the session cookie",
    )
    cookie_name: str = Field(default="funshop_session", alias="SESSION_COOKIE_NAME", description="Session cookie name")
    max_age: int = Field(default=24 * 60 * 60, alias="SESSION_MAX_AGE", description="Session lifetime in seconds")
    https_only: bool = Field(default=False, alias="SESSION_HTTPS_ONLY", description="Send the cookie over HTTPS only")

    model_config = {"populate_by_name": True}


class EmailConfig(BaseModel):
    """Outgoing SMTP configuration."""

    user: Optional[str] = Field(default=None, alias="EMAIL_USER", description="SMTP login, also used as sender address")
    password: Optional[str] = Field(default=None, alias="EMAIL_PASS", description="SMTP password or app password")
    host: str = Field(default="smtp.gmail.com", alias="EMAIL_HOST", description="SMTP server host")
    port: int = Field(default=587, alias="EMAIL_PORT", description="SMTP server port")
    use_tls: bool = Field(default=True, alias="EMAIL_USE_TLS", description="Upgrade the connection with STARTTLS")
    sender_name: str = Field(default="FunShop", alias="EMAIL_SENDER_NAME", description="Display name of the sender")

    model_config = {"populate_by_name": True}

    @property
    def is_configured(self) -> bool:
        return bool(self.user and self.password)


class AdminConfig(BaseModel):
    """Bootstrap administrator account created on first start."""

    username: str = Field(default="admin", alias="ADMIN_USERNAME", description="Administrator username")
    email: str = Field(default="admin@mail.com", alias="ADMIN_EMAIL", description="Administrator login email")
    password: str = Field(default="admin1234", alias="ADMIN_PASSWORD", description="Administrator initial password")

    model_config = {"populate_by_name": True}


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )
    allow_methods: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_METHODS", description="Allowed HTTP methods (use * for all)"
    )
    allow_headers: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers (use * for all)"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # FunShop Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="FunShop server host address to bind to",
        alias="FUNSHOP_SERVER_HOST",
    )
    server_port: int = Field(
        default=8000,
        description="FunShop server port number",
        alias="FUNSHOP_SERVER_PORT",
    )
    log_level: str = Field(
        default="INFO",
        description="FunShop server logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="FUNSHOP_LOG_LEVEL",
    )
    log_format: str = Field(default="detailed", description="Log line format (simple or detailed)", alias="LOG_FORMAT")
    log_file_dir: str = Field(default="logs", description="Directory of funshop.log", alias="LOG_FILE_DIR")
    enable_file_logging: bool = Field(default=True, alias="ENABLE_FILE_LOGGING")
    public_base_url: Optional[str] = Field(
        default=None,
        description="Externally visible base URL used in email links; defaults to the request base URL",
        alias="PUBLIC_BASE_URL",
    )
    password_reset_ttl_minutes: int = Field(
        default=60,
        description="Lifetime of a password reset token in minutes",
        alias="PASSWORD_RESET_TTL_MINUTES",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./funshop.db",
        description="Async connection URL for the application database",
        alias="DATABASE_URL",
    )
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO")

    # =====================================================================
    # Session Configuration
    # =====================================================================
    secret_session: str = Field(default="change-me-funshop-session-secret", alias="SECRET_SESSION")
    session_cookie_name: str = Field(default="funshop_session", alias="SESSION_COOKIE_NAME")
    session_max_age: int = Field(default=24 * 60 * 60, alias="SESSION_MAX_AGE")
    session_https_only: bool = Field(default=False, alias="SESSION_HTTPS_ONLY")

    # =====================================================================
    # Email Configuration
    # =====================================================================
    email_user: Optional[str] = Field(default=None, alias="EMAIL_USER")
    email_pass: Optional[str] = Field(default=None, alias="EMAIL_PASS")
    email_host: str = Field(default="smtp.gmail.com", alias="EMAIL_HOST")
    email_port: int = Field(default=587, alias="EMAIL_PORT")
    email_use_tls: bool = Field(default=True, alias="EMAIL_USE_TLS")
    email_sender_name: str = Field(default="FunShop", alias="EMAIL_SENDER_NAME")

    # =====================================================================
    # Admin Bootstrap Configuration
    # =====================================================================
    admin_username: str = Field(default="admin", alias="ADMIN_USERNAME")
    admin_email: str = Field(default="admin@mail.com", alias="ADMIN_EMAIL")
    admin_password: str = Field(default="admin1234", alias="ADMIN_PASSWORD")

    # =====================================================================
    # CORS Configuration
    # =====================================================================
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(default=["*"], alias="CORS_ALLOW_METHODS")
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def database(self) -> DatabaseConfig:
        """Get database configuration from environment variables."""
        return DatabaseConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def session(self) -> SessionConfig:
        """Get session cookie configuration from environment variables."""
        return SessionConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def email(self) -> EmailConfig:
        """Get SMTP configuration from environment variables."""
        return EmailConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def admin(self) -> AdminConfig:
        """Get bootstrap administrator configuration from environment variables."""
        return AdminConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
