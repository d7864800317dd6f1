"""
Configuration settings for the Jan Seva Scheme Finder
"""
from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field, ConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # MongoDB Configuration
    mongodb_url: str = Field(default="mongodb://localhost:27017", env="MONGODB_URL")
    mongodb_db_name: str = Field(default="janseva_db", env="MONGODB_DB_NAME")

    # Catalog collections
    schemes_collection: str = Field(default="schemes", env="SCHEMES_COLLECTION")
    scholarships_collection: str = Field(default="scholarships", env="SCHOLARSHIPS_COLLECTION")
    users_collection: str = Field(default="users", env="USERS_COLLECTION")

    # Application Configuration
    app_name: str = Field(default="Jan Seva Scheme Finder", env="APP_NAME")
    app_version: str = Field(default="1.0.0", env="APP_VERSION")
    debug: bool = Field(default=False, env="DEBUG")
    log_level: str = Field(default="INFO", env="LOG_LEVEL")

    # API Configuration
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:8080",
        env="CORS_ORIGINS"
    )

    # Security
    admin_api_key: str = Field(default="", env="ADMIN_API_KEY")
    user_id_header: str = Field(default="X-User-Id", env="USER_ID_HEADER")

    def get_cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list"""
        if ',' in self.cors_origins:
            return [origin.strip() for origin in self.cors_origins.split(',')]
        return [self.cors_origins.strip()]

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Create global settings instance
settings = Settings()
