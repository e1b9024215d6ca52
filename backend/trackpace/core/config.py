from pydantic_settings import BaseSettings
from pydantic import field_validator

from trackpace.core.constants import DEFAULT_BASIS_M


class Settings(BaseSettings):
    # Run history lives in a local SQLite file by default
    database_url: str = "sqlite:///./trackpace.db"

    # Calculator defaults shown in the settings screen
    default_basis_m: float = DEFAULT_BASIS_M
    default_lane: int = 1

    log_level: str = "INFO"

    @field_validator("default_basis_m")
    @classmethod
    def _positive_basis(cls, v):
        if v <= 0:
            raise ValueError("default_basis_m must be > 0")
        return v

    @field_validator("default_lane")
    @classmethod
    def _valid_lane(cls, v):
        if v < 1:
            raise ValueError("default_lane must be >= 1")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return str(v).upper() if v else "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
