"""Configuration management for yelplex."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field

from .constants import LexiconConstants


class Settings(BaseSettings):
    """Application settings."""

    # Input
    reviews_path: Optional[str] = Field(None, description="Newline-delimited JSON review file")
    max_lines: Optional[int] = Field(None, ge=1, description="Maximum number of review lines to read")

    # Resources
    lexicon_path: Optional[str] = Field(None, description="Tab-separated word/score lexicon overriding AFINN")
    lexicon_language: str = Field(LexiconConstants.DEFAULT_LEXICON_LANGUAGE, description="AFINN language code")
    stopwords_path: Optional[str] = Field(None, description="One-word-per-line stop-word file overriding NLTK")
    stopwords_language: str = Field(LexiconConstants.DEFAULT_STOPWORDS_LANGUAGE, description="NLTK stop-word language")

    # Word summary thresholds
    min_reviews: int = Field(200, ge=0, description="Minimum reviews containing a word")
    min_businesses: int = Field(10, ge=0, description="Minimum distinct businesses whose reviews contain a word")

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    class Config:
        env_prefix = "YELPLEX_"
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
