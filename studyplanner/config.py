from pydantic_settings import BaseSettings
from pathlib import Path

# Get the project root directory (parent of studyplanner folder)
PROJECT_ROOT = Path(__file__).parent.parent

class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""
    database_url: str = "sqlite:///./studyplanner.db"
    
    # Logging
    log_level: str = "INFO"
    sql_echo: bool = False  # echo SQL statements from the engine
    
    class Config:
        env_file = str(PROJECT_ROOT / ".env")
        env_prefix = "STUDYPLANNER_"
        extra = "ignore"

settings = Settings()
