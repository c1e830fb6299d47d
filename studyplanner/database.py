from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from studyplanner.config import settings


def create_db_engine(database_url: str = None):
    """Create SQLAlchemy engine for the configured database"""
    url = database_url or settings.database_url
    connect_args = {}
    if url.startswith("sqlite"):
        # sessions may be used from another thread
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=settings.sql_echo, connect_args=connect_args)


engine = create_db_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_db(bind=None):
    """Create all tables"""
    # Models must be imported so they register on Base.metadata
    import studyplanner.models  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)
