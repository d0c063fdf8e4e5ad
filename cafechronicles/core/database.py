from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from cafechronicles.core.config import settings


def build_engine(url: str):
    # SQLite engines pick their own pool class and reject the sizing options
    if url.startswith("sqlite"):
        return create_engine(url, echo=settings.DB_ECHO, connect_args={"check_same_thread": False})

    return create_engine(
        url,
        echo=settings.DB_ECHO,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_pre_ping=True,
    )


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
