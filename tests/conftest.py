"""Shared pytest fixtures for mediadesk tests."""

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from mediadesk.config import Settings
from mediadesk.db.schema import Base, Model, Video
from mediadesk.db.session import build_engine


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = build_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def settings():
    """Settings with an image allow-list containing one test host."""
    return Settings(image_hosts=frozenset({"img.example.com"}))


@pytest.fixture
def client(engine, settings):
    """TestClient wired to the in-memory engine."""
    from mediadesk.api.app import create_app, get_db_session

    app = create_app(settings)

    def override_get_db():
        with Session(engine) as db_session:
            yield db_session

    app.dependency_overrides[get_db_session] = override_get_db
    return TestClient(app)


BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def add_models(session, *names, ethnicity=None):
    """Insert models with created_at increasing in argument order. Returns ids."""
    ids = []
    for offset, name in enumerate(names):
        model = Model(
            name=name,
            ethnicity=ethnicity,
            created_at=BASE_TIME + timedelta(minutes=offset),
        )
        session.add(model)
        session.flush()
        ids.append(model.id)
    session.commit()
    return ids


def add_video(session, title, *, model_ids=(), views=0, minutes=0):
    """Insert a video uploaded `minutes` after BASE_TIME. Returns its id."""
    when = BASE_TIME + timedelta(minutes=minutes)
    video = Video(
        title=title,
        url=f"https://cdn.example.com/{title}.mp4",
        views=views,
        uploaded_at=when,
        created_at=when,
    )
    video.models = [session.get(Model, model_id) for model_id in model_ids]
    session.add(video)
    session.flush()
    video_id = video.id
    session.commit()
    return video_id
