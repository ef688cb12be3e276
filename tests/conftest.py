from datetime import date, datetime
from zoneinfo import ZoneInfo

import pytest

from agenda import FixedClock
from config import Settings
from database import init_db, make_engine
from sqlalchemy.orm import sessionmaker

TZ_NAME = "America/Sao_Paulo"
TZ = ZoneInfo(TZ_NAME)

# 2024-03-10 is a Sunday.
SUNDAY = datetime(2024, 3, 10, 8, 0, tzinfo=TZ)
MONDAY = datetime(2024, 3, 11, 8, 0, tzinfo=TZ)
WEDNESDAY = datetime(2024, 3, 13, 8, 0, tzinfo=TZ)


class StubFallback:
    """Stands in for the general-purpose parser and records its calls."""

    def __init__(self, result=None):
        self.result = result
        self.calls = []

    def __call__(self, message, reference):
        self.calls.append((message, reference))
        return self.result


def local(y, m, d, hh=8, mm=0):
    return datetime(y, m, d, hh, mm, tzinfo=TZ)


@pytest.fixture
def tz():
    return TZ


@pytest.fixture
def stub_fallback():
    return StubFallback()


@pytest.fixture
def session_factory():
    engine = make_engine("sqlite:///:memory:")
    init_db(engine)
    factory = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    yield factory
    engine.dispose()


@pytest.fixture
def settings():
    return Settings(timezone=TZ_NAME, database_url="sqlite:///:memory:", parse_mode="lenient")


@pytest.fixture
def make_client(settings, session_factory):
    from app import create_app

    def _make(now=SUNDAY, factory=None, fallback=None):
        app = create_app(
            settings=settings,
            clock=FixedClock(now),
            session_factory=factory or session_factory,
            fallback=fallback or StubFallback(date(2024, 5, 1)),
        )
        app.config["TESTING"] = True
        return app.test_client()

    return _make


@pytest.fixture
def client(make_client):
    return make_client()
