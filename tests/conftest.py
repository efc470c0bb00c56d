import pytest
from fastapi.testclient import TestClient

from career_engine.main import app
from career_engine.models import QuizAnswer


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_answers():
    def _make(level="10th", subjects=(), interests=(), hobbies=(), marks="Above 90%"):
        return QuizAnswer(
            level=level,
            marks=marks,
            subjects=frozenset(subjects),
            interests=frozenset(interests),
            hobbies=frozenset(hobbies),
        )
    return _make
