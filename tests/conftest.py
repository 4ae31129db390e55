import os
import tempfile
from types import SimpleNamespace

_TEST_DIR = tempfile.mkdtemp(prefix="mokri-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TEST_DIR, 'test.db')}"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["GEMINI_API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import delete

from app.core.config import settings
from app.core.dependencies import get_llm_client
from app.data.database import SessionLocal
from app.main import app
from app.models.database_models.query import Query
from app.models.database_models.user import User

SAMPLE_ANSWER = (
    "I understand how heavy this feels.\n\n"
    "[IMAGE_PLACEHOLDER_1]\n\n"
    ":::important [Learned Helplessness]\nSeligman showed how control shapes motivation.:::\n\n"
    ":::step [1]\nWrite down one small win every day.\n:::\n"
)


def make_response(text=None, inline_data=None, mime_type="image/png"):
    parts = []
    if inline_data is not None:
        parts.append(SimpleNamespace(text=None, inline_data=SimpleNamespace(data=inline_data, mime_type=mime_type)))
    return SimpleNamespace(
        text=text,
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=parts))],
    )


class FakeModels:
    def __init__(self):
        self.calls = []
        self.answer = SAMPLE_ANSWER
        self.image_bytes = b"\x89PNG fake"
        self.audio_bytes = b"\x01\x00" * 12
        self.fail_text = False
        self.fail_images = False
        self.no_audio = False

    async def generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if model == settings.TEXT_MODEL:
            if self.fail_text:
                raise RuntimeError("provider down")
            return make_response(text=self.answer)
        if model == settings.IMAGE_MODEL:
            if self.fail_images:
                raise RuntimeError("image quota exceeded")
            return make_response(inline_data=self.image_bytes)
        if model == settings.TTS_MODEL:
            if self.no_audio:
                return make_response()
            return make_response(inline_data=self.audio_bytes, mime_type="audio/L16;codec=pcm;rate=24000")
        raise AssertionError(f"unexpected model {model}")


class FakeClient:
    def __init__(self):
        self.models = FakeModels()
        self.aio = SimpleNamespace(models=self.models)


@pytest.fixture(scope="session")
def client() -> TestClient:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clean_database(client: TestClient):
    yield
    with SessionLocal() as db:
        db.execute(delete(Query))
        db.execute(delete(User))
        db.commit()


@pytest.fixture()
def fake_llm() -> FakeModels:
    fake = FakeClient()
    app.dependency_overrides[get_llm_client] = lambda: fake
    yield fake.models
    app.dependency_overrides.pop(get_llm_client, None)


@pytest.fixture()
def user(client: TestClient) -> dict:
    response = client.post("/api/login", json={"identifier": "sara@example.com"})
    assert response.status_code == 200
    return response.json()
