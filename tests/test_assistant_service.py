from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from types import SimpleNamespace

# Make the netflex package importable when running the tests locally
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from netflex.core.config import Settings  # noqa: E402
from netflex.domain.models import Genre  # noqa: E402
from netflex.domain.seed import seed_items  # noqa: E402
from netflex.services.assistant_service import (  # noqa: E402
    DRAFT_FAILED_MESSAGE,
    EMPTY_REPLY_FALLBACK,
    MISSING_FIELDS_MESSAGE,
    RECOMMEND_FAILED_MESSAGE,
    AssistantService,
    recommendation_prompt,
)


class FakeChatModel:
    def __init__(self, reply="", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def ainvoke(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return SimpleNamespace(content=self.reply)


def _settings(tmp_path) -> Settings:
    return Settings(
        app_env="test",
        storage_backend="memory",
        data_file=tmp_path / "data.json",
        database_url="sqlite://",
        latency_scale=0.0,
        log_level="INFO",
        gemini_api_key="",
        gemini_model="gemini-2.5-flash",
    )


def test_draft_description_uses_title_and_genre():
    model = FakeChatModel(reply="  Two dramatic sentences.  ")
    resp = asyncio.run(AssistantService(model=model).draft_description("Night Shift", Genre.HORROR))

    assert resp.success is True
    assert resp.data == "Two dramatic sentences."
    assert 'Horror movie titled "Night Shift"' in model.prompts[0]


def test_draft_description_requires_fields():
    model = FakeChatModel(reply="unused")
    svc = AssistantService(model=model)

    assert asyncio.run(svc.draft_description("", Genre.DRAMA)).message == MISSING_FIELDS_MESSAGE
    assert asyncio.run(svc.draft_description("Title", None)).message == MISSING_FIELDS_MESSAGE
    assert model.prompts == []


def test_provider_failure_is_reported_not_raised():
    svc = AssistantService(model=FakeChatModel(error=RuntimeError("quota exceeded")))

    drafted = asyncio.run(svc.draft_description("Title", "Drama"))
    recommended = asyncio.run(svc.recommend("anything", seed_items()))

    assert (drafted.success, drafted.message) == (False, DRAFT_FAILED_MESSAGE)
    assert (recommended.success, recommended.message) == (False, RECOMMEND_FAILED_MESSAGE)


def test_missing_configuration_is_reported(tmp_path):
    svc = AssistantService(settings=_settings(tmp_path))

    resp = asyncio.run(svc.draft_description("Title", Genre.DRAMA))
    assert resp.success is False
    assert resp.message == DRAFT_FAILED_MESSAGE


def test_recommend_falls_back_on_empty_reply():
    resp = asyncio.run(AssistantService(model=FakeChatModel(reply="")).recommend("something good", seed_items()))

    assert resp.success is True
    assert resp.data == EMPTY_REPLY_FALLBACK


def test_recommendation_prompt_lists_catalog_and_history():
    items = seed_items()

    prompt = recommendation_prompt("a thriller", items, [items[1]])
    assert "- Squid Game (2021, Thriller, Korea):" in prompt
    assert "recently watched/clicked on: Squid Game (Thriller)" in prompt
    assert 'USER QUERY: "a thriller"' in prompt

    assert "has not watched anything" in recommendation_prompt("x", items)


def test_list_content_reply_is_joined():
    model = FakeChatModel(reply=[{"type": "text", "text": "Try "}, {"type": "text", "text": "RRR."}])
    resp = asyncio.run(AssistantService(model=model).recommend("action", seed_items()))

    assert resp.data == "Try RRR."
