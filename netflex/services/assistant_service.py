"""
Optional generative-text helpers: synopsis drafting for the upload form and
a conversational recommender for viewers.

The chat model is created lazily so the catalog keeps working when the
provider package or API key is missing; every failure comes back as an
unsuccessful ApiResponse.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from netflex.core.config import Settings, get_settings
from netflex.domain.models import ApiResponse, ContentItem, Genre

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Please enter a Title and Genre to generate a description."
DRAFT_FAILED_MESSAGE = "Failed to generate description with AI."
RECOMMEND_FAILED_MESSAGE = "I'm having a bit of trouble connecting to the movie database right now. Try again in a moment!"
EMPTY_REPLY_FALLBACK = "I couldn't find a perfect match, but take a look around the popular section!"


class AssistantUnavailableError(Exception):
    """No chat model could be configured."""


def _build_default_model(settings: Settings) -> Any:
    try:
        from langchain_google_genai import ChatGoogleGenerativeAI
    except ImportError as exc:
        raise AssistantUnavailableError(
            "The assistant needs langchain-google-genai. Install it with: pip install 'netflex[assistant]'"
        ) from exc
    if not settings.gemini_api_key:
        raise AssistantUnavailableError("GEMINI_API_KEY is not configured")
    return ChatGoogleGenerativeAI(model=settings.gemini_model, api_key=settings.gemini_api_key)


def _reply_text(reply: Any) -> str:
    content = getattr(reply, "content", reply)
    if isinstance(content, list):
        parts = [p.get("text", "") if isinstance(p, dict) else str(p) for p in content]
        content = "".join(parts)
    return str(content or "").strip()


def description_prompt(title: str, genre: Genre | str) -> str:
    genre_name = genre.value if isinstance(genre, Genre) else str(genre)
    return (
        f'Write a compelling and dramatic 2-sentence synopsis for a {genre_name} movie titled "{title}". '
        "The description should sound like a Netflix movie summary."
    )


def recommendation_prompt(query: str, catalog: Iterable[ContentItem], history: Sequence[ContentItem] = ()) -> str:
    catalog_lines = "\n".join(
        f"- {m.title} ({m.year}, {m.genre.value}, {m.country.value}): {m.description}" for m in catalog
    )
    if history:
        watched = ", ".join(f"{m.title} ({m.genre.value})" for m in history)
        history_context = (
            f"The user has recently watched/clicked on: {watched}. "
            'Use this to personalize recommendations (e.g. "Since you liked X...").'
        )
    else:
        history_context = "The user has not watched anything in this session yet."
    return f"""You are an enthusiastic and knowledgeable movie recommendation assistant for Netflex.

CATALOG OF AVAILABLE MOVIES:
{catalog_lines}

USER SESSION CONTEXT:
{history_context}

USER QUERY: "{query}"

INSTRUCTIONS:
1. Recommend 1-3 movies strictly from the CATALOG above.
2. If the user's history is relevant, reference it to explain your choice.
3. If the query is vague (e.g., "something good"), use the popular or high-quality items from the catalog.
4. Keep the tone friendly, brief (max 3 sentences), and engaging.
5. Do not make up movies. Only use the ones listed.
"""


class AssistantService:
    """Thin wrapper over a LangChain chat model (anything with ``ainvoke``)."""

    def __init__(self, model: Any | None = None, settings: Settings | None = None) -> None:
        self._model = model
        self.settings = settings or get_settings()

    def _get_model(self) -> Any:
        if self._model is None:
            self._model = _build_default_model(self.settings)
        return self._model

    async def _complete(self, prompt: str) -> str:
        reply = await self._get_model().ainvoke(prompt)
        return _reply_text(reply)

    async def draft_description(self, title: str, genre: Genre | str | None) -> ApiResponse[str]:
        if not (title or "").strip() or not genre:
            return ApiResponse[str].fail(MISSING_FIELDS_MESSAGE)
        try:
            text = await self._complete(description_prompt(title.strip(), genre))
        except Exception:
            logger.exception("Description generation failed")
            return ApiResponse[str].fail(DRAFT_FAILED_MESSAGE)
        if not text:
            return ApiResponse[str].fail(DRAFT_FAILED_MESSAGE)
        return ApiResponse[str].ok(text)

    async def recommend(
        self,
        query: str,
        catalog: Iterable[ContentItem],
        history: Sequence[ContentItem] = (),
    ) -> ApiResponse[str]:
        try:
            text = await self._complete(recommendation_prompt(query, catalog, history))
        except Exception:
            logger.exception("Recommendation request failed")
            return ApiResponse[str].fail(RECOMMEND_FAILED_MESSAGE)
        return ApiResponse[str].ok(text or EMPTY_REPLY_FALLBACK)
