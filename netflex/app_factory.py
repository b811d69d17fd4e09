"""Entry point that wires stores, repositories and services into one API object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from netflex.core.config import Settings, get_settings
from netflex.core.latency import Latency
from netflex.domain.catalog import WatchHistory
from netflex.domain.models import ApiResponse, ContentDraft, ContentItem, ContentPatch, Genre, Session
from netflex.repositories.base import KeyValueStore, build_store
from netflex.repositories.content_repository import ContentRepository
from netflex.repositories.session_repository import SessionRepository
from netflex.services.assistant_service import AssistantService
from netflex.services.auth_service import NOT_AUTHENTICATED_MESSAGE, AuthService
from netflex.services.content_service import ContentService
from netflex.services.upload_service import UploadSource, upload_binary


@dataclass
class NetflexApi:
    """The call surface the viewing and admin screens use."""

    content: ContentService
    auth: AuthService
    assistant: AssistantService
    history: WatchHistory

    def initialize(self) -> bool:
        return self.content.initialize()

    # -------------------------------------- auth --------------------------------------
    async def login(self, username: str, password: str) -> ApiResponse[Session]:
        return await self.auth.login(username, password)

    def logout(self) -> None:
        self.auth.logout()
        self.history.clear()

    def get_current_user(self) -> Session | None:
        return self.auth.get_current_session()

    def _denied(self, require_auth: bool) -> bool:
        return require_auth and self.auth.get_current_session() is None

    # -------------------------------------- catalog --------------------------------------
    async def list_movies(self) -> ApiResponse[list[ContentItem]]:
        return await self.content.list_all()

    async def get_movie(self, content_id: str) -> ApiResponse[ContentItem]:
        return await self.content.get_by_id(content_id)

    async def create_movie(
        self, fields: ContentDraft | Mapping[str, Any], *, require_auth: bool = False
    ) -> ApiResponse[ContentItem]:
        if self._denied(require_auth):
            return ApiResponse[ContentItem].fail(NOT_AUTHENTICATED_MESSAGE)
        return await self.content.create(fields)

    async def update_movie(
        self, content_id: str, fields: ContentPatch | Mapping[str, Any], *, require_auth: bool = False
    ) -> ApiResponse[ContentItem]:
        if self._denied(require_auth):
            return ApiResponse[ContentItem].fail(NOT_AUTHENTICATED_MESSAGE)
        return await self.content.update(content_id, fields)

    async def delete_movie(self, content_id: str, *, require_auth: bool = False) -> ApiResponse[None]:
        if self._denied(require_auth):
            return ApiResponse[None].fail(NOT_AUTHENTICATED_MESSAGE)
        return await self.content.delete(content_id)

    async def upload_file(self, source: UploadSource, mime_type: str | None = None, filename: str | None = None) -> str:
        return await upload_binary(source, mime_type=mime_type, filename=filename)

    # -------------------------------------- viewing --------------------------------------
    def record_play(self, item: ContentItem) -> None:
        self.history.record(item)

    async def draft_description(self, title: str, genre: Genre | str | None) -> ApiResponse[str]:
        return await self.assistant.draft_description(title, genre)

    async def recommend(self, query: str, catalog: Sequence[ContentItem] | None = None) -> ApiResponse[str]:
        if catalog is None:
            listed = await self.content.list_all()
            catalog = listed.data or []
        return await self.assistant.recommend(query, catalog, self.history.items)


def create_api(
    settings: Settings | None = None,
    *,
    store: KeyValueStore | None = None,
    latency: Latency | None = None,
    assistant: AssistantService | None = None,
    seed: bool = True,
) -> NetflexApi:
    """Build the API from settings. Seeds the example catalog unless ``seed`` is False."""
    settings = settings or get_settings()
    store = store if store is not None else build_store(settings)
    latency = latency if latency is not None else Latency(scale=settings.latency_scale)
    api = NetflexApi(
        content=ContentService(ContentRepository(store), latency),
        auth=AuthService(SessionRepository(store), latency),
        assistant=assistant or AssistantService(settings=settings),
        history=WatchHistory(),
    )
    if seed:
        api.initialize()
    return api
