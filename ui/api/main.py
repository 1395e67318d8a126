"""FastAPI layer exposing catalog, survey and recommendation operations."""
from __future__ import annotations

from time import time

from fastapi import FastAPI, HTTPException, Query as FastAPIQuery
from pydantic import BaseModel, Field

from application.use_cases.catalog import add_items, latest_items
from application.use_cases.recommend import recommend
from application.use_cases.submit_survey import submit_survey
from domain.entities import CatalogItem, Document, ItemKind, UserProfile
from infrastructure.config import Container, ContainerConfig, build_default_container
from ui.logging_utils import setup_logging


class CatalogItemPayload(BaseModel):
    id: str
    kind: ItemKind
    name: str
    category: str
    description: str = ""
    created_at: int | None = None
    metadata: dict = Field(default_factory=dict)

    @classmethod
    def from_item(cls, item: CatalogItem) -> "CatalogItemPayload":
        return cls(
            id=item.id,
            kind=item.kind,
            name=item.name,
            category=item.category,
            description=item.description,
            created_at=item.created_at,
            metadata=item.metadata,
        )

    def to_item(self, default_created_at: int) -> CatalogItem:
        return CatalogItem(
            id=self.id,
            kind=self.kind,
            name=self.name,
            category=self.category,
            description=self.description,
            created_at=self.created_at if self.created_at is not None else default_created_at,
            metadata=dict(self.metadata),
        )


class IngestRequest(BaseModel):
    items: list[CatalogItemPayload]


class IngestResponse(BaseModel):
    ingested: int


class SurveyRequest(BaseModel):
    product_categories: list[str] = Field(default_factory=list)
    food_categories: list[str] = Field(default_factory=list)
    keywords: str = ""
    session_id: str | None = None


class ProfileResponse(BaseModel):
    uid: str
    product_categories: list[str]
    food_categories: list[str]
    liked_keywords: list[str]
    survey_completed: bool

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "ProfileResponse":
        return cls(
            uid=profile.uid,
            product_categories=profile.preferences.product_categories,
            food_categories=profile.preferences.food_categories,
            liked_keywords=profile.preferences.liked_keywords,
            survey_completed=profile.survey_completed,
        )


class RecommendationsResponse(BaseModel):
    query_tokens: list[str]
    products: list[CatalogItemPayload]
    foods: list[CatalogItemPayload]


class DocumentPayload(BaseModel):
    id: str
    text: str


class RankRequest(BaseModel):
    documents: list[DocumentPayload]
    query_tokens: list[str] = Field(default_factory=list)
    top_n: int = 6


class RankResponse(BaseModel):
    ids: list[str]


def create_app(container: Container | None = None) -> FastAPI:
    """Build the API; without a container, wire one from the environment."""

    if container is None:
        setup_logging()
        container = build_default_container(ContainerConfig.from_env())
    config = container.config

    app = FastAPI(title="Catalog Recommender API")

    @app.post("/items", response_model=IngestResponse)
    def ingest_endpoint(payload: IngestRequest) -> IngestResponse:
        now_ms = int(time() * 1000)
        # Later items in a batch count as newer.
        items = [item.to_item(now_ms + index) for index, item in enumerate(payload.items)]
        ingested = add_items(items, catalog_repository=container.catalog_repository)
        return IngestResponse(ingested=ingested)

    @app.get("/items/latest", response_model=list[CatalogItemPayload])
    def latest_endpoint(
        kind: ItemKind = FastAPIQuery(..., description="product or food"),
        limit: int = FastAPIQuery(config.latest_limit, ge=1),
    ) -> list[CatalogItemPayload]:
        items = latest_items(kind, catalog_repository=container.catalog_repository, limit=limit)
        return [CatalogItemPayload.from_item(item) for item in items]

    @app.get("/items/{item_id}", response_model=CatalogItemPayload)
    def item_endpoint(item_id: str) -> CatalogItemPayload:
        item = container.catalog_repository.get(item_id)
        if item is None:
            raise HTTPException(status_code=404, detail=f"Item '{item_id}' not found")
        return CatalogItemPayload.from_item(item)

    @app.put("/users/{uid}/survey", response_model=ProfileResponse)
    def survey_endpoint(uid: str, payload: SurveyRequest) -> ProfileResponse:
        profile = submit_survey(
            uid,
            product_categories=payload.product_categories,
            food_categories=payload.food_categories,
            keywords=payload.keywords,
            profile_repository=container.profile_repository,
            token_cache=container.token_cache,
            session_id=payload.session_id,
        )
        return ProfileResponse.from_profile(profile)

    @app.get("/users/{uid}/recommendations", response_model=RecommendationsResponse)
    def recommendations_endpoint(
        uid: str,
        session_id: str | None = FastAPIQuery(None, description="Session holding cached survey tokens"),
    ) -> RecommendationsResponse:
        result = recommend(
            uid,
            session_id=session_id,
            catalog_repository=container.catalog_repository,
            profile_repository=container.profile_repository,
            token_cache=container.token_cache,
            ranker=container.ranker,
            top_n=config.top_n,
            candidate_window=config.candidate_window,
        )
        return RecommendationsResponse(
            query_tokens=result.query_tokens,
            products=[CatalogItemPayload.from_item(item) for item in result.products],
            foods=[CatalogItemPayload.from_item(item) for item in result.foods],
        )

    @app.post("/rank", response_model=RankResponse)
    def rank_endpoint(payload: RankRequest) -> RankResponse:
        documents = [Document(id=doc.id, text=doc.text) for doc in payload.documents]
        return RankResponse(ids=container.ranker.rank(documents, payload.query_tokens, payload.top_n))

    return app
