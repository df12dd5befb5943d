"""FastAPI application exposing DocInsight services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List
from uuid import uuid4

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from docinsight.api.schemas import (
    BatchSummaryRequest,
    CredentialCheckRequest,
    CredentialCheckResponse,
    DocumentSummaryModel,
    QueryRequest,
    QueryResponseModel,
    SummaryRequest,
)
from docinsight.config import Settings, get_settings
from docinsight.metrics.observability import bind_correlation_id, clear_correlation_id, configure_logging, get_logger
from docinsight.models import to_payload
from docinsight.services.factory import build_gateway, build_query_service
from docinsight.services.gateway import GeminiGateway
from docinsight.services.query import PreconditionError, QueryService


@dataclass(frozen=True)
class AppDependencies:
    query_service: QueryService
    gateway: GeminiGateway


def _build_dependencies(settings: Settings) -> AppDependencies:
    gateway = build_gateway(settings)
    return AppDependencies(query_service=build_query_service(settings, gateway=gateway), gateway=gateway)


def create_app(*, settings: Settings | None = None, dependencies: AppDependencies | None = None) -> FastAPI:
    settings = settings or get_settings()
    deps = dependencies or _build_dependencies(settings)

    configure_logging()
    logger = get_logger("api")
    app = FastAPI(title="DocInsight API", version="0.1.0")
    app.state.dependencies = deps

    if settings.cors_allow_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_allow_origins),
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def add_correlation_id(request: Request, call_next):  # type: ignore[override]
        correlation_id = request.headers.get("X-Request-ID", uuid4().hex)
        request.state.correlation_id = correlation_id
        bind_correlation_id(correlation_id)
        try:
            response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers["X-Correlation-ID"] = correlation_id
        return response

    @app.exception_handler(PreconditionError)
    async def handle_precondition_error(request: Request, exc: PreconditionError) -> JSONResponse:
        correlation_id = getattr(request.state, "correlation_id", uuid4().hex)
        logger.info("precondition.failed", correlation_id=correlation_id, detail=str(exc))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc), "correlation_id": correlation_id},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        correlation_id = getattr(request.state, "correlation_id", uuid4().hex)
        logger.error("unhandled.error", correlation_id=correlation_id, detail=str(exc))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal Server Error", "correlation_id": correlation_id},
        )

    def get_dependencies(request: Request) -> AppDependencies:
        return request.app.state.dependencies

    def get_query_service(dep: AppDependencies = Depends(get_dependencies)) -> QueryService:
        return dep.query_service

    def get_gateway(dep: AppDependencies = Depends(get_dependencies)) -> GeminiGateway:
        return dep.gateway

    # Plain ``def`` handlers: the gateway blocks, so FastAPI runs these in its threadpool.
    @app.post("/query", response_model=QueryResponseModel)
    def query_documents(
        payload: QueryRequest,
        service: QueryService = Depends(get_query_service),
    ) -> QueryResponseModel:
        documents = [document.to_domain() for document in payload.documents]
        response = service.answer_query(payload.query, documents)
        return QueryResponseModel.model_validate(to_payload(response))

    @app.post("/documents/summary", response_model=DocumentSummaryModel)
    def summarize_document(
        payload: SummaryRequest,
        service: QueryService = Depends(get_query_service),
    ) -> DocumentSummaryModel:
        summary = service.summarize_document(payload.document.to_domain())
        return DocumentSummaryModel.model_validate(to_payload(summary))

    @app.post("/documents/summaries", response_model=List[DocumentSummaryModel])
    def summarize_documents(
        payload: BatchSummaryRequest,
        service: QueryService = Depends(get_query_service),
    ) -> List[DocumentSummaryModel]:
        summaries = service.summarize_documents([document.to_domain() for document in payload.documents])
        return [DocumentSummaryModel.model_validate(to_payload(summary)) for summary in summaries]

    @app.post("/credentials/validate", response_model=CredentialCheckResponse)
    def validate_credential(
        payload: CredentialCheckRequest,
        gateway: GeminiGateway = Depends(get_gateway),
    ) -> CredentialCheckResponse:
        return CredentialCheckResponse(valid=gateway.validate_credential(payload.api_key))

    @app.get("/metrics")
    async def metrics() -> Response:
        payload = generate_latest()
        return Response(content=payload, media_type=CONTENT_TYPE_LATEST)

    @app.get("/healthz")
    async def healthcheck() -> dict[str, str]:
        from docinsight import __version__

        return {
            "status": "ok",
            "version": __version__,
            "environment": settings.environment,
            "model": settings.gemini_model,
        }

    @app.get("/livez")
    async def liveness() -> dict[str, str]:
        return {"status": "alive"}

    return app


app = create_app()
