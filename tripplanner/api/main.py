"""FastAPI application: trip and segment routes."""

from __future__ import annotations

import logging
import threading
from typing import Any

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from tripplanner.api.schemas import (
    CreateTripRequest,
    ErrorResponse,
    HealthResponse,
    SegmentRequest,
    TripDatesRequest,
    TripListResponse,
)
from tripplanner.application import (
    AppContext,
    OperationResult,
    create_segment,
    create_trip,
    delete_segment,
    delete_trip,
    get_trip,
    list_trips,
    make_app_context,
    update_segment,
    update_trip_dates,
)
from tripplanner.config.settings import resolve_settings
from tripplanner.domain.enums import ErrorCode
from tripplanner.services.trip_presenter import present_trip

_api_logger = logging.getLogger("tripplanner.api")

load_dotenv()

_STATUS_BY_CODE = {
    ErrorCode.INVALID_RANGE: 400,
    ErrorCode.OUT_OF_TRIP_BOUNDS: 400,
    ErrorCode.INVALID_DATE: 400,
    ErrorCode.INVALID_INPUT: 400,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.OVERLAPS_SEGMENT: 409,
    ErrorCode.CLAMP_WOULD_OVERLAP: 409,
    ErrorCode.INTERNAL_ERROR: 500,
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cache-Control"] = "no-store"
        return response


_context_lock = threading.Lock()


def get_app_context(request: Request) -> AppContext:
    ctx = getattr(request.app.state, "context", None)
    if ctx is None:
        with _context_lock:
            ctx = getattr(request.app.state, "context", None)
            if ctx is None:
                ctx = make_app_context()
                request.app.state.context = ctx
    return ctx


def _failure_response(result: OperationResult) -> JSONResponse:
    code = result.code or ErrorCode.INTERNAL_ERROR
    body = ErrorResponse(code=code.value, error=result.error)
    return JSONResponse(status_code=_STATUS_BY_CODE.get(code, 500), content=body.model_dump())


def _segment_payload(result: OperationResult) -> dict[str, Any]:
    return {
        "success": True,
        "segment": result.segment.model_dump(mode="json") if result.segment else None,
    }


def create_app(context: AppContext | None = None) -> FastAPI:
    settings = context.settings if context is not None else resolve_settings()
    app = FastAPI(
        title="tripplanner",
        version="1.0.0",
        docs_url="/docs" if settings.enable_docs else None,
        redoc_url=None,
    )
    app.state.context = context

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
        _api_logger.exception("unhandled error on %s %s", request.method, request.url.path)
        body = ErrorResponse(code=ErrorCode.INTERNAL_ERROR.value, error="Something went wrong")
        return JSONResponse(status_code=500, content=body.model_dump())

    @app.get("/health", response_model=HealthResponse)
    def health(ctx: AppContext = Depends(get_app_context)):
        return HealthResponse(status="ok", store_backend=getattr(ctx.repository, "backend", "unknown"))

    @app.post("/trips")
    def post_trip(req: CreateTripRequest, ctx: AppContext = Depends(get_app_context)):
        result = create_trip(
            ctx,
            req.name,
            req.start_date,
            req.end_date,
            destination=req.destination,
            requirements=req.requirements,
        )
        if not result.success:
            return _failure_response(result)
        return JSONResponse(
            status_code=201,
            content={"success": True, "trip": result.trip.model_dump(mode="json")},
        )

    @app.get("/trips", response_model=TripListResponse)
    def get_trips(limit: int = 50, ctx: AppContext = Depends(get_app_context)):
        result = list_trips(ctx, limit=limit)
        if not result.success:
            return _failure_response(result)
        return TripListResponse(trips=[trip.model_dump(mode="json") for trip in result.trips])

    @app.get("/trips/{trip_id}")
    def get_trip_detail(trip_id: str, ctx: AppContext = Depends(get_app_context)):
        result = get_trip(ctx, trip_id)
        if not result.success:
            return _failure_response(result)
        return {"success": True, **present_trip(result.trip, result.segments)}

    @app.delete("/trips/{trip_id}")
    def remove_trip(trip_id: str, ctx: AppContext = Depends(get_app_context)):
        result = delete_trip(ctx, trip_id)
        if not result.success:
            return _failure_response(result)
        return {"success": True}

    @app.put("/trips/{trip_id}/dates")
    def put_trip_dates(trip_id: str, req: TripDatesRequest, ctx: AppContext = Depends(get_app_context)):
        result = update_trip_dates(ctx, trip_id, req.start_date, req.end_date)
        if not result.success:
            return _failure_response(result)
        return {
            "success": True,
            "trip": result.trip.model_dump(mode="json"),
            "updated_segment_ids": result.updated_segment_ids,
            "deleted_segment_ids": result.deleted_segment_ids,
        }

    @app.post("/trips/{trip_id}/segments")
    def post_segment(trip_id: str, req: SegmentRequest, ctx: AppContext = Depends(get_app_context)):
        result = create_segment(ctx, trip_id, req.place_name, req.start_date, req.end_date, req.notes)
        if not result.success:
            return _failure_response(result)
        return JSONResponse(status_code=201, content=_segment_payload(result))

    @app.put("/segments/{segment_id}")
    def put_segment(segment_id: str, req: SegmentRequest, ctx: AppContext = Depends(get_app_context)):
        result = update_segment(ctx, segment_id, req.place_name, req.start_date, req.end_date, req.notes)
        if not result.success:
            return _failure_response(result)
        return _segment_payload(result)

    @app.delete("/segments/{segment_id}")
    def remove_segment(segment_id: str, ctx: AppContext = Depends(get_app_context)):
        result = delete_segment(ctx, segment_id)
        if not result.success:
            return _failure_response(result)
        return {"success": True, "deleted_segment_ids": result.deleted_segment_ids}

    return app


app = create_app()
