"""FastAPI app — exposes CallAnalyzer over HTTP and maps failures to JSON errors."""
import logging
from typing import List, Optional

from fastapi import FastAPI, File, Header, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.analyzer import AudioUpload, CallAnalyzer
from src.api.schemas import AnalysisResponse, ErrorResponse, HealthResponse, ParameterResponse
from src.catalog import EVALUATION_PARAMETERS, resolve_input_type
from src.constants import (
    APP_TITLE,
    APP_VERSION,
    MSG_REQUEST_FAILED,
    MSG_UNEXPECTED_ERROR,
    ROUTE_ANALYZE_CALL,
    ROUTE_HEALTH,
    ROUTE_PARAMETERS,
)
from src.errors import CallAnalysisError, UnexpectedError, ValidationError
from src.rate_limiter import client_id_from_forwarded_for

logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    429: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    504: {"model": ErrorResponse},
}


def _error_response(exc: CallAnalysisError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def _upload_from(audio: Optional[UploadFile]) -> Optional[AudioUpload]:
    match audio:
        case None:
            return None
        case file:
            return AudioUpload(
                filename=file.filename or "",
                content_type=file.content_type or "",
                data=await file.read(),
            )


def create_app(analyzer: CallAnalyzer, cors_origins: tuple[str, ...] = ()) -> FastAPI:
    app = FastAPI(title=APP_TITLE, version=APP_VERSION)
    app.state.analyzer = analyzer

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(CallAnalysisError)
    async def _handle_call_analysis_error(request: Request, exc: CallAnalysisError) -> JSONResponse:
        logger.error(MSG_REQUEST_FAILED, exc.status_code, exc.message)
        return _error_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def _handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        logger.error(MSG_REQUEST_FAILED, exc.status_code, exc.detail)
        return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code, headers=exc.headers)

    # A non-file ``audio`` field is the only way the form can fail validation.
    @app.exception_handler(RequestValidationError)
    async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.error(MSG_REQUEST_FAILED, ValidationError.status_code, exc.errors())
        return _error_response(ValidationError())

    @app.post(ROUTE_ANALYZE_CALL, response_model=AnalysisResponse, responses=_ERROR_RESPONSES)
    async def analyze_call(
        request: Request,
        audio: Optional[UploadFile] = File(None),
        x_forwarded_for: Optional[str] = Header(None),
    ) -> JSONResponse:
        client_id = client_id_from_forwarded_for(x_forwarded_for)
        try:
            result = await request.app.state.analyzer.analyze(client_id, await _upload_from(audio))
        except CallAnalysisError:
            raise
        except Exception as exc:
            logger.exception(MSG_UNEXPECTED_ERROR)
            raise UnexpectedError() from exc
        return JSONResponse(result.to_dict())

    @app.get(ROUTE_PARAMETERS, response_model=List[ParameterResponse])
    async def list_parameters() -> List[ParameterResponse]:
        return [
            ParameterResponse(
                key=p.key,
                name=p.name,
                weight=p.weight,
                description=p.description,
                inputType=resolve_input_type(p).value,
            )
            for p in EVALUATION_PARAMETERS
        ]

    @app.get(ROUTE_HEALTH, response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    return app
