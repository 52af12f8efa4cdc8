# app/api.py
"""FastAPI application for the clinician/researcher matching service."""
from typing import List, Optional
import logging

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from relevance.errors import InvalidArgument

from .logging_setup import configure_logging
from .schemas import ClinicianProblemCreate, ProblemWithMatches, Researcher, ResearcherCreate
from .service import get_problem_with_matches, submit_problem
from .settings import Settings
from .storage import Storage, build_storage

logger = logging.getLogger(__name__)

router = APIRouter()


def _storage(request: Request) -> Storage:
    return request.app.state.storage


@router.get("/")
def root():
    return {"ok": True}

@router.get("/healthz")
def healthz():
    return {"status": "ok"}

@router.post("/api/researchers", response_model=Researcher)
def create_researcher(payload: ResearcherCreate, request: Request) -> Researcher:
    return _storage(request).create_researcher(payload)

@router.get("/api/researchers", response_model=List[Researcher])
def list_researchers(request: Request) -> List[Researcher]:
    return _storage(request).get_all_researchers()

@router.post("/api/clinician-problems", response_model=ProblemWithMatches)
def create_clinician_problem(payload: ClinicianProblemCreate, request: Request) -> ProblemWithMatches:
    settings: Settings = request.app.state.settings
    return submit_problem(_storage(request), payload, top_n=settings.top_n)

@router.get("/api/matches/{problem_id}", response_model=ProblemWithMatches)
def get_matches(problem_id: str, request: Request) -> ProblemWithMatches:
    result = get_problem_with_matches(_storage(request), problem_id)
    if result is None:
        raise HTTPException(status_code=404, detail="Problem not found")
    return result


def _invalid_argument(request: Request, exc: InvalidArgument) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})

def _storage_failure(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Storage failure on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Storage failure"})


def create_app(settings: Optional[Settings] = None, storage: Optional[Storage] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(title="Research Match API", version="0.1.0")
    app.state.settings = settings
    app.state.storage = storage if storage is not None else build_storage(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(InvalidArgument, _invalid_argument)
    app.add_exception_handler(SQLAlchemyError, _storage_failure)
    app.include_router(router)
    return app


app = create_app()

