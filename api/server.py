"""FastAPI server exposing binary search traces and performance comparisons."""

from __future__ import annotations

from typing import Annotated

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field, field_validator

from bsearch.arrays import generate_sorted_array
from bsearch.constants import (
    CORS_HEADERS,
    CORS_METHODS,
    CORS_ORIGINS,
    DEFAULT_BATCHES,
    DEFAULT_RUNS_PER_BATCH,
)
from bsearch.performance import PerformanceData, run_performance_tests
from bsearch.search import SearchResult, SearchStep, binary_search_iterative, binary_search_recursive


class SearchRequest(BaseModel):
    array: list[int] = Field(default_factory=list)
    target: int = 0

    @field_validator("array", mode="before")
    @classmethod
    def _null_array(cls, value: object) -> object:
        return [] if value is None else value

    @field_validator("target", mode="before")
    @classmethod
    def _null_target(cls, value: object) -> object:
        return 0 if value is None else value


class PerformanceRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sizes: list[Annotated[int, Field(ge=1)]] = Field(default_factory=list)
    batches: int = Field(default=DEFAULT_BATCHES, ge=0)
    runs_per_batch: int = Field(default=DEFAULT_RUNS_PER_BATCH, ge=0, alias="runsPerBatch")

    @field_validator("sizes", mode="before")
    @classmethod
    def _null_sizes(cls, value: object) -> object:
        return [] if value is None else value

    # null counts fall through to the defaults below, like zero.
    @field_validator("batches", "runs_per_batch", mode="before")
    @classmethod
    def _null_counts(cls, value: object) -> object:
        return 0 if value is None else value

    @field_validator("batches")
    @classmethod
    def _default_batches(cls, value: int) -> int:
        return value or DEFAULT_BATCHES

    @field_validator("runs_per_batch")
    @classmethod
    def _default_runs(cls, value: int) -> int:
        return value or DEFAULT_RUNS_PER_BATCH


class GenerateArrayRequest(BaseModel):
    size: int = Field(default=0, ge=0)

    @field_validator("size", mode="before")
    @classmethod
    def _null_size(cls, value: object) -> object:
        return 0 if value is None else value


app = FastAPI(title="Binary Search API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=CORS_METHODS,
    allow_headers=CORS_HEADERS,
)


def _validation_message(exc: RequestValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            detail = error.get("ctx", {}).get("error", error.get("msg", ""))
            parts.append(f"invalid JSON: {detail}")
            continue
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid request")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "invalid request body"


@app.exception_handler(RequestValidationError)
async def _bad_request(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    return PlainTextResponse(_validation_message(exc), status_code=400)


def _step_payload(step: SearchStep) -> dict:
    payload = {
        "left": step.left,
        "right": step.right,
        "mid": step.mid,
        "comparing": step.comparing,
    }
    if step.depth is not None:
        payload["depth"] = step.depth
    return payload


def _search_payload(result: SearchResult) -> dict:
    payload = {
        "found": result.found,
        "index": result.index,
        "comparisons": result.comparisons,
        "steps": [_step_payload(step) for step in result.steps],
        "executionTime": result.execution_time_ns,
    }
    if result.max_depth is not None:
        payload["maxDepth"] = result.max_depth
    return payload


def _performance_payload(data: PerformanceData) -> dict:
    return {
        "size": data.size,
        "iterativeTimeAvg": data.iterative_time_avg,
        "recursiveTimeAvg": data.recursive_time_avg,
        "iterativeComparisons": data.iterative_comparisons,
        "recursiveComparisons": data.recursive_comparisons,
        "iterativeTimeStdDev": data.iterative_time_stddev,
        "recursiveTimeStdDev": data.recursive_time_stddev,
        "iterativeMinTime": data.iterative_min_time,
        "iterativeMaxTime": data.iterative_max_time,
        "recursiveMinTime": data.recursive_min_time,
        "recursiveMaxTime": data.recursive_max_time,
        "theoreticalComparisons": data.theoretical_comparisons,
        "memoryEstimate": data.memory_estimate,
    }


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/api/search/iterative")
def search_iterative(payload: SearchRequest) -> dict:
    return _search_payload(binary_search_iterative(payload.array, payload.target))


@app.post("/api/search/recursive")
def search_recursive(payload: SearchRequest) -> dict:
    return _search_payload(binary_search_recursive(payload.array, payload.target))


@app.post("/api/performance")
def performance(payload: PerformanceRequest) -> list[dict]:
    try:
        results = run_performance_tests(
            payload.sizes,
            batches=payload.batches,
            runs_per_batch=payload.runs_per_batch,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return [_performance_payload(data) for data in results]


@app.post("/api/generate-array")
def generate_array(payload: GenerateArrayRequest) -> dict:
    return {"array": generate_sorted_array(payload.size), "size": payload.size}
