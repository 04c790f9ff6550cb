"""FastAPI router exposing the agent manifest and entrypoint invocations."""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, create_model

from .clients import frankfurter_client
from .entrypoints import ENTRYPOINTS, REGISTRY, Entrypoint, manifest
from .models import AgentManifest, ErrEnvelope, ErrorBody, ErrorCode

logger = logging.getLogger(__name__)

router = APIRouter()


def success(output: BaseModel) -> JSONResponse:
    return JSONResponse(content={"output": output.model_dump(mode="json", by_alias=True)})


def failure(
    code: ErrorCode,
    message: str,
    *,
    source: str = "currency_exchange",
    retriable: bool = False,
    details: Optional[Dict[str, Any]] = None,
    status_code: int = 400,
) -> JSONResponse:
    error = ErrEnvelope(
        error=ErrorBody(code=code, message=message, source=source, retriable=retriable, details=details)
    )
    return JSONResponse(content=jsonable_encoder(error), status_code=status_code)


@router.get("/.well-known/agent.json", response_model=AgentManifest)
async def agent_manifest() -> AgentManifest:
    return manifest()


@router.get("/entrypoints")
async def list_entrypoints() -> Dict[str, Any]:
    return {"entrypoints": [ep.info().model_dump() for ep in ENTRYPOINTS]}


def _takes_no_required_input(ep: Entrypoint) -> bool:
    return not any(field.is_required() for field in ep.input_model.model_fields.values())


def _invoke_endpoint(ep: Entrypoint):
    # inputs without required fields may omit the "input" object entirely
    if _takes_no_required_input(ep):
        input_field = (ep.input_model, Field(default_factory=ep.input_model))
    else:
        input_field = (ep.input_model, ...)
    request_model = create_model(f"{ep.key.capitalize()}Request", input=input_field)

    async def invoke(body: request_model) -> JSONResponse:
        logger.info(f"Invoking entrypoint {ep.key} (price {ep.price})")
        output = await ep.handler(body.input, frankfurter_client)
        return success(output)

    invoke.__name__ = f"invoke_{ep.key}"
    return invoke


for _ep in ENTRYPOINTS:
    router.add_api_route(
        f"/entrypoints/{_ep.key}/invoke",
        _invoke_endpoint(_ep),
        methods=["POST"],
        summary=_ep.description,
    )


@router.post("/entrypoints/{key}/invoke", include_in_schema=False)
async def invoke_unknown(key: str) -> JSONResponse:
    return failure(
        ErrorCode.NOT_FOUND,
        f"unknown entrypoint: {key}",
        details={"available": list(REGISTRY)},
        status_code=404,
    )
