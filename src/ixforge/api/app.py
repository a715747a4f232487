"""
FastAPI application exposing the keypair, token, message and transfer routes.

Every response uses the ``{"success": ..., "data" | "error": ...}`` envelope.
Failures, including bodies that do not parse into the request model, are
rendered as HTTP 400.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .. import handlers
from ..__about__ import __version__
from ..errors import IxforgeError
from .models import (CreateTokenRequest, MintTokenRequest, SendSolRequest,
                     SendTokenRequest, SignMessageRequest, VerifyMessageRequest)

logger = logging.getLogger(__name__)


def _ok(data: Any) -> dict[str, Any]:
    return {"success": True, "data": data}


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"success": False, "error": message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request body"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if field:
        return f"Invalid request body: {field}: {first.get('msg')}"
    return f"Invalid request body: {first.get('msg')}"


def create_app() -> FastAPI:
    app = FastAPI(title="ixforge", version=__version__)

    @app.exception_handler(IxforgeError)
    async def _ixforge_error(request: Request, exc: IxforgeError) -> JSONResponse:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
        return _error(str(exc))

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _describe_validation_error(exc)
        logger.info("%s %s rejected: %s", request.method, request.url.path, message)
        return _error(message)

    @app.post("/keypair")
    def generate_keypair():
        return _ok(handlers.generate_keypair())

    @app.post("/token/create")
    def create_token(body: CreateTokenRequest):
        return _ok(handlers.create_token(body.mint_authority, body.mint, body.decimals))

    @app.post("/token/mint")
    def mint_token(body: MintTokenRequest):
        return _ok(handlers.mint_token(body.mint, body.destination, body.authority, body.amount))

    @app.post("/message/sign")
    def sign_message(body: SignMessageRequest):
        return _ok(handlers.sign_message(body.message, body.secret))

    @app.post("/message/verify")
    def verify_message(body: VerifyMessageRequest):
        return _ok(handlers.verify_message(body.message, body.signature, body.pubkey))

    @app.post("/send/sol")
    def send_sol(body: SendSolRequest):
        return _ok(handlers.send_sol(body.from_, body.to, body.lamports))

    @app.post("/send/token")
    def send_token(body: SendTokenRequest):
        return _ok(handlers.send_token(body.destination, body.mint, body.owner, body.amount))

    return app
