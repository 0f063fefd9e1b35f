#!/usr/bin/env python3
"""
Cash Register HTTP API

Routes:
- GET  /health                          liveness check
- POST /cashregister/calculate-change   JSON array of lines -> {"results": [...]}
- POST /cashregister/upload             text file upload -> {"result": "line\\nline"}

Both change routes check the whole batch before calculating anything and
accept an optional ``seed`` query parameter for reproducible output.
"""

import logging

from fastapi import Body, FastAPI, File, UploadFile
from fastapi.middleware.cors import CORSMiddleware

from ..change.engine import ChangeEngine
from ..change.parser import TransactionFormatError, split_lines, validate_transaction_lines
from ..core.config import Config, get_config
from ..core.random_source import RandomSource, make_rng, parse_seed
from .errors import error_response, register_error_handlers

logger = logging.getLogger(__name__)


def create_app(config: Config | None = None) -> FastAPI:
    """
    Build the API for a configuration.

    Args:
        config: Configuration to serve; the global configuration when omitted
    """
    config = config or get_config()
    engine: ChangeEngine = config.build_engine()
    max_upload_bytes = config.api.max_upload_bytes

    app = FastAPI(title="Cash Register")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    def request_rng(seed: str | None) -> tuple[RandomSource | None, str | None]:
        seed_value, error = parse_seed(seed)
        if error:
            return None, error
        if seed_value is None:
            seed_value = config.seed
        # One generator per request
        return make_rng(seed_value), None

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.post("/cashregister/calculate-change")
    def calculate_change(transactions: list[str] = Body(...), seed: str | None = None):
        rng, error = request_rng(seed)
        if error:
            return error_response(error)

        try:
            lines = validate_transaction_lines(transactions)
        except TransactionFormatError as e:
            return error_response(str(e))

        results = engine.process_transactions(lines, rng)
        logger.info("calculate-change: %d transactions, %d results", len(lines), len(results))
        return {"results": results}

    @app.post("/cashregister/upload")
    async def upload(file: UploadFile | None = File(None), seed: str | None = None):
        if file is None:
            return error_response("Upload a transactions file.")

        rng, error = request_rng(seed)
        if error:
            return error_response(error)

        content_type = (file.content_type or "").split(";")[0].strip().lower()
        if not content_type.startswith("text/"):
            return error_response(
                f"Unsupported file type {content_type or 'unknown'}. Upload a plain text file.",
                status_code=415,
            )

        data = await file.read(max_upload_bytes + 1)
        if len(data) > max_upload_bytes:
            return error_response(
                f"File is too large. The limit is {max_upload_bytes} bytes.",
                status_code=413,
            )

        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError:
            return error_response("File must be UTF-8 encoded text.")

        try:
            lines = validate_transaction_lines(split_lines(text))
        except TransactionFormatError as e:
            return error_response(str(e))

        if not lines:
            return error_response("File contains no transactions.")

        results = engine.process_transactions(lines, rng)
        logger.info("upload %s: %d transactions, %d results", file.filename, len(lines), len(results))
        return {"result": "\n".join(results)}

    return app
