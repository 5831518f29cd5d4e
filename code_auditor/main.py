"""
Code Auditor FastAPI Application.

Heuristic static analysis for JavaScript, HTML and CSS:
  POST /analyze    → run one language group's rules over a text
  POST /scan-repo  → scan every supported file of a public GitHub repository
  GET  /rules      → rule catalog (GET /rules/{rule_id} for one rule)
  GET  /health     → {"status": "ok", ...}
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from code_auditor.api.routes.analyze import router as analyze_router
from code_auditor.api.routes.health import router as health_router
from code_auditor.api.routes.repo_scan import router as repo_scan_router
from code_auditor.api.routes.rules import router as rules_router
from code_auditor.config import VERSION, settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("code_auditor")

app = FastAPI(
    title="Code Auditor",
    description="Heuristic JavaScript/HTML/CSS analyzer with GitHub repository scanning",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(analyze_router)
app.include_router(repo_scan_router)
app.include_router(rules_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    body = (await request.body()).decode("utf-8", errors="replace")
    logger.error(f"Validation Error. Raw body: {body[:500]} | Errors: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors()), "body": body[:100]},
    )
