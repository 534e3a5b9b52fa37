from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from companylogo import __version__
from companylogo.chat import ChatError, GeminiChatClient, decorate_with_companies, parse_logo_command
from companylogo.directory import COMPANY_DIRECTORY
from companylogo.extraction import extract_company_names
from companylogo.resolver import resolve_company_to_domain
from companylogo.service import LogoRequestError, resolve_logo_request
from companylogo.settings import API_CORS_ORIGINS, LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s")

app = FastAPI(title="company-logo-api", version=__version__)
logger = logging.getLogger("company-logo-api")

app.add_middleware(
    CORSMiddleware,
    allow_origins=API_CORS_ORIGINS or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class LogoRequest(BaseModel):
    company: str | None = None
    domain: str | None = None


class ExtractRequest(BaseModel):
    text: str = ""


class ChatRequest(BaseModel):
    message: str | None = None


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


_FAILURE_MESSAGES = {
    "/api/logo": "Failed to fetch logo",
    "/api/chat": "Failed to generate response",
}


@app.exception_handler(RequestValidationError)
async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.error("unreadable request body for %s: %s", request.url.path, exc.errors()[:1])
    return _error(500, _FAILURE_MESSAGES.get(request.url.path, "Failed to process request"))


def _chat_client() -> GeminiChatClient:
    return GeminiChatClient()


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/api/logo")
def post_logo(payload: LogoRequest) -> Any:
    try:
        result = resolve_logo_request(company=payload.company, domain=payload.domain)
    except LogoRequestError:
        return _error(400, "Either company name or domain is required")
    except Exception as exc:
        logger.exception("logo lookup failed: %s", exc)
        return _error(500, "Failed to fetch logo")
    return result.to_dict()


@app.get("/api/logo")
def get_logo(company: str | None = None, domain: str | None = None) -> Any:
    if not str(company or "").strip() and not str(domain or "").strip():
        return _error(400, "Either company or domain query parameter is required")
    return post_logo(LogoRequest(company=company, domain=domain))


@app.get("/api/resolve")
def resolve(value: str = Query("", alias="input")) -> dict[str, Any]:
    return resolve_company_to_domain(value).to_dict()


@app.post("/api/companies/extract")
def extract_companies(payload: ExtractRequest) -> dict[str, Any]:
    companies = sorted(extract_company_names(payload.text))
    return {
        "companies": companies,
        "domains": {name: COMPANY_DIRECTORY.lookup(name) for name in companies},
    }


@app.post("/api/chat")
def chat(payload: ChatRequest) -> Any:
    message = str(payload.message or "").strip()
    if not message:
        return _error(400, "Message is required")

    command_company = parse_logo_command(message)
    if command_company:
        return {"response": f"Fetching logo for: {command_company}", "companies": [command_company]}

    companies = sorted(extract_company_names(message))
    try:
        reply = _chat_client().generate(message)
    except ChatError as exc:
        logger.error("chat generation failed: %s", exc)
        return _error(500, "Failed to generate response")
    except Exception as exc:
        logger.exception("chat generation failed: %s", exc)
        return _error(500, "Failed to generate response")
    return {"response": decorate_with_companies(reply, companies), "companies": companies}
