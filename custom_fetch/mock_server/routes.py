"""Routes of the mock server.

``router`` holds the public routes. ``auth_router`` mirrors them under
``/auth`` behind bearer verification and merges the token's ``sub``, ``role``
and ``exp`` claims into every successful JSON body.
"""

import json
import logging
from typing import Any, Dict, List, Union

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError
from starlette.datastructures import UploadFile

from custom_fetch.mock_server.auth import TokenClaims, issue_token, require_token_claims
from custom_fetch.mock_server.sample_pdf import SAMPLE_PDF, SAMPLE_PDF_FILENAME
from custom_fetch.mock_server.schemas import MessageResponse, PostsInput, SignResponse, UploadResponse

logger = logging.getLogger(__name__)

ECHOED_QUERY_KEYS = ("name", "content")

router = APIRouter()
auth_router = APIRouter(prefix="/auth")

RouteResult = Union[Dict[str, Any], JSONResponse]


def _validation_issues(error: ValidationError) -> List[Dict[str, Any]]:
    return [{"path": list(err["loc"]), "message": err["msg"]} for err in error.errors()]


def _with_claims(result: RouteResult, claims: TokenClaims) -> RouteResult:
    """Merge token claims into a successful body; error responses pass through."""
    if isinstance(result, JSONResponse):
        return result
    return {**result, **claims.model_dump()}


def _display(value: Any) -> str:
    return "none" if value is None else str(value)


# --- Shared handlers --- #


def _echo_query(request: Request) -> Dict[str, Any]:
    echoed = {key: request.query_params[key] for key in ECHOED_QUERY_KEYS if key in request.query_params}
    logger.info(f"GET {request.url.path} query string -> {echoed}")
    return echoed


async def _create_post_message(request: Request) -> RouteResult:
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning(f"POST {request.url.path} rejected: body is not JSON")
        return JSONResponse(
            {"success": False, "error": {"issues": [{"path": [], "message": "Malformed JSON body"}]}},
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    try:
        posts = PostsInput.model_validate(body)
    except ValidationError as e:
        logger.warning(f"POST {request.url.path} rejected: {e.error_count()} validation error(s)")
        return JSONResponse(
            {"success": False, "error": {"issues": _validation_issues(e)}},
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    logger.info(f"POST {request.url.path} json body -> name: {posts.name}, content: {posts.content}")
    return {"message": f"name : {posts.name} content: {_display(posts.content)}"}


async def _describe_upload(request: Request) -> RouteResult:
    form = await request.form()
    files = form.get("files")
    if isinstance(files, UploadFile):
        content = await files.read()
        logger.info(f"POST {request.url.path} form data -> file name: {files.filename}")
        return {"name": files.filename, "size": len(content), "type": files.content_type or ""}
    logger.warning(f"POST {request.url.path} rejected: no 'files' part")
    return JSONResponse({"error": "No files uploaded"}, status_code=status.HTTP_400_BAD_REQUEST)


async def _post_form_message(request: Request) -> RouteResult:
    form = await request.form()
    name = form.get("name")
    content = form.get("content")
    if not isinstance(name, str) and not isinstance(content, str):
        logger.warning(f"POST {request.url.path} rejected: neither 'name' nor 'content' is a string")
        return JSONResponse({"error": "not valid body"}, status_code=status.HTTP_400_BAD_REQUEST)
    logger.info(f"POST {request.url.path} form -> name: {name}, content: {content}")
    return {"message": f"name is {_display(name)}, content is {_display(content)}"}


def _preview_pdf() -> Response:
    return Response(
        content=SAMPLE_PDF,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="{SAMPLE_PDF_FILENAME}"'},
    )


# --- Public routes --- #


@router.get("/", response_class=PlainTextResponse)
async def read_root():
    """Plain text greeting."""
    return "hello mock server"


@router.get("/posts")
async def get_posts(request: Request):
    """Echo the ``name``/``content`` query params; absent keys are omitted."""
    return _echo_query(request)


@router.post("/posts", response_model=MessageResponse)
async def create_post(request: Request):
    """Validate a ``PostsInput`` JSON body and echo it as a message."""
    return await _create_post_message(request)


@router.post("/upload", response_model=UploadResponse)
async def upload(request: Request):
    """Describe the multipart ``files`` part."""
    return await _describe_upload(request)


@router.post("/postform", response_model=MessageResponse)
async def post_form(request: Request):
    """Echo url-encoded ``name``/``content`` fields as a message."""
    return await _post_form_message(request)


@router.get("/preview-pdf")
async def preview_pdf():
    return _preview_pdf()


@router.post("/sign", status_code=status.HTTP_201_CREATED, response_model=SignResponse)
async def sign():
    """Issue a signed bearer token for the ``/auth`` routes."""
    token, claims = issue_token()
    logger.info(f"POST /sign issued token for sub={claims.sub} role={claims.role}")
    return SignResponse(token=token, **claims.model_dump())


# --- Bearer-guarded mirrors --- #


@auth_router.get("/posts")
async def auth_get_posts(request: Request, claims: TokenClaims = Depends(require_token_claims)):
    return _with_claims(_echo_query(request), claims)


@auth_router.post("/posts")
async def auth_create_post(request: Request, claims: TokenClaims = Depends(require_token_claims)):
    return _with_claims(await _create_post_message(request), claims)


@auth_router.post("/upload")
async def auth_upload(request: Request, claims: TokenClaims = Depends(require_token_claims)):
    return _with_claims(await _describe_upload(request), claims)


@auth_router.post("/postform")
async def auth_post_form(request: Request, claims: TokenClaims = Depends(require_token_claims)):
    return _with_claims(await _post_form_message(request), claims)


@auth_router.get("/preview-pdf", dependencies=[Depends(require_token_claims)])
async def auth_preview_pdf():
    return _preview_pdf()
