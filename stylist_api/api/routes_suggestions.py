from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from stylist_api.services.suggestion_service import build_suggestion_response

router = APIRouter(tags=["suggestions"])


@router.post("/style-suggestions")
async def post_style_suggestions(request: Request):
    # Text parts named "images" are kept here and skipped during encoding.
    form = await request.form()
    images = form.getlist("images")
    status_code, body = await run_in_threadpool(build_suggestion_response, images)
    return JSONResponse(body, status_code=status_code)
