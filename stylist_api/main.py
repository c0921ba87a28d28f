import logging

from fastapi import FastAPI

from stylist_api.api.routes_images import router as images_router
from stylist_api.api.routes_suggestions import router as suggestions_router
from stylist_api.api.routes_visualize import router as visualize_router
from stylist_api.settings import LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)

app = FastAPI(title="AI Stylist API")
app.include_router(suggestions_router, prefix="/api")
app.include_router(images_router, prefix="/api")
app.include_router(visualize_router, prefix="/api")


@app.get("/health")
def health():
    return {"ok": True}
