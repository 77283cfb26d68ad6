from pathlib import Path
from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parents[2] / "static"
INDEX_FILE = STATIC_DIR / "index.html"

router = APIRouter(tags=["Pages"], include_in_schema=False)

# Every page is served by the same client-side shell; the shell reads the
# path and talks to /api/trips and /api/auth.
PAGE_PATHS = (
    "/",
    "/explore",
    "/dashboard",
    "/trips/new",
    "/trips/{trip_id}",
    "/trips/{trip_id}/edit",
    "/auth/login",
    "/auth/register",
)


def read_page():
    return FileResponse(INDEX_FILE, media_type="text/html")


for page_path in PAGE_PATHS:
    router.add_api_route(page_path, read_page, methods=["GET"])
