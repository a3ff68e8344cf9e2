"""HTTP server for the Metadata and Image endpoints."""

import logging

import uvicorn
from fastapi import FastAPI, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from .config import LOG_LEVEL, PORT
from .services import create_npc_service

logger = logging.getLogger(__name__)

app = FastAPI(
    title="NPC Customs",
    description="Metadata and composited images for NPC Customs tokens.",
)


def _internal_error() -> PlainTextResponse:
    return PlainTextResponse("Internal Server Error", status_code=500)


# Id is optional on purpose: a missing Id fails downstream and maps to the same 500
@app.get("/Metadata")
def get_metadata(Id: str | None = None):
    try:
        metadata = create_npc_service().build_metadata(Id)
        return JSONResponse(metadata.to_dict())
    except Exception:
        logger.exception(f"/Metadata failed for Id={Id!r}")
        return _internal_error()


@app.get(
    "/Image",
    response_class=Response,
    responses={200: {"content": {"image/png": {}}, "description": "Composited NPC image."}},
)
def get_image(Id: str | None = None):
    try:
        image_bytes = create_npc_service().build_image(Id)
        return Response(content=image_bytes, media_type="image/png")
    except Exception:
        logger.exception(f"/Image failed for Id={Id!r}")
        return _internal_error()


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Server is running on http://localhost:{PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    main()
