"""
Route de listing des médias d'un répertoire.
"""

from pathlib import Path

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

router = APIRouter(prefix="/api")


@router.get("/media")
def list_media(
    request: Request,
    root: str = Query(..., description="Répertoire à scanner"),
    subtitles: bool = Query(False, description="Inclure les sous-titres"),
):
    """Scanne un répertoire et retourne les médias trouvés."""
    scanner = request.app.state.container.scanner_service()
    try:
        media_list = scanner.find_media(Path(root), include_subtitles=subtitles)
    except FileNotFoundError as e:
        return JSONResponse(status_code=404, content={"error": str(e)})

    return {
        "root": root,
        "count": len(media_list),
        "media": [media.to_dict() for media in media_list],
    }
