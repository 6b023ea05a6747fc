"""
Route de consultation de la configuration.

Expose la stratégie de renommage et les langues de sous-titres,
avec leur nom anglais.
"""

from typing import Optional

from babelfish import Language, LanguageReverseError
from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

router = APIRouter(prefix="/api")


def _describe(code: str) -> dict[str, str]:
    language = Language.fromietf(code)
    return {"code": str(language), "name": language.name}


@router.get("/config")
def get_config(
    request: Request,
    lang: Optional[list[str]] = Query(None, description="Langues à décrire"),
):
    """
    Retourne la configuration courante.

    Sans paramètre `lang`, les langues listées sont celles de la
    configuration. Un code de langue inconnu produit une erreur 400.
    """
    settings = request.app.state.container.config()
    codes = lang if lang else settings.languages

    languages = []
    for code in codes:
        try:
            languages.append(_describe(code))
        except (ValueError, LanguageReverseError):
            return JSONResponse(
                status_code=400,
                content={"error": f"unknown language code: {code}"},
            )

    return {
        "action": settings.action.value,
        "strict": settings.strict,
        "strict_existing": settings.strict_existing,
        "force": settings.force,
        "movies": {
            "dir": str(settings.movies_dir),
            "template": settings.movies_template,
        },
        "tvshows": {
            "dir": str(settings.tvshows_dir),
            "template": settings.tvshows_template,
        },
        "languages": languages,
    }
