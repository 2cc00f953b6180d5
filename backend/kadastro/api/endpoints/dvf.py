from typing import List, Optional
from urllib.parse import urlencode

from fastapi import APIRouter, HTTPException, Query

from kadastro.api.params import first_value
from kadastro.core import config, upstream

router = APIRouter()

SOURCE = "DVF API"


def mutations_url(**filters: str) -> str:
    """Etalab DVF mutations endpoint, filtered by parcel or commune code."""
    return f"{config.DVF_BASE_URL}/dvf/mutation/?{urlencode(filters)}"


def _proxy_mutations(url: str):
    """
    Shared by both lookups. Same status policy as the cadastre:
    the DVF status is the caller's status.
    """
    try:
        return upstream.proxy_json(url, SOURCE)
    except upstream.UpstreamUnavailable as e:
        # Raw transport error, handy when the DVF host is down
        raise HTTPException(status_code=500, detail=str(e))
    except upstream.UpstreamStatusError as e:
        raise HTTPException(status_code=e.status_code, detail="DVF source error")


@router.get("")
def get_dvf(
    id_parcelle: Optional[List[str]] = Query(None, description="Cadastral parcel id, e.g. 75056000AB0012")
):
    """Sale history (mutations) of a single parcel."""
    # 1. Validate: an empty filter would ask DVF for nothing useful
    parcel = first_value(id_parcelle)
    if not parcel:
        raise HTTPException(status_code=400, detail="Missing id_parcelle parameter")

    # 2. Filter mutations by parcel code
    return _proxy_mutations(mutations_url(code_parcelle=parcel))


@router.get("/commune")
def get_dvf_by_commune(
    code_insee: Optional[List[str]] = Query(None, description="INSEE code of the commune")
):
    """Every mutation recorded in a commune."""
    # 1. Validate
    code = first_value(code_insee)
    if not code:
        raise HTTPException(status_code=400, detail="Missing code_insee parameter")

    # 2. Filter mutations by commune code
    return _proxy_mutations(mutations_url(code_commune=code))
