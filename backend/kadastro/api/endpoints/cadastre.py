from typing import List, Optional
from urllib.parse import quote

from fastapi import APIRouter, HTTPException, Query

from kadastro.api.params import first_value
from kadastro.core import config, upstream

router = APIRouter()

SOURCE = "Cadastre API"


def parcelles_url(code_insee: str) -> str:
    """Etalab bundler URL for the GeoJSON parcels of one commune."""
    return f"{config.CADASTRE_BASE_URL}/communes/{quote(code_insee, safe='')}/geojson/parcelles"


@router.get("")
def get_parcelles(
    code_insee: Optional[List[str]] = Query(None, description="INSEE code of the commune, e.g. 75056")
):
    """
    Parcel boundaries (GeoJSON FeatureCollection) of a commune.
    The cadastre payload is relayed untouched.
    """
    # 1. Validate: the commune is the only input
    code = first_value(code_insee)
    if not code:
        raise HTTPException(status_code=400, detail="Missing code_insee parameter")

    # 2. Fetch from the bundler and stream it back
    try:
        return upstream.proxy_json(parcelles_url(code), SOURCE)
    except upstream.UpstreamUnavailable:
        raise HTTPException(status_code=500, detail="Error while calling the Cadastre API")
    except upstream.UpstreamStatusError as e:
        # Unknown commune comes back as a 404 from the bundler
        raise HTTPException(status_code=e.status_code, detail="Commune not found or cadastre source error")
