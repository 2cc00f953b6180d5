from pydantic import BaseModel


class HealthResponse(BaseModel):
    """
    Liveness payload for load balancers and the front-end.
    """
    status: str
    service: str
    version: str
