"""
Blog API - Health Check Route
==============================

What:  Liveness probe at GET /.
How:   Always answers 200 with an empty body; it does not touch the
       database, so it reports that the process is serving requests.
Who:   Docker health checks, load balancers, humans checking the API is up.
"""

from fastapi import APIRouter, Response

router = APIRouter(tags=["Home"])


@router.get(
    "/",
    status_code=200,
    summary="Liveness probe",
    description="Returns 200 with an empty body while the API is online.",
    response_class=Response,
)
async def home() -> Response:
    return Response(status_code=200)
