# ABOUTME: Dependency container for the weather session using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient used by the service layer to call the weather APIs.

import httpx
from pydantic import BaseModel, ConfigDict

USER_AGENT = "weatherwiz/0.1"


class WeatherDeps(BaseModel):
    """Dependencies injected into the weather session."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient


def create_http_client() -> httpx.AsyncClient:
    """Create the shared httpx client.

    Requests go out once with the transport's default timeout; failures are reported, not retried.
    """
    return httpx.AsyncClient(headers={"User-Agent": USER_AGENT})
