"""FastAPI web server for gitcard."""

from collections.abc import AsyncIterator
from datetime import datetime

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from gitcard import __version__
from gitcard.config import GitCardConfig
from gitcard.core.exporter import to_dict
from gitcard.core.loader import ProfileLoader
from gitcard.logging import configure_logging
from gitcard.models.result import LoadResult, ProfileLoaded
from gitcard.views import render_home, render_layout, render_profile_state


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str


def _status_for(result: LoadResult) -> int:
    return 200 if isinstance(result, ProfileLoaded) else 502


def get_config(request: Request) -> GitCardConfig:
    return request.app.state.config


async def get_loader(
    config: GitCardConfig = Depends(get_config),
) -> AsyncIterator[ProfileLoader]:
    """Data source of the profile routes; one fresh loader per request."""
    async with ProfileLoader(config) as loader:
        yield loader


def create_app(config: GitCardConfig | None = None) -> FastAPI:
    """Build the application, registering the loader as the /github data source."""
    config = config or GitCardConfig()
    configure_logging(config)

    app = FastAPI(
        title="gitcard",
        description="GitHub profile card",
        version=__version__,
    )
    app.state.config = config

    @app.get("/", response_class=HTMLResponse, tags=["Pages"])
    async def home(config: GitCardConfig = Depends(get_config)):
        """Index page."""
        return HTMLResponse(render_layout(render_home(config.username), active="/"))

    @app.get("/github", response_class=HTMLResponse, tags=["Pages"])
    async def github(
        loader: ProfileLoader = Depends(get_loader),
        config: GitCardConfig = Depends(get_config),
    ):
        """
        Profile page.

        The loader resolves before rendering; a failed load renders the
        error state and answers 502.
        """
        result = await loader.load()
        outlet = render_profile_state(result, width=config.avatar_width)
        return HTMLResponse(
            render_layout(outlet, title=f"{result.username} | gitcard", active="/github"),
            status_code=_status_for(result),
        )

    @app.get("/api/profile", tags=["Profile"])
    async def profile(loader: ProfileLoader = Depends(get_loader)):
        """Load the configured profile and return the tagged result as JSON."""
        result = await loader.load()
        return JSONResponse(to_dict(result), status_code=_status_for(result))

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health_check():
        """Check API health status."""
        return HealthResponse(
            status="healthy",
            version=__version__,
            timestamp=datetime.now().isoformat(),
        )

    @app.get("/api/config", tags=["System"])
    async def get_effective_config(config: GitCardConfig = Depends(get_config)):
        """
        Return the effective configuration.

        Values can be set via environment variables with the `GITCARD_`
        prefix, e.g. `GITCARD_USERNAME=octocat`.
        """
        return config.model_dump(mode="json")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=app.state.config.host, port=app.state.config.port)
