"""Backend entrypoint. Starts uvicorn with host and port from env/settings."""
import os

import uvicorn

from portfolio_dashboard.config.settings import get_settings
from portfolio_dashboard.main import app


def main() -> None:
    port = int(os.environ.get("PORT", get_settings().port))
    uvicorn.run(app, host=os.environ.get("HOST", "127.0.0.1"), port=port)


if __name__ == "__main__":
    main()
