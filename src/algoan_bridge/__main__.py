"""Run the webhook API with uvicorn."""

import uvicorn

from algoan_bridge_config.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "algoan_bridge.presentation.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
    )


if __name__ == "__main__":
    main()
