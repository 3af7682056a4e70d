"""Backend entrypoint: starts uvicorn on the configured port."""
import uvicorn

from dashboard.config.settings import get_settings
from dashboard.main import app


def main() -> None:
    port = get_settings().backend_port
    uvicorn.run(app, host="127.0.0.1", port=port)


if __name__ == "__main__":
    main()
