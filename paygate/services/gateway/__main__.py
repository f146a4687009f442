"""Run the gateway with uvicorn: `python -m paygate.services.gateway`."""

import uvicorn

from paygate.common.logging import logger
from paygate.services.gateway.main import app, settings


def main() -> None:
    logger.info("Server running on http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
