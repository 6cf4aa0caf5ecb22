import logging
import os

import uvicorn


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    reload_enabled = os.getenv("RELOAD", "false").lower() in {"1", "true", "yes", "on"}
    log_level = os.getenv("LOG_LEVEL", "info")

    # Planning modules log through the root logger; uvicorn only configures its own.
    logging.basicConfig(level=log_level.upper())

    uvicorn.run("invplan.main:app", host=host, port=port, reload=reload_enabled, log_level=log_level)


if __name__ == "__main__":
    main()
