from argparse import ArgumentParser
from collections.abc import Sequence

import uvicorn
from loguru import logger

from budget_server.app import create_app
from budget_server.config import Settings, settings


def build_parser() -> ArgumentParser:
    parser = ArgumentParser("budget-server", description="Run the Budget Management API server")
    parser.add_argument("--host", default=settings.HOST)
    parser.add_argument("--port", type=int, default=settings.PORT)
    parser.add_argument("--log-level", default=settings.LOG_LEVEL)
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    # validate the overrides the same way env values are validated
    run_settings = Settings(
        **(settings.model_dump() | {"HOST": args.host, "PORT": args.port, "LOG_LEVEL": args.log_level})
    )
    app = create_app(run_settings)
    logger.info(f"Starting budget server on {run_settings.HOST}:{run_settings.PORT}")
    uvicorn.run(
        app,
        host=run_settings.HOST,
        port=run_settings.PORT,
        log_level=run_settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
