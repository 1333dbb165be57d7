"""Run the Coolify MCP server over stdio.

Reads configuration from the environment (or a ``.env`` file), then serves
MCP requests on stdin/stdout until the client closes the stream. Any error
escaping the server is logged to stderr and ends the process with status 1.
"""

from __future__ import annotations

import sys

from coolify_mcp.core.config import env_file_candidates, get_settings, resolved_env_file
from coolify_mcp.core.logging_config import configure_logging, get_logger
from coolify_mcp.mcp.server import build_server

logger = get_logger(__name__)


def main() -> None:
    try:
        configure_logging()
        settings = get_settings()
        if settings.access_token() is None:
            logger.warning(
                "coolify_access_token_missing",
                hint="set COOLIFY_ACCESS_TOKEN; requests will be sent unauthenticated",
            )
        logger.info(
            "environment_loaded",
            env=settings.app_env,
            coolify_base_url=settings.coolify_base_url,
            env_file=resolved_env_file() or "not-found",
            env_candidates=list(env_file_candidates()),
        )

        server = build_server(settings)
        logger.info("coolify_mcp_server_starting", message="Coolify MCP Server running on stdio")
        server.run(transport="stdio", show_banner=False)
    except Exception:
        logger.exception("fatal_error")
        sys.exit(1)

    logger.info("coolify_mcp_server_stopped")


if __name__ == "__main__":
    main()
