"""Command-line entry point for the stdio MCP server."""

import argparse
import asyncio
import sys

from pinata_mcp.config import Config
from pinata_mcp.logger import Logger, session_logger
from pinata_mcp.startup import resolve_pinata_jwt

logger: Logger = session_logger


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Pinata MCP Server over stdio")
    parser.add_argument(
        "--pinata-jwt",
        type=str,
        default=None,
        help="Pinata API JWT (default: from PINATA_JWT env var)",
    )
    parser.add_argument(
        "--gateway-url",
        type=str,
        default=Config.get_gateway_url(),
        help="Dedicated Pinata gateway host (default: from GATEWAY_URL env var)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=Config.get_http_timeout(),
        help="Upstream request timeout in seconds (default: 30)",
    )
    args = parser.parse_args(argv)

    jwt = resolve_pinata_jwt(args.pinata_jwt, logger)

    from pinata_mcp.mcp_server.stdio_server import main as run_stdio
    from pinata_mcp.upstream import PinataClient

    client = PinataClient(jwt=jwt, gateway_url=args.gateway_url, timeout=args.timeout, logger=logger)
    try:
        asyncio.run(run_stdio(client, logger))
    except KeyboardInterrupt:
        logger.info("Shutdown complete")
        sys.exit(0)
    except Exception as e:
        logger.error("Fatal error in stdio server", error=str(e), error_type=type(e).__name__)
        sys.exit(1)


if __name__ == "__main__":
    main()
