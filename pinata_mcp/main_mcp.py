"""Command-line entry point for the HTTP MCP server."""

import argparse
import asyncio
import sys

from pinata_mcp.config import Config, get_config_summary
from pinata_mcp.logger import Logger, session_logger
from pinata_mcp.startup import resolve_auth_config, resolve_pinata_jwt

logger: Logger = session_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Pinata MCP Server - IPFS storage tools via Model Context Protocol"
    )
    parser.add_argument(
        "--host",
        type=str,
        default=Config.get_host(),
        help="Host address to bind to (default: 0.0.0.0, or PINATA_MCP_HOST env var)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=Config.get_port(),
        help="Port number to listen on (default: 3000, or PINATA_MCP_PORT env var)",
    )
    parser.add_argument(
        "--api-keys",
        type=str,
        default=None,
        help="Comma-separated allowed x-api-key values (default: from MCP_API_KEYS env var)",
    )
    parser.add_argument(
        "--no-auth",
        action="store_true",
        help="Disable authentication (WARNING: insecure, for development only)",
    )
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
    parser.add_argument(
        "--session-idle-timeout",
        type=float,
        default=Config.get_session_idle_timeout(),
        help="Close sessions idle for this many seconds (default: 0, never)",
    )
    parser.add_argument(
        "--no-serialize-sessions",
        action="store_true",
        help="Let requests on the same session run concurrently",
    )
    return parser


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)
    logger.info("Configuration loaded", **get_config_summary())

    api_keys = resolve_auth_config(
        api_keys_arg=args.api_keys,
        require_auth=not args.no_auth,
        logger=logger,
    )
    jwt = resolve_pinata_jwt(args.pinata_jwt, logger)

    from pinata_mcp.mcp_server import create_app, run_http
    from pinata_mcp.upstream import PinataClient

    client = PinataClient(jwt=jwt, gateway_url=args.gateway_url, timeout=args.timeout, logger=logger)
    app = create_app(
        client,
        api_keys=api_keys,
        logger=logger,
        session_idle_timeout=args.session_idle_timeout,
        housekeeping_interval=Config.get_housekeeping_interval(),
        serialize_requests=not args.no_serialize_sessions,
    )

    try:
        logger.info(
            "Starting MCP server",
            host=args.host,
            port=args.port,
            transport="HTTP",
            auth_enabled=bool(api_keys),
        )
        asyncio.run(run_http(app, host=args.host, port=args.port))
        logger.info("MCP server shutdown complete")
    except KeyboardInterrupt:
        logger.info("Shutdown complete")
        sys.exit(0)
    except Exception as e:
        logger.error("Failed to start server", error=str(e), error_type=type(e).__name__)
        sys.exit(1)


if __name__ == "__main__":
    main()
