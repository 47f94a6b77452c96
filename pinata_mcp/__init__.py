"""pinata-mcp: MCP server exposing the Pinata IPFS API as tools."""

__version__ = "1.0.0"
