"""MCP server exposing KEGG database lookups as tools over stdio."""

__version__ = "0.1.0"

SERVER_NAME = "kegg-mcp-server"
