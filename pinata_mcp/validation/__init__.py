"""Validation module for tool arguments.

Validation happens through the Pydantic input models in
``pinata_mcp.validation.models``; the dispatcher turns their errors into
isError tool results.
"""

from pinata_mcp.validation.models import Network, PaymentRequirement, ToolInput

__all__ = ["Network", "PaymentRequirement", "ToolInput"]
