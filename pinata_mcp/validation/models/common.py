"""Common models and enums shared by tool input models."""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Network(str, Enum):
    """IPFS network a file or group lives on."""

    PUBLIC = "public"
    PRIVATE = "private"


class ToolInput(BaseModel):
    """Base for tool inputs.

    Wire names are camelCase; fields are snake_case with aliases, and either
    spelling is accepted.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)  # Ignore extra fields from MCP


class PaymentRequirement(BaseModel):
    """One accepted payment option of an x402 payment instruction."""

    model_config = ConfigDict(extra="ignore")

    asset: str = Field(description="The token contract address (e.g., USDC on Base)")
    pay_to: str = Field(description="The wallet address to receive payments")
    network: Literal["base", "base-sepolia", "eip155:8453", "eip155:84532"]
    amount: str = Field(description="The amount required for access, in the smallest unit")
    description: Optional[str] = None
