"""x402 payment instruction tool handlers."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pinata_mcp.mcp_server.responses import _success
from pinata_mcp.mcp_server.tool_types import ToolResponse
from pinata_mcp.upstream import PinataClient
from pinata_mcp.validation.models import (
    CreatePaymentInstructionInput,
    ListPaymentInstructionsInput,
    PaymentInstructionIdInput,
    PaymentRequirement,
    UpdatePaymentInstructionInput,
)

BASE_PATH = "/v3/x402/payment_instructions"


def _requirements(items: Optional[List[PaymentRequirement]]) -> List[Dict[str, Any]]:
    return [item.model_dump(exclude_none=True) for item in items or []]


async def _tool_create_payment_instruction(
    client: PinataClient, arguments: Dict[str, Any]
) -> ToolResponse:
    payload = CreatePaymentInstructionInput.model_validate(arguments)
    body: Dict[str, Any] = {
        "name": payload.name,
        "payment_requirements": _requirements(payload.payment_requirements),
    }
    if payload.description:
        body["description"] = payload.description
    data = await client.request_json(
        "POST",
        BASE_PATH,
        action="create payment instruction",
        json_body=body,
        include_body_in_error=True,
    )
    return _success(data, message="✅ Payment instruction created successfully!")


async def _tool_list_payment_instructions(
    client: PinataClient, arguments: Dict[str, Any]
) -> ToolResponse:
    payload = ListPaymentInstructionsInput.model_validate(arguments)
    data = await client.request_json(
        "GET",
        BASE_PATH,
        action="list payment instructions",
        params={
            "limit": payload.limit,
            "pageToken": payload.page_token,
            "cid": payload.cid,
            "name": payload.name,
            "id": payload.id,
        },
    )
    return _success(data)


async def _tool_get_payment_instruction(
    client: PinataClient, arguments: Dict[str, Any]
) -> ToolResponse:
    payload = PaymentInstructionIdInput.model_validate(arguments)
    data = await client.request_json(
        "GET", f"{BASE_PATH}/{payload.id}", action="get payment instruction"
    )
    return _success(data)


async def _tool_update_payment_instruction(
    client: PinataClient, arguments: Dict[str, Any]
) -> ToolResponse:
    payload = UpdatePaymentInstructionInput.model_validate(arguments)
    body: Dict[str, Any] = {}
    if payload.name:
        body["name"] = payload.name
    if payload.payment_requirements:
        body["payment_requirements"] = _requirements(payload.payment_requirements)
    if payload.description:
        body["description"] = payload.description
    data = await client.request_json(
        "PUT",
        f"{BASE_PATH}/{payload.id}",
        action="update payment instruction",
        json_body=body,
    )
    return _success(data)


async def _tool_delete_payment_instruction(
    client: PinataClient, arguments: Dict[str, Any]
) -> ToolResponse:
    payload = PaymentInstructionIdInput.model_validate(arguments)
    data = await client.request_json(
        "DELETE", f"{BASE_PATH}/{payload.id}", action="delete payment instruction"
    )
    return _success(data, message="✅ Payment instruction deleted successfully")
