"""MCP tool schemas (list_tools) for the Pinata service.

This module isolates the Tool(...) schema definitions from the dispatcher so
the handler table stays readable.
"""

from __future__ import annotations

from typing import Any, Dict, List

from mcp.types import Tool


def _network(description: str) -> Dict[str, Any]:
    return {
        "type": "string",
        "enum": ["public", "private"],
        "default": "public",
        "description": description,
    }


def _string(description: str) -> Dict[str, Any]:
    return {"type": "string", "description": description}


def _number(description: str) -> Dict[str, Any]:
    return {"type": "number", "description": description}


def _object(properties: Dict[str, Any], required: List[str] | None = None) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


PAGE_TOKEN = _string("Token for pagination")

PAYMENT_REQUIREMENT = {
    "type": "object",
    "properties": {
        "asset": _string("The token contract address (e.g., USDC on Base)"),
        "pay_to": _string("The wallet address to receive payments"),
        "network": {
            "type": "string",
            "enum": ["base", "base-sepolia", "eip155:8453", "eip155:84532"],
            "description": "The blockchain network",
        },
        "amount": _string("The amount required for access (in smallest unit, e.g., wei)"),
        "description": _string("Optional description"),
    },
    "required": ["asset", "pay_to", "network", "amount"],
}


async def build_tools() -> List[Tool]:
    return [
        # --------------------------------------------------------------- account
        Tool(
            name="testAuthentication",
            description="Verify that your Pinata JWT is valid and working",
            inputSchema=_object({}),
        ),
        # ----------------------------------------------------------------- files
        Tool(
            name="searchFiles",
            description=(
                "Search for files in your Pinata account by name, CID, or MIME type. "
                "Returns a list of files matching the given criteria."
            ),
            inputSchema=_object(
                {
                    "network": _network("Whether to search in public or private IPFS"),
                    "name": _string("Filter by filename"),
                    "cid": _string("Filter by content ID (CID)"),
                    "mimeType": _string("Filter by MIME type"),
                    "limit": _number("Maximum number of results to return"),
                    "pageToken": PAGE_TOKEN,
                }
            ),
        ),
        Tool(
            name="getFileById",
            description="Retrieve detailed information about a specific file stored on Pinata by its ID",
            inputSchema=_object(
                {
                    "network": _network("Whether the file is in public or private IPFS"),
                    "id": _string("The unique ID of the file to retrieve"),
                },
                required=["id"],
            ),
        ),
        Tool(
            name="updateFile",
            description="Update metadata for an existing file on Pinata including name and key-value pairs",
            inputSchema=_object(
                {
                    "network": _network("Whether the file is in public or private storage"),
                    "id": _string("The unique ID of the file to update"),
                    "name": _string("New name for the file"),
                    "keyvalues": {
                        "type": "object",
                        "description": "Metadata key-value pairs to update",
                    },
                },
                required=["id"],
            ),
        ),
        Tool(
            name="deleteFile",
            description="Delete a file from your Pinata account by its ID",
            inputSchema=_object(
                {
                    "network": _network("Whether the file is in public or private IPFS"),
                    "id": _string("The unique ID of the file to delete"),
                },
                required=["id"],
            ),
        ),
        Tool(
            name="uploadFile",
            description=(
                "Upload a file to Pinata IPFS from base64-encoded content. "
                "Local file:// URIs are not supported by this server."
            ),
            inputSchema=_object(
                {
                    "fileContent": _string("Base64-encoded file content to upload"),
                    "fileName": _string("Name for the uploaded file"),
                    "mimeType": _string(
                        "MIME type of the file (defaults to application/octet-stream)"
                    ),
                    "network": _network("Whether to upload to public or private IPFS"),
                    "group_id": _string("ID of a group to add the file to"),
                    "keyvalues": {
                        "type": "object",
                        "description": "Metadata key-value pairs for the file",
                    },
                },
                required=["fileContent", "fileName"],
            ),
        ),
        # ----------------------------------------------------------------- links
        Tool(
            name="createPrivateDownloadLink",
            description="Generate a temporary download link for accessing a private IPFS file from Pinata",
            inputSchema=_object(
                {
                    "cid": _string("The content ID (CID) of the private file"),
                    "expires": {
                        "type": "number",
                        "default": 600,
                        "description": "Expiration time in seconds (default: 600 = 10 minutes)",
                    },
                },
                required=["cid"],
            ),
        ),
        Tool(
            name="createLink",
            description=(
                "Create a direct access link for a file stored on Pinata IPFS. For public files "
                "returns a gateway URL, for private files generates a temporary download link."
            ),
            inputSchema=_object(
                {
                    "cid": _string("The CID of the file to create a link for"),
                    "network": _network("Whether the file is on public or private IPFS"),
                    "expires": {
                        "type": "number",
                        "default": 600,
                        "description": "Expiration time in seconds for private download links (default: 600)",
                    },
                },
                required=["cid"],
            ),
        ),
        Tool(
            name="fetchFromGateway",
            description="Fetch content from Public or Private IPFS via Pinata gateway and return it",
            inputSchema=_object(
                {
                    "cid": _string("The CID of the file to fetch"),
                    "network": _network("Whether the file is on public or private IPFS"),
                },
                required=["cid"],
            ),
        ),
        # ---------------------------------------------------------------- groups
        Tool(
            name="listGroups",
            description="List groups in your Pinata account with optional filtering by name",
            inputSchema=_object(
                {
                    "network": _network("Whether to list groups in public or private IPFS"),
                    "name": _string("Filter groups by name"),
                    "limit": _number("Maximum number of results to return"),
                    "pageToken": PAGE_TOKEN,
                }
            ),
        ),
        Tool(
            name="createGroup",
            description="Create a new group in your Pinata account to organize files",
            inputSchema=_object(
                {
                    "network": _network("Whether to create the group in public or private IPFS"),
                    "name": _string("Name for the new group"),
                },
                required=["name"],
            ),
        ),
        Tool(
            name="getGroup",
            description="Retrieve detailed information about a specific group by its ID",
            inputSchema=_object(
                {
                    "network": _network("Whether the group is in public or private IPFS"),
                    "id": _string("The unique ID of the group to retrieve"),
                },
                required=["id"],
            ),
        ),
        Tool(
            name="updateGroup",
            description="Update metadata for an existing group on Pinata",
            inputSchema=_object(
                {
                    "network": _network("Whether the group is in public or private IPFS"),
                    "id": _string("The unique ID of the group to update"),
                    "name": _string("New name for the group"),
                },
                required=["id"],
            ),
        ),
        Tool(
            name="deleteGroup",
            description="Delete a group from your Pinata account by its ID",
            inputSchema=_object(
                {
                    "network": _network("Whether the group is in public or private IPFS"),
                    "id": _string("The unique ID of the group to delete"),
                },
                required=["id"],
            ),
        ),
        Tool(
            name="addFileToGroup",
            description="Add an existing file to a group in your Pinata account",
            inputSchema=_object(
                {
                    "network": _network("Whether the group and file are in public or private IPFS"),
                    "groupId": _string("The ID of the group to add the file to"),
                    "fileId": _string("The ID of the file to add to the group"),
                },
                required=["groupId", "fileId"],
            ),
        ),
        Tool(
            name="removeFileFromGroup",
            description="Remove a file from a group in your Pinata account",
            inputSchema=_object(
                {
                    "network": _network("Whether the group and file are in public or private IPFS"),
                    "groupId": _string("The ID of the group to remove the file from"),
                    "fileId": _string("The ID of the file to remove from the group"),
                },
                required=["groupId", "fileId"],
            ),
        ),
        # -------------------------------------------------- payment instructions
        Tool(
            name="createPaymentInstruction",
            description=(
                "Create a new x402 payment instruction for content monetization. "
                "This allows you to gate content behind a paywall."
            ),
            inputSchema=_object(
                {
                    "name": _string("Name for the payment instruction"),
                    "payment_requirements": {
                        "type": "array",
                        "items": PAYMENT_REQUIREMENT,
                        "description": "Array of payment requirements",
                    },
                    "description": _string("Description of the payment instruction"),
                },
                required=["name", "payment_requirements"],
            ),
        ),
        Tool(
            name="listPaymentInstructions",
            description="List and filter x402 payment instructions for content monetization",
            inputSchema=_object(
                {
                    "limit": _number("Limit the number of results returned"),
                    "pageToken": PAGE_TOKEN,
                    "cid": _string("Filter by associated CID"),
                    "name": _string("Filter by name"),
                    "id": _string("Filter by specific payment instruction ID"),
                }
            ),
        ),
        Tool(
            name="getPaymentInstruction",
            description="Retrieve a specific x402 payment instruction by ID",
            inputSchema=_object(
                {"id": _string("The unique identifier of the payment instruction")},
                required=["id"],
            ),
        ),
        Tool(
            name="updatePaymentInstruction",
            description="Update an existing x402 payment instruction",
            inputSchema=_object(
                {
                    "id": _string("The unique identifier of the payment instruction to update"),
                    "name": _string("Updated name"),
                    "payment_requirements": {
                        "type": "array",
                        "items": PAYMENT_REQUIREMENT,
                        "description": "Updated payment requirements",
                    },
                    "description": _string("Updated description"),
                },
                required=["id"],
            ),
        ),
        Tool(
            name="deletePaymentInstruction",
            description="Delete an x402 payment instruction",
            inputSchema=_object(
                {"id": _string("The unique identifier of the payment instruction to delete")},
                required=["id"],
            ),
        ),
        # ------------------------------------------------------------ signatures
        Tool(
            name="signCid",
            description="Create an EIP-712 cryptographic signature for a CID to verify content authenticity",
            inputSchema=_object({"cid": _string("The CID to sign")}, required=["cid"]),
        ),
        Tool(
            name="listSignatures",
            description="List signatures for files in your Pinata account",
            inputSchema=_object(
                {
                    "limit": _number("Maximum number of results to return"),
                    "pageToken": PAGE_TOKEN,
                }
            ),
        ),
        Tool(
            name="getSignature",
            description="Get signature details for a specific CID",
            inputSchema=_object(
                {"cid": _string("The CID to get the signature for")}, required=["cid"]
            ),
        ),
        Tool(
            name="deleteSignature",
            description="Remove a signature from a CID",
            inputSchema=_object(
                {"cid": _string("The CID to remove the signature from")}, required=["cid"]
            ),
        ),
    ]
