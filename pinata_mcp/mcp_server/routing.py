"""Tool routing and dispatch for the MCP server."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
from mcp.types import Tool
from pydantic import ValidationError as PydanticValidationError

from pinata_mcp.exceptions import PinataMcpError
from pinata_mcp.logger import Logger

from pinata_mcp.mcp_server.responses import _error, _handle_validation_error
from pinata_mcp.mcp_server.tool_schemas import build_tools
from pinata_mcp.mcp_server.tool_types import ToolHandler, ToolResponse

from pinata_mcp.mcp_server.tools.account import _tool_test_authentication
from pinata_mcp.mcp_server.tools.files import (
    _tool_delete_file,
    _tool_get_file_by_id,
    _tool_search_files,
    _tool_update_file,
    _tool_upload_file,
)
from pinata_mcp.mcp_server.tools.groups import (
    _tool_add_file_to_group,
    _tool_create_group,
    _tool_delete_group,
    _tool_get_group,
    _tool_list_groups,
    _tool_remove_file_from_group,
    _tool_update_group,
)
from pinata_mcp.mcp_server.tools.links import (
    _tool_create_link,
    _tool_create_private_download_link,
    _tool_fetch_from_gateway,
)
from pinata_mcp.mcp_server.tools.payments import (
    _tool_create_payment_instruction,
    _tool_delete_payment_instruction,
    _tool_get_payment_instruction,
    _tool_list_payment_instructions,
    _tool_update_payment_instruction,
)
from pinata_mcp.mcp_server.tools.signatures import (
    _tool_delete_signature,
    _tool_get_signature,
    _tool_list_signatures,
    _tool_sign_cid,
)
from pinata_mcp.upstream import PinataClient


HANDLERS: Dict[str, ToolHandler] = {
    "testAuthentication": _tool_test_authentication,
    # Files
    "searchFiles": _tool_search_files,
    "getFileById": _tool_get_file_by_id,
    "updateFile": _tool_update_file,
    "deleteFile": _tool_delete_file,
    "uploadFile": _tool_upload_file,
    # Links
    "createPrivateDownloadLink": _tool_create_private_download_link,
    "createLink": _tool_create_link,
    "fetchFromGateway": _tool_fetch_from_gateway,
    # Groups
    "listGroups": _tool_list_groups,
    "createGroup": _tool_create_group,
    "getGroup": _tool_get_group,
    "updateGroup": _tool_update_group,
    "deleteGroup": _tool_delete_group,
    "addFileToGroup": _tool_add_file_to_group,
    "removeFileFromGroup": _tool_remove_file_from_group,
    # x402 payment instructions
    "createPaymentInstruction": _tool_create_payment_instruction,
    "listPaymentInstructions": _tool_list_payment_instructions,
    "getPaymentInstruction": _tool_get_payment_instruction,
    "updatePaymentInstruction": _tool_update_payment_instruction,
    "deletePaymentInstruction": _tool_delete_payment_instruction,
    # CID signatures
    "signCid": _tool_sign_cid,
    "listSignatures": _tool_list_signatures,
    "getSignature": _tool_get_signature,
    "deleteSignature": _tool_delete_signature,
}


class ToolDispatcher:
    """Lists tool definitions and routes tool calls to their handlers.

    ``call_tool`` never raises: every failure is reshaped into an
    ``isError`` result so the transport always has something to send back.
    """

    def __init__(
        self,
        client: PinataClient,
        logger: Logger,
        handlers: Optional[Dict[str, ToolHandler]] = None,
    ):
        self.client = client
        self.logger = logger
        self.handlers = handlers if handlers is not None else HANDLERS

    async def list_tools(self) -> List[Tool]:
        tools = await build_tools()
        return [tool for tool in tools if tool.name in self.handlers]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> ToolResponse:
        arguments = arguments or {}
        self.logger.info("Tool invocation started", tool=name, args_keys=list(arguments.keys()))

        handler = self.handlers.get(name)
        if handler is None:
            self.logger.error("Unknown tool requested", tool=name)
            return _error(f"Unknown tool: {name}")

        try:
            result = await handler(self.client, arguments)
            self.logger.info("Tool completed", tool=name, is_error=bool(result.isError))
            return result
        except PydanticValidationError as exc:
            self.logger.error(
                "Validation error",
                tool=name,
                error_count=len(exc.errors()),
                errors=[{"loc": e["loc"], "msg": e["msg"]} for e in exc.errors()],
            )
            return _handle_validation_error(exc)
        except PinataMcpError as exc:
            self.logger.error(
                "Domain error",
                tool=name,
                error_code=exc.code,
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
            return _error(str(exc))
        except httpx.TimeoutException as exc:
            self.logger.error("Upstream timeout", tool=name, error=str(exc))
            return _error(f"Upstream request timed out: {type(exc).__name__}")
        except httpx.HTTPError as exc:
            self.logger.error(
                "Upstream network failure",
                tool=name,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return _error(f"Upstream request failed: {exc}")
        except Exception as exc:  # pragma: no cover
            self.logger.error(
                "Unexpected tool failure",
                tool=name,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return _error(str(exc) or type(exc).__name__)
