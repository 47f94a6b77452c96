"""Input models for MCP server tools."""

from typing import Any, Dict, List, Optional

from pydantic import Field

from .common import Network, PaymentRequirement, ToolInput


# ============================================================================
# Files
# ============================================================================


class SearchFilesInput(ToolInput):
    """Input for searchFiles."""

    network: Network = Network.PUBLIC
    name: Optional[str] = None
    cid: Optional[str] = None
    mime_type: Optional[str] = Field(default=None, alias="mimeType")
    limit: Optional[int] = Field(default=None, ge=1)
    page_token: Optional[str] = Field(default=None, alias="pageToken")


class FileIdInput(ToolInput):
    """Input for getFileById and deleteFile."""

    network: Network = Network.PUBLIC
    id: str = Field(min_length=1)


class UpdateFileInput(FileIdInput):
    """Input for updateFile."""

    name: Optional[str] = None
    keyvalues: Optional[Dict[str, Any]] = None


class UploadFileInput(ToolInput):
    """Input for uploadFile.

    Only base64 content is accepted; ``resourceUri`` is parsed so that the
    handler can refuse it with a clear message.
    """

    file_content: Optional[str] = Field(default=None, alias="fileContent")
    file_name: Optional[str] = Field(default=None, alias="fileName")
    resource_uri: Optional[str] = Field(default=None, alias="resourceUri")
    mime_type: Optional[str] = Field(default=None, alias="mimeType")
    network: Network = Network.PUBLIC
    group_id: Optional[str] = None
    keyvalues: Optional[Dict[str, Any]] = None


# ============================================================================
# Links and gateway
# ============================================================================


class CreatePrivateDownloadLinkInput(ToolInput):
    """Input for createPrivateDownloadLink."""

    cid: str = Field(min_length=1)
    expires: int = Field(default=600, ge=1)


class CreateLinkInput(ToolInput):
    """Input for createLink."""

    cid: str = Field(min_length=1)
    network: Network = Network.PUBLIC
    expires: int = Field(default=600, ge=1)


class FetchFromGatewayInput(ToolInput):
    """Input for fetchFromGateway."""

    cid: str = Field(min_length=1)
    network: Network = Network.PUBLIC


# ============================================================================
# Groups
# ============================================================================


class ListGroupsInput(ToolInput):
    network: Network = Network.PUBLIC
    name: Optional[str] = None
    limit: Optional[int] = Field(default=None, ge=1)
    page_token: Optional[str] = Field(default=None, alias="pageToken")


class CreateGroupInput(ToolInput):
    network: Network = Network.PUBLIC
    name: str = Field(min_length=1)


class GroupIdInput(ToolInput):
    """Input for getGroup and deleteGroup."""

    network: Network = Network.PUBLIC
    id: str = Field(min_length=1)


class UpdateGroupInput(GroupIdInput):
    name: Optional[str] = None


class GroupFileInput(ToolInput):
    """Input for addFileToGroup and removeFileFromGroup."""

    network: Network = Network.PUBLIC
    group_id: str = Field(alias="groupId", min_length=1)
    file_id: str = Field(alias="fileId", min_length=1)


# ============================================================================
# x402 payment instructions
# ============================================================================


class CreatePaymentInstructionInput(ToolInput):
    name: str = Field(min_length=1)
    payment_requirements: List[PaymentRequirement]
    description: Optional[str] = None


class ListPaymentInstructionsInput(ToolInput):
    limit: Optional[int] = Field(default=None, ge=1)
    page_token: Optional[str] = Field(default=None, alias="pageToken")
    cid: Optional[str] = None
    name: Optional[str] = None
    id: Optional[str] = None


class PaymentInstructionIdInput(ToolInput):
    """Input for getPaymentInstruction and deletePaymentInstruction."""

    id: str = Field(min_length=1)


class UpdatePaymentInstructionInput(PaymentInstructionIdInput):
    name: Optional[str] = None
    payment_requirements: Optional[List[PaymentRequirement]] = None
    description: Optional[str] = None


# ============================================================================
# CID signatures
# ============================================================================


class CidInput(ToolInput):
    """Input for signCid, getSignature and deleteSignature."""

    cid: str = Field(min_length=1)


class ListSignaturesInput(ToolInput):
    limit: Optional[int] = Field(default=None, ge=1)
    page_token: Optional[str] = Field(default=None, alias="pageToken")
