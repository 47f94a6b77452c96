"""Tool input validation models.

- common.py: shared enums and the base input model
- inputs.py: one input model per tool (or per family of identical tools)
"""

from .common import Network, PaymentRequirement, ToolInput
from .inputs import (
    CidInput,
    CreateGroupInput,
    CreateLinkInput,
    CreatePaymentInstructionInput,
    CreatePrivateDownloadLinkInput,
    FetchFromGatewayInput,
    FileIdInput,
    GroupFileInput,
    GroupIdInput,
    ListGroupsInput,
    ListPaymentInstructionsInput,
    ListSignaturesInput,
    PaymentInstructionIdInput,
    SearchFilesInput,
    UpdateFileInput,
    UpdateGroupInput,
    UpdatePaymentInstructionInput,
    UploadFileInput,
)

__all__ = [
    "Network",
    "PaymentRequirement",
    "ToolInput",
    "CidInput",
    "CreateGroupInput",
    "CreateLinkInput",
    "CreatePaymentInstructionInput",
    "CreatePrivateDownloadLinkInput",
    "FetchFromGatewayInput",
    "FileIdInput",
    "GroupFileInput",
    "GroupIdInput",
    "ListGroupsInput",
    "ListPaymentInstructionsInput",
    "ListSignaturesInput",
    "PaymentInstructionIdInput",
    "SearchFilesInput",
    "UpdateFileInput",
    "UpdateGroupInput",
    "UpdatePaymentInstructionInput",
    "UploadFileInput",
]
