"""Protocolos e contratos do core da aplicação."""

from .messaging_client import MessagingClientProtocol, SessionClientProtocol
from .models import (
    DispatchResult,
    MessageMedia,
    OutboundFileRequest,
    OutboundImageRequest,
    OutboundPayload,
    OutboundRequest,
    OutboundTextRequest,
    SessionStatus,
)
from .normalizer import AddressNormalizerProtocol
from .payload_builder import PayloadBuilderProtocol
from .validator import OutboundRequestValidatorProtocol

__all__ = [
    "AddressNormalizerProtocol",
    "DispatchResult",
    "MessageMedia",
    "MessagingClientProtocol",
    "OutboundFileRequest",
    "OutboundImageRequest",
    "OutboundPayload",
    "OutboundRequest",
    "OutboundRequestValidatorProtocol",
    "OutboundTextRequest",
    "PayloadBuilderProtocol",
    "SessionClientProtocol",
    "SessionStatus",
]
