"""Use case para envio outbound WhatsApp Web."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from app.constants.whatsapp import ErrorKind
from app.observability import record_latency
from app.protocols.models import DispatchResult
from utils.errors import DeliveryFailureError, MissingParameterError

if TYPE_CHECKING:
    from app.protocols.messaging_client import MessagingClientProtocol
    from app.protocols.models import OutboundRequest
    from app.protocols.normalizer import AddressNormalizerProtocol
    from app.protocols.payload_builder import PayloadBuilderProtocol
    from app.protocols.validator import OutboundRequestValidatorProtocol

logger = logging.getLogger(__name__)


class SendOutboundMessageUseCase:
    """Orquestra validação, normalização, build e envio outbound.

    Cada execução é single-shot: sem retries, sem fila. O resultado carrega
    o tipo de erro para ser mapeado em HTTP uma única vez na borda.
    """

    def __init__(
        self,
        validator: OutboundRequestValidatorProtocol,
        normalizer: AddressNormalizerProtocol,
        builder: PayloadBuilderProtocol,
        client: MessagingClientProtocol,
    ) -> None:
        self._validator = validator
        self._normalizer = normalizer
        self._builder = builder
        self._client = client

    async def execute(self, request: OutboundRequest) -> DispatchResult:
        """Executa envio outbound com validação e tratamento de erro."""
        try:
            self._validator.validate_outbound_request(request)
        except MissingParameterError as exc:
            logger.info(
                "outbound_missing_parameters",
                extra={"message_kind": request.kind.value, "missing": exc.missing},
            )
            return DispatchResult.failed(ErrorKind.MISSING_PARAMETER)

        address = self._normalizer.normalize(request.number or "")
        started_at = time.perf_counter()
        try:
            payload = await self._builder.build_full_payload(request, self._client)
            message_id = await self._client.send_message(
                address,
                payload.content,
                payload.options,
            )
        except DeliveryFailureError as exc:
            logger.error(
                "delivery_failed",
                exc_info=True,
                extra={"message_kind": request.kind.value, "reason": exc.reason},
            )
            return DispatchResult.failed(ErrorKind.DELIVERY_FAILURE)
        except Exception as exc:
            logger.exception(
                "delivery_failed_unexpected",
                extra={"message_kind": request.kind.value, "error_type": type(exc).__name__},
            )
            return DispatchResult.failed(ErrorKind.DELIVERY_FAILURE)

        record_latency(
            "whatsapp_web",
            f"send_{request.kind.value}",
            (time.perf_counter() - started_at) * 1000,
        )
        logger.info(
            "message_sent",
            extra={"message_kind": request.kind.value, "message_id": message_id},
        )
        return DispatchResult.sent(message_id)
