"""Entry points da camada de adapters (inbound e outbound)."""

from .handle_inbound import handle_inbound_request
from .send_outbound import send_outbound_message

__all__ = ["handle_inbound_request", "send_outbound_message"]
