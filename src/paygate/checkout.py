"""
Checkout service routing payments to the selected gateway
"""

import logging
from typing import Optional

from .formatter import Amount, PaymentFormatter
from .gateways import PaymentGateway

logger = logging.getLogger(__name__)


class CheckoutService:
    """
    Routes checkouts to whichever gateway is currently bound

    The service holds a reference to the gateway but does not own it: callers
    keep their gateway instances and may rebind at any time. The last call to
    set_payment_gateway wins.
    """

    def __init__(
        self,
        gateway: Optional[PaymentGateway] = None,
        formatter: Optional[PaymentFormatter] = None
    ):
        """
        Initialize the service, optionally pre-bound to a gateway

        Args:
            gateway: Gateway to route checkouts to, or None to start unbound
            formatter: Output sink for dispatch and warning lines
        """
        self._gateway = gateway
        self.formatter = formatter or PaymentFormatter()

    @property
    def payment_gateway(self) -> Optional[PaymentGateway]:
        return self._gateway

    @property
    def is_configured(self) -> bool:
        return self._gateway is not None

    def set_payment_gateway(self, gateway: Optional[PaymentGateway]) -> None:
        """Replace the bound gateway; None unbinds it"""
        logger.debug(f"Binding checkout to {gateway!r}")
        self._gateway = gateway

    def process_checkout(self, amount: Amount) -> None:
        """
        Route a checkout to the bound gateway

        Args:
            amount: Amount to charge, passed to the gateway unchanged
        """
        gateway = self._gateway
        if gateway is None:
            logger.debug("Checkout attempted with no payment gateway configured")
            self.formatter.print_unconfigured()
            return

        logger.debug(f"Dispatching {amount!r} to {gateway.provider_name}")
        self.formatter.print_dispatch(gateway.provider_name)
        gateway.initiate_payment(amount)
