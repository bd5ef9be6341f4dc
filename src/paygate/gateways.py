"""
Payment gateways for different payment providers
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type

from .exceptions import GatewayError
from .formatter import Amount, PaymentFormatter

logger = logging.getLogger(__name__)


class PaymentGateway(ABC):
    """
    Abstract base class for payment gateways

    This defines the interface that all gateways must implement,
    allowing a checkout to switch providers at runtime.
    """

    def __init__(self, formatter: Optional[PaymentFormatter] = None):
        """
        Initialize with the formatter payments are reported through

        Args:
            formatter: Output sink, a default console formatter if omitted
        """
        self._formatter = formatter or PaymentFormatter()

    @property
    def formatter(self) -> PaymentFormatter:
        return self._formatter

    @abstractmethod
    def initiate_payment(self, amount: Amount) -> None:
        """
        Process a payment and report it

        Args:
            amount: Amount to charge, passed through without validation
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Display name of the provider"""
        pass

    @property
    @abstractmethod
    def currency_symbol(self) -> str:
        """Currency symbol used when reporting a payment"""
        pass

    def _report(self, amount: Amount) -> None:
        logger.debug(f"{self.provider_name} processing {amount!r}")
        self._formatter.print_payment(self.provider_name, self.currency_symbol, amount)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class StripePayment(PaymentGateway):
    """Provider for Stripe, reporting in US dollars"""

    def initiate_payment(self, amount: Amount) -> None:
        self._report(amount)

    @property
    def provider_name(self) -> str:
        return "Stripe"

    @property
    def currency_symbol(self) -> str:
        return "$"


class RazorpayPayment(PaymentGateway):
    """Provider for Razorpay, reporting in Indian rupees"""

    def initiate_payment(self, amount: Amount) -> None:
        self._report(amount)

    @property
    def provider_name(self) -> str:
        return "Razorpay"

    @property
    def currency_symbol(self) -> str:
        return "₹"


class PayPalPayment(PaymentGateway):
    """Provider for PayPal, reporting in US dollars"""

    def initiate_payment(self, amount: Amount) -> None:
        self._report(amount)

    @property
    def provider_name(self) -> str:
        return "PayPal"

    @property
    def currency_symbol(self) -> str:
        return "$"


_GATEWAYS: Dict[str, Type[PaymentGateway]] = {
    "stripe": StripePayment,
    "razorpay": RazorpayPayment,
    "paypal": PayPalPayment,
}


def available_gateways() -> List[str]:
    """Identifiers accepted by create_gateway, in registration order"""
    return list(_GATEWAYS)


def create_gateway(name: str, formatter: Optional[PaymentFormatter] = None) -> PaymentGateway:
    """
    Factory function to create the appropriate payment gateway

    Args:
        name: Gateway identifier ("stripe", "razorpay" or "paypal", any case)
        formatter: Output sink shared with the gateway

    Returns the matching PaymentGateway instance
    """
    gateway_cls = _GATEWAYS.get(name.strip().lower())
    if gateway_cls is None:
        raise GatewayError(
            f"Unknown payment gateway: {name!r}. Choose one of: {', '.join(available_gateways())}"
        )
    return gateway_cls(formatter)
