"""
Fixed demonstration sequence for the checkout service
"""

import logging
from decimal import Decimal
from typing import Optional

from rich.console import Console

from .checkout import CheckoutService
from .formatter import PaymentFormatter
from .gateways import available_gateways, create_gateway

logger = logging.getLogger(__name__)


def run_demo(console: Optional[Console] = None) -> None:
    """
    Run the payment gateway demonstration

    The output is deterministic: the same gateways are bound and charged
    the same amounts, in the same order, on every run.

    Args:
        console: Console to write to, a default one if omitted
    """
    formatter = PaymentFormatter(console)

    stripe = create_gateway("stripe", formatter)
    razorpay = create_gateway("razorpay", formatter)
    paypal = create_gateway("paypal", formatter)

    formatter.print_header("=== Payment Gateway Demo ===")

    logger.debug("Running checkout section")
    formatter.print_header("\n1. Checkout (Strategy Pattern):")
    service = CheckoutService(stripe, formatter)
    service.process_checkout(Decimal("120.50"))

    service.set_payment_gateway(razorpay)
    service.process_checkout(Decimal("150.50"))

    logger.debug("Running provider switching section")
    formatter.print_header("\n2. Switching Providers:")
    switching = CheckoutService(formatter=formatter)
    for gateway, amount in (
        (stripe, Decimal("99.99")),
        (razorpay, Decimal("1500.00")),
        (paypal, Decimal("49.99")),
    ):
        switching.set_payment_gateway(gateway)
        switching.process_checkout(amount)

    logger.debug("Running unconfigured section")
    formatter.print_header("\n3. Unconfigured Checkout:")
    unbound = CheckoutService(formatter=formatter)
    unbound.process_checkout(Decimal("10.00"))

    formatter.print(formatter.gateway_table(
        create_gateway(name, formatter) for name in available_gateways()
    ))
