__version__ = "0.1.0"

# Package metadata
__description__ = "Payment gateway strategy pattern with a swappable checkout service"

# Public API
from .checkout import CheckoutService
from .formatter import PaymentFormatter
from .gateways import (
    PaymentGateway,
    StripePayment,
    RazorpayPayment,
    PayPalPayment,
    available_gateways,
    create_gateway
)
from .demo import run_demo
from .exceptions import (
    PaygateError,
    GatewayError,
    FormattingError
)

__all__ = [
    # Version
    "__version__",

    # Main classes
    "CheckoutService",
    "PaymentFormatter",

    # Gateway system
    "PaymentGateway",
    "StripePayment",
    "RazorpayPayment",
    "PayPalPayment",
    "available_gateways",
    "create_gateway",

    # Demonstration
    "run_demo",

    # Exceptions
    "PaygateError",
    "GatewayError",
    "FormattingError"
]
