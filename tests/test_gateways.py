"""
Tests for payment gateway functionality
"""

import io
import pytest
from decimal import Decimal
from rich.console import Console

from paygate.gateways import (
    PaymentGateway,
    StripePayment,
    RazorpayPayment,
    PayPalPayment,
    available_gateways,
    create_gateway
)
from paygate.formatter import PaymentFormatter
from paygate.exceptions import GatewayError


def make_formatter():
    return PaymentFormatter(Console(file=io.StringIO(), width=120))


class TestPaymentGateway:
    """Test cases for the gateway interface"""

    def test_cannot_instantiate_interface(self):
        """Test that the abstract gateway cannot be created directly"""
        with pytest.raises(TypeError):
            PaymentGateway()

    def test_subclass_must_implement_initiate_payment(self):
        """Test that a variant without initiate_payment is still abstract"""
        class Incomplete(PaymentGateway):
            @property
            def provider_name(self):
                return "Incomplete"

            @property
            def currency_symbol(self):
                return "$"

        with pytest.raises(TypeError):
            Incomplete()

    def test_default_formatter(self):
        """Test that a gateway builds its own formatter when none is given"""
        gateway = StripePayment()
        assert isinstance(gateway.formatter, PaymentFormatter)

    def test_formatter_is_read_only(self):
        """Test that the output sink cannot be rebound after construction"""
        formatter = make_formatter()
        gateway = PayPalPayment(formatter)

        with pytest.raises(AttributeError):
            gateway.formatter = make_formatter()

        assert gateway.formatter is formatter


class TestConcreteGateways:
    """Test cases for the Stripe, Razorpay and PayPal variants"""

    def setup_method(self):
        """Set up test fixtures"""
        self.formatter = make_formatter()

    def output(self):
        return self.formatter.console.file.getvalue()

    @pytest.mark.parametrize("gateway_cls,name,symbol", [
        (StripePayment, "Stripe", "$"),
        (RazorpayPayment, "Razorpay", "₹"),
        (PayPalPayment, "PayPal", "$"),
    ])
    def test_identity(self, gateway_cls, name, symbol):
        """Test provider names and currency symbols"""
        gateway = gateway_cls(self.formatter)
        assert gateway.provider_name == name
        assert gateway.currency_symbol == symbol

    def test_names_are_distinct(self):
        """Test that every variant reports a different name"""
        names = [create_gateway(n).provider_name for n in available_gateways()]
        assert len(set(names)) == len(names)

    def test_names_are_stable(self):
        """Test that repeated calls return the same name"""
        gateway = RazorpayPayment(self.formatter)
        assert gateway.provider_name == gateway.provider_name == "Razorpay"

    def test_stripe_payment_output(self):
        """Test the confirmation written by Stripe"""
        StripePayment(self.formatter).initiate_payment(Decimal("99.99"))
        assert "💳 Processing payment via Stripe: $99.99" in self.output()

    def test_razorpay_payment_output(self):
        """Test the confirmation written by Razorpay"""
        RazorpayPayment(self.formatter).initiate_payment(1500.0)
        assert "Processing payment via Razorpay: ₹1500.00" in self.output()

    def test_paypal_payment_output(self):
        """Test the confirmation written by PayPal"""
        PayPalPayment(self.formatter).initiate_payment(49.99)
        assert "Processing payment via PayPal: $49.99" in self.output()

    def test_zero_and_negative_amounts_pass_through(self):
        """Test that amounts are not validated"""
        gateway = StripePayment(self.formatter)
        gateway.initiate_payment(0)
        gateway.initiate_payment(Decimal("-5"))

        output = self.output()
        assert "Stripe: $0.00" in output
        assert "Stripe: $-5.00" in output

    def test_repr(self):
        """Test gateway representation"""
        assert repr(PayPalPayment(self.formatter)) == "PayPalPayment()"


class TestCreateGateway:
    """Test cases for the gateway factory"""

    def test_available_gateways(self):
        """Test registration order of gateway identifiers"""
        assert available_gateways() == ["stripe", "razorpay", "paypal"]

    @pytest.mark.parametrize("name,expected", [
        ("stripe", StripePayment),
        ("razorpay", RazorpayPayment),
        ("paypal", PayPalPayment),
    ])
    def test_create_known_gateway(self, name, expected):
        """Test creation of each registered gateway"""
        assert isinstance(create_gateway(name), expected)

    def test_create_is_case_insensitive(self):
        """Test that identifiers ignore case and surrounding whitespace"""
        assert isinstance(create_gateway("  PayPal "), PayPalPayment)

    def test_create_shares_formatter(self):
        """Test that the given formatter is attached to the gateway"""
        formatter = make_formatter()
        gateway = create_gateway("stripe", formatter)
        assert gateway.formatter is formatter

    def test_create_unknown_gateway(self):
        """Test that unknown identifiers raise GatewayError"""
        with pytest.raises(GatewayError, match="Unknown payment gateway: 'venmo'"):
            create_gateway("venmo")

    def test_create_returns_new_instances(self):
        """Test that each call builds a fresh gateway"""
        assert create_gateway("stripe") is not create_gateway("stripe")
