"""
Example: switching payment gateways on a live checkout service
"""

from decimal import Decimal

from paygate import CheckoutService, PaymentGateway, create_gateway


class WalletPayment(PaymentGateway):
    """A custom gateway plugged in without touching CheckoutService"""

    def initiate_payment(self, amount):
        self._report(amount)

    @property
    def provider_name(self):
        return "Wallet"

    @property
    def currency_symbol(self):
        return "€"


service = CheckoutService()
service.process_checkout(Decimal("10.00"))  # warns: nothing bound yet

service.set_payment_gateway(create_gateway("stripe"))
service.process_checkout(Decimal("120.50"))

service.set_payment_gateway(WalletPayment())
service.process_checkout(Decimal("75.00"))
