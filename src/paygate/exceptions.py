"""
Exceptions raised by paygate
"""


class PaygateError(Exception):
    """Base for every paygate error"""
    pass


class GatewayError(PaygateError):
    """No payment gateway is registered under the requested name"""
    pass


class FormattingError(PaygateError):
    """An amount or checkout line could not be written to the console"""
    pass
