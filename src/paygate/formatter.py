"""
Rich text formatter for checkout and payment output
"""

from decimal import Decimal
from enum import Enum
from typing import Iterable, Optional, Union

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .exceptions import FormattingError

Amount = Union[float, int, Decimal]


class LineKind(Enum):
    """Kinds of lines written during a checkout"""
    HEADER = "header"
    DISPATCH = "dispatch"
    PAYMENT = "payment"
    WARNING = "warning"


class PaymentFormatter:
    """
    Formatter for checkout output with rich text features
    """

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize the formatter
        """
        self.console = console or Console()

        # Color scheme for different line kinds
        self.colors = {
            LineKind.HEADER: "bold",
            LineKind.DISPATCH: "dim white",
            LineKind.PAYMENT: "green",
            LineKind.WARNING: "yellow",
        }

    @staticmethod
    def format_amount(amount: Amount) -> str:
        """
        Render an amount with two decimals, keeping its sign.

        The amount is never validated: zero and negative values are shown as-is.
        """
        try:
            return f"{amount:.2f}"
        except (TypeError, ValueError) as e:
            raise FormattingError(f"Cannot format amount {amount!r}: {e}") from e

    def section_header(self, title: str) -> Text:
        """Header line for a demonstration section"""
        return Text(title, style=self.colors[LineKind.HEADER])

    def dispatch_line(self, provider: str) -> Text:
        """Line announcing which gateway a checkout is routed to"""
        return Text(f"Using {provider}...", style=self.colors[LineKind.DISPATCH])

    def payment_line(self, provider: str, symbol: str, amount: Amount) -> Text:
        """
        Confirmation line for a processed payment

        Args:
            provider: display name of the gateway
            symbol: currency symbol the gateway reports in
            amount: amount passed to the gateway, unchanged

        Returns a Rich Text object with the formatted confirmation
        """
        line = Text()
        line.append("💳 Processing payment via ")
        line.append(provider, style="bold")
        line.append(": ")
        line.append(f"{symbol}{self.format_amount(amount)}", style=self.colors[LineKind.PAYMENT])
        return line

    def unconfigured_line(self) -> Text:
        """Warning line for a checkout with no gateway bound"""
        return Text("⚠️  No payment gateway configured!", style=self.colors[LineKind.WARNING])

    def gateway_table(self, gateways: Iterable) -> Panel:
        """
        Summary panel listing gateways with their currency symbols
        Returns a Rich Panel containing the table
        """
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column(style="green")

        for gateway in gateways:
            table.add_row(gateway.provider_name, gateway.currency_symbol)

        return Panel(
            table,
            title="[bold]Available Gateways[/bold]",
            border_style="dim"
        )

    def print(self, renderable) -> None:
        """Write a renderable to the console"""
        try:
            self.console.print(renderable)
        except Exception as e:
            raise FormattingError(f"Failed to write output: {e}") from e

    def print_header(self, title: str) -> None:
        self.print(self.section_header(title))

    def print_dispatch(self, provider: str) -> None:
        self.print(self.dispatch_line(provider))

    def print_payment(self, provider: str, symbol: str, amount: Amount) -> None:
        self.print(self.payment_line(provider, symbol, amount))

    def print_unconfigured(self) -> None:
        self.print(self.unconfigured_line())
