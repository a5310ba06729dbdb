"""Text rendering of deposit reports."""

from decimal import ROUND_HALF_EVEN, Decimal

from depositrack.domain.entities import AMOUNT_QUANTUM, DepositReport


def format_amount(amount: Decimal) -> str:
    """Render an amount with exactly 8 decimal places."""
    return f"{Decimal(amount).quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_EVEN):f}"


def format_report(report: DepositReport) -> list[str]:
    """Render a deposit report as display lines."""
    lines = [
        f"Deposited for {deposit.name}: count={deposit.count} sum={format_amount(deposit.sum)}"
        for deposit in report.known_deposits
    ]
    unknown = report.unknown_deposits
    lines.append(
        f"Deposited without reference: count={unknown.count} sum={format_amount(unknown.sum)}"
    )
    lines.append(f"Smallest valid deposit: {format_amount(report.min)}")
    lines.append(f"Largest valid deposit: {format_amount(report.max)}")
    return lines
