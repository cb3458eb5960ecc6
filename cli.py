import logging

import click

from config.constants import AmortizationMethod, SUMMARY_LABELS
from config.settings import (
    DEFAULT_INSURANCE_RATE,
    DEFAULT_WITHDRAWAL_RATE,
    LOG_LEVEL,
)
from core.calculator import generate_schedule, schedule_frame
from core.comparison import compare_methods
from core.errors import InvalidArgument
from core.investment import capital_for_withdrawal, compound_growth, growth_frame, yearly_growth


def _loan_options(func):
    func = click.option('--insurance-rate', type=float, default=0.0, show_default=True,
                        help='Yearly insurance rate (%) over the financed amount')(func)
    func = click.option('--periods', type=int, required=True, help='Loan term in months')(func)
    func = click.option('--annual-rate', type=float, required=True, help='Annual interest rate (%)')(func)
    func = click.option('--principal', type=float, required=True, help='Loan principal')(func)
    return func


def _echo_schedule(method, principal, annual_rate, periods, insurance_rate):
    try:
        rows = generate_schedule(method, principal, annual_rate, periods, insurance_rate)
    except InvalidArgument as e:
        raise click.UsageError(str(e))
    click.echo(schedule_frame(rows).to_csv(index=False))


@click.group()
@click.option('--verbose', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """Financial calculators: loan schedules and investment projections."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else LOG_LEVEL,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


@cli.command()
@_loan_options
def price(principal, annual_rate, periods, insurance_rate):
    """Generates a PRICE (fixed installment) schedule and outputs it as CSV."""
    _echo_schedule(AmortizationMethod.PRICE, principal, annual_rate, periods, insurance_rate)


@cli.command()
@_loan_options
def sac(principal, annual_rate, periods, insurance_rate):
    """Generates a SAC (constant amortization) schedule and outputs it as CSV."""
    _echo_schedule(AmortizationMethod.SAC, principal, annual_rate, periods, insurance_rate)


@cli.command()
@click.option('--principal', type=float, required=True, help='Loan principal')
@click.option('--annual-rate', type=float, required=True, help='Annual interest rate (%)')
@click.option('--periods', type=int, required=True, help='Loan term in months')
@click.option('--insurance-rate', type=float, default=DEFAULT_INSURANCE_RATE, show_default=True,
              help='Yearly insurance rate (%) over the financed amount')
def compare(principal, annual_rate, periods, insurance_rate):
    """Compares SAC and PRICE for the same loan."""
    try:
        result = compare_methods(principal, annual_rate, periods, insurance_rate)
    except InvalidArgument as e:
        raise click.UsageError(str(e))

    for method in AmortizationMethod:
        summary = result[method.value]
        click.echo(f"--- {method.label} ---")
        for key, label in SUMMARY_LABELS.items():
            click.echo(f"{label}: {summary[key]:.2f}")
        click.echo("")
    click.echo(f"Interest saved with SAC: {result['interest_saved']:.2f}")


@cli.command()
@click.option('--initial', type=float, default=0.0, show_default=True, help='Initial amount')
@click.option('--monthly', type=float, default=0.0, show_default=True, help='Monthly contribution')
@click.option('--annual-rate', type=float, required=True, help='Annual rate of return (%)')
@click.option('--years', type=float, required=True, help='Horizon in years (fractions allowed)')
@click.option('--yearly/--monthly-points', default=True, help='Print one row per year or every month')
def growth(initial, monthly, annual_rate, years, yearly):
    """Projects compound growth with monthly contributions and outputs it as CSV."""
    try:
        projection = compound_growth(initial, monthly, annual_rate, years)
    except InvalidArgument as e:
        raise click.UsageError(str(e))

    frame = yearly_growth(projection) if yearly else growth_frame(projection)
    click.echo(frame.to_csv(index=False))
    click.echo(f"Total: {projection.total:.2f}")
    click.echo(f"Total invested: {projection.total_invested:.2f}")
    click.echo(f"Total interest: {projection.total_interest:.2f}")
    click.echo(f"Monthly rate: {projection.monthly_rate_percent:.4f}%")
    click.echo(f"Yield on cost: {projection.yield_on_cost:.4f}")


@cli.command('withdrawal-capital')
@click.option('--monthly-cost', type=float, required=True, help='Desired monthly income')
@click.option('--withdrawal-rate', type=float, default=DEFAULT_WITHDRAWAL_RATE, show_default=True,
              help='Yearly safe withdrawal rate (%)')
def withdrawal_capital(monthly_cost, withdrawal_rate):
    """Calculates the capital needed to sustain a monthly cost."""
    try:
        capital = capital_for_withdrawal(monthly_cost, withdrawal_rate)
    except InvalidArgument as e:
        raise click.UsageError(str(e))
    click.echo(f"Required capital: {capital:.2f}")


if __name__ == "__main__":
    cli()
