import click
from decimal import Decimal

from config.constants import AccrualBasis, PaymentFrequency, PaymentType
from config.settings import AMOUNT_PRECISION, TERM_PRECISION
from core.calculator import (
    generate_amortization_schedule,
    schedule_to_dataframe,
    summarize_schedule,
)
from core.errors import AmortizationError
from core.schedule_generator import generate_payment_dates
from core.term_calculator import calculate_term
from data_manager.json_handler import load_request
from data_manager.schema import PaymentSchedule
from utils.formatters import fmt_amount, round_amount
from utils.logging_config import setup_logging

ISO_DATE = click.DateTime(formats=['%Y-%m-%d'])


@click.group()
@click.option('--verbose', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """A CLI for the loan amortization calculator."""
    setup_logging('DEBUG' if verbose else None)


@cli.command('schedule')
@click.option('--input', 'input_file', type=click.Path(exists=True, dir_okay=False), required=True, help='Path to the request JSON file')
@click.option('--format', 'output_format', type=click.Choice(['csv', 'json']), default='csv', help='Output format')
@click.option('--places', type=int, default=AMOUNT_PRECISION, help='Decimal places for amounts')
@click.option('--summary', is_flag=True, help='Print totals after the schedule')
def schedule_command(input_file, output_format, places, summary):
    """Generates an amortization schedule from a loan/payment-schedule JSON file."""
    try:
        loan, payment_schedules = load_request(input_file)
        items = generate_amortization_schedule(loan, payment_schedules)
    except AmortizationError as exc:
        raise click.ClickException(str(exc)) from exc

    df = schedule_to_dataframe(items, places)
    if output_format == 'json':
        click.echo(df.to_json(orient='records', force_ascii=False))
    else:
        click.echo(df.to_csv(index=False), nl=False)

    if summary:
        s = summarize_schedule(items)
        click.echo(f"Payments: {s.payment_count}", err=True)
        click.echo(f"Total interest: {fmt_amount(s.total_interest, places)}", err=True)
        click.echo(f"Total principal: {fmt_amount(s.total_principal, places)}", err=True)
        click.echo(f"Total payment: {fmt_amount(s.total_payment, places)}", err=True)
        click.echo(f"Payoff date: {s.payoff_date}", err=True)


@cli.command('term')
@click.option('--start-date', type=ISO_DATE, required=True, help='Start date (YYYY-MM-DD)')
@click.option('--end-date', type=ISO_DATE, required=True, help='End date (YYYY-MM-DD)')
@click.option('--accrual-basis', type=click.Choice([e.value for e in AccrualBasis]), default=AccrualBasis.ACTUAL_ACTUAL.value, help='Day count convention')
def term_command(start_date, end_date, accrual_basis):
    """Calculates the fractional-year accrual term between two dates."""
    try:
        term = calculate_term(start_date.date(), end_date.date(), AccrualBasis(accrual_basis))
    except AmortizationError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"{round_amount(term, TERM_PRECISION)}")


@cli.command('dates')
@click.option('--start-date', type=ISO_DATE, required=True, help='First payment date (YYYY-MM-DD)')
@click.option('--end-date', type=ISO_DATE, help='Last possible payment date (YYYY-MM-DD)')
@click.option('--frequency', type=click.Choice([e.value for e in PaymentFrequency]), required=True, help='Payment frequency')
@click.option('--payment-type', type=click.Choice([e.value for e in PaymentType]), default=PaymentType.INTEREST_ONLY.value, help='Payment type')
def dates_command(start_date, end_date, frequency, payment_type):
    """Lists the payment dates generated by a single payment schedule."""
    start = start_date.date()
    schedule = PaymentSchedule(
        start_date=start,
        end_date=end_date.date() if end_date else start,
        payment_frequency=PaymentFrequency(frequency),
        payment_type=PaymentType(payment_type),
        payment_amount=Decimal(0),
    )
    try:
        dates = generate_payment_dates(schedule)
    except AmortizationError as exc:
        raise click.ClickException(str(exc)) from exc
    for d in dates:
        click.echo(d.isoformat())


if __name__ == "__main__":
    cli()
