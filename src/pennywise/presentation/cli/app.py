"""Pennywise CLI application using Typer.

Command-line utilities for operating the backend: secret generation,
database initialization, local access tokens and a monthly spending report.
"""

import asyncio
import secrets
from datetime import date, datetime, timedelta
from typing import Optional
from uuid import UUID

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from pennywise.application.dtos.reporting import MonthlySummaryResult
from pennywise.application.ports.identity import CurrentUser
from pennywise.application.queries.reporting import MonthlySpendingSummaryQuery
from pennywise.infrastructure.persistence.sqlalchemy.adapters.reporting import (
    SqlAlchemyExpenseStore,
)
from pennywise.infrastructure.persistence.sqlalchemy.init_db import create_tables
from pennywise_auth import JWTService
from pennywise_config.settings import get_settings

app = typer.Typer(
    name="pennywise",
    help="Pennywise - personal budgeting backend CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
db_app = typer.Typer(name="db", help="Database utilities", no_args_is_help=True)
token_app = typer.Typer(
    name="token",
    help="Access tokens for local development",
    no_args_is_help=True,
)
report_app = typer.Typer(name="report", help="Spending reports", no_args_is_help=True)
app.add_typer(secrets_app)
app.add_typer(db_app)
app.add_typer(token_app)
app.add_typer(report_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Pennywise configuration.

    - JWT_SECRET_KEY: signing secret (only for local setups without an
      identity provider; otherwise use the provider's secret)
    - POSTGRES_PASSWORD: database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Pennywise Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n",
    )

    # 64 bytes for a strong HS256 secret
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={secrets.token_urlsafe(64)}")
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={secrets.token_urlsafe(32)}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]",
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n",
    )


@db_app.command("init")
def init_database() -> None:
    """Create missing database tables (existing data is left alone)."""
    asyncio.run(create_tables())
    console.print("[green]Database schema is up to date.[/green]")


@token_app.command("issue")
def issue_token(
    user_id: UUID = typer.Argument(..., help="User id to put in the 'sub' claim"),
    email: str = typer.Option("dev@example.com", help="Email claim"),
    hours: int = typer.Option(1, min=1, help="Hours until the token expires"),
) -> None:
    """Mint an access token signed with the configured secret."""
    settings = get_settings()
    service = JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        audience=settings.jwt_audience,
        algorithm=settings.jwt_algorithm,
    )
    token = service.create_access_token(
        user_id,
        email,
        expires_delta=timedelta(hours=hours),
    )
    typer.echo(token)


def _parse_date(value: Optional[str], option: str) -> Optional[date]:
    if value is None:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        console.print(f"[red]{option} must be YYYY-MM-DD, got '{value}'[/red]")
        raise typer.Exit(1) from None


async def _load_monthly_summary(
    user_id: UUID,
    start_date: Optional[date],
    end_date: Optional[date],
) -> MonthlySummaryResult:
    engine = create_async_engine(get_settings().database_url)
    try:
        session_maker = async_sessionmaker(engine, class_=AsyncSession)
        async with session_maker() as session:
            query = MonthlySpendingSummaryQuery(
                expense_store=SqlAlchemyExpenseStore(session),
                current_user=CurrentUser(user_id=user_id, email=""),
            )
            return await query.execute(start_date=start_date, end_date=end_date)
    finally:
        await engine.dispose()


def render_monthly_summary(result: MonthlySummaryResult) -> Table:
    """Build a rich table with one line per (month, category)."""
    table = Table(title="Monthly spending")
    table.add_column("Month")
    table.add_column("Category")
    table.add_column("Transactions", justify="right")
    table.add_column("Total", justify="right")

    for row in result.rows:
        table.add_row(
            row.month_key,
            f"[{row.category_color}]{row.category_name}[/]",
            str(row.transaction_count),
            f"{row.total_spent:.2f}",
        )

    table.add_section()
    table.add_row(
        "",
        "[bold]Total[/bold]",
        str(result.transaction_count),
        f"[bold]{result.total_spent:.2f}[/bold]",
    )
    return table


@report_app.command("monthly")
def monthly_report(
    user_id: UUID = typer.Argument(..., help="User whose expenses to report"),
    start: Optional[str] = typer.Option(None, help="First day (YYYY-MM-DD)"),
    end: Optional[str] = typer.Option(None, help="Last day (YYYY-MM-DD)"),
) -> None:
    """Print monthly totals per category for one user."""
    start_date = _parse_date(start, "--start")
    end_date = _parse_date(end, "--end")

    result = asyncio.run(_load_monthly_summary(user_id, start_date, end_date))
    if not result.rows:
        console.print("[dim]No expenses in this window.[/dim]")
        return

    console.print(render_monthly_summary(result))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
