"""Command-line interface: print the weekly board, roster and orders.

Usage:
    escala week [--department ID] [--date YYYY-MM-DD]
    escala roster
    escala orders
    escala delete-order ID
    escala dashboard --username USER --password PASS

Admin commands log in with --email/--password, or ESCALA_ADMIN_EMAIL and
ESCALA_ADMIN_PASSWORD from the environment (.env is loaded).
"""

import argparse
import asyncio
import sys
from datetime import date
from typing import Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import logger as log
from .config.env import get_admin_credentials, get_log_level
from .container import get_container, set_container
from .errors import EscalaError
from .repositories.http.factory import create_http_container
from .session import login_admin, login_collaborator, logout, require_admin
from .store import delete_order, load_snapshot
from .views import employee_roster, load_collaborator_dashboard, order_list, week_board

console = Console()


def _collaborator_names(department: dict) -> str:
    return ", ".join(escape(c["name"]) for c in department["collaborators"]) or "-"


def _department_line(department: dict) -> str:
    line = f"{escape(department['name'])} ({department['window']})"
    if "collaborators" in department:
        line += f": {_collaborator_names(department)}"
    return line


def print_week(board: list[dict]) -> None:
    table = Table(title="Escala Semanal", show_lines=True)
    for column in board:
        table.add_column(f"{column['label']}\n{column['date']}", overflow="fold")

    cells = []
    for column in board:
        if not column["orders"]:
            cells.append("[dim]Nenhuma ordem de serviço[/dim]")
            continue
        parts = []
        for order in column["orders"]:
            lines = [f"[bold]OS: {escape(order['os_number'])}[/bold]"]
            for dept in order["departments"]:
                lines.append(f"[{dept['color']}]{escape(dept['name'])}[/] {dept['window']}")
                lines.append(f"  {_collaborator_names(dept)}")
            parts.append("\n".join(lines))
        cells.append("\n\n".join(parts))
    table.add_row(*cells)
    console.print(table)


def print_roster(rows: list[dict]) -> None:
    table = Table(title="Colaboradores")
    table.add_column("ID", justify="right")
    table.add_column("Nome")
    table.add_column("Usuário")
    table.add_column("Status")
    table.add_column("Setores atuais")
    table.add_column("Horários")

    for row in rows:
        color = "red" if row["status"] == "unavailable" else "green"
        if row["schedule_valid"]:
            schedule = "\n".join(f"{day}: {', '.join(slots)}" for day, slots in row["schedule"])
        else:
            schedule = f"[red]{row['schedule']}[/red]"
        table.add_row(
            str(row["id"]),
            escape(row["name"]),
            escape(row["username"]),
            f"[{color}]{row['status_label']}[/{color}]",
            escape(", ".join(row["working_departments"])) or "-",
            schedule or "-",
        )
    console.print(table)


def print_orders(orders: list[dict], title: str = "Ordens de Serviço") -> None:
    table = Table(title=title, show_lines=True)
    table.add_column("ID", justify="right")
    table.add_column("OS")
    table.add_column("Dias")
    table.add_column("Setores")

    for order in orders:
        departments = "\n".join(
            _department_line(dept) for dept in order["departments"]
        )
        table.add_row(
            str(order["id"]),
            escape(order["os_number"]),
            ", ".join(order["days"]),
            departments or "-",
        )
    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="escala", description="Escala semanal de ordens de serviço")
    parser.add_argument("--api-url", help="API base URL (default: ESCALA_API_URL)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")

    admin = argparse.ArgumentParser(add_help=False)
    admin.add_argument("--email", help="admin email (default: ESCALA_ADMIN_EMAIL)")
    admin.add_argument("--password", help="admin password (default: ESCALA_ADMIN_PASSWORD)")

    sub = parser.add_subparsers(dest="command", required=True)

    week = sub.add_parser("week", parents=[admin], help="weekly board")
    week.add_argument("--department", type=int, help="department id filter")
    week.add_argument("--date", type=date.fromisoformat, help="any date in the week to show")

    sub.add_parser("roster", parents=[admin], help="employees with busy/available status")
    sub.add_parser("orders", parents=[admin], help="all service orders")

    delete = sub.add_parser("delete-order", parents=[admin], help="delete a service order")
    delete.add_argument("order_id", type=int)

    dashboard = sub.add_parser("dashboard", help="a collaborator's own orders")
    dashboard.add_argument("--username", required=True)
    dashboard.add_argument("--password", required=True)
    return parser


async def run(args: argparse.Namespace) -> None:
    if args.command == "dashboard":
        session = await login_collaborator(args.username, args.password)
        data = await load_collaborator_dashboard(session)
        console.print(f"[bold]{escape(data['employee']['name'])}[/bold]")
        print_orders(data["orders"], title="Minhas Ordens de Serviço")
        logout(session)
        return

    default_email, default_password = get_admin_credentials()
    session = login_admin(args.email or default_email, args.password or default_password)
    require_admin(session)

    snapshot = await load_snapshot()
    if args.command == "week":
        print_week(week_board(snapshot, args.department, args.date))
    elif args.command == "roster":
        print_roster(employee_roster(snapshot))
    elif args.command == "orders":
        print_orders(order_list(snapshot))
    elif args.command == "delete-order":
        snapshot = await delete_order(snapshot, args.order_id)
        console.print(f"[green]OS {args.order_id} excluída[/green]")
        print_orders(order_list(snapshot))
    logout(session)


async def _main(args: argparse.Namespace) -> None:
    set_container(create_http_container(args.api_url))
    try:
        await run(args)
    finally:
        await get_container().aclose()


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    log.set_level("debug" if args.verbose else get_log_level())

    try:
        asyncio.run(_main(args))
    except EscalaError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
