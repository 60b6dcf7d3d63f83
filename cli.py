# cli.py - interactive product catalog console
import os
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from catalogsdk.pycatalog import CatalogClient

console = Console()
c = CatalogClient(
    base_url=os.getenv("CATALOG_URL", "http://127.0.0.1:3000"),
    token=os.getenv("CATALOG_TOKEN"),
    api_key=os.getenv("CATALOG_API_KEY"),
)


# Global state for status messages and caching
status_message = "Ready"
product_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]]):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title="📦 Product Catalog",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=15)
    table.add_column("In stock", justify="center", width=9)
    table.add_column("Description", width=30)

    for p in products:
        in_stock = "[green]yes[/green]" if p.get("inStock") else "[red]no[/red]"
        table.add_row(
            p.get("id", "N/A"),
            p.get("name", "N/A"),
            f"${p.get('price', 0):.2f}",
            p.get("category") or "-",
            in_stock,
            p.get("description") or "",
        )
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


def _error_message(e: Exception) -> str:
    # requests.HTTPError carries the server's JSON body
    response = getattr(e, "response", None)
    if response is not None:
        try:
            body = response.json()
            return f"HTTP {response.status_code}: {body.get('message', body)}"
        except ValueError:
            return f"HTTP {response.status_code}: {response.text}"
    return str(e)


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """Call ``fn`` behind a spinner; print and record the outcome, return None on failure."""
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except Exception as e:
        status_message = f"Error: {_error_message(e)}"
        console.print(show_status(status_message, False))
        return None


# ---------------------------
# Autocompletion helpers
# ---------------------------
def refresh_product_cache():
    global product_cache
    listing = try_api(c.list_products)
    product_cache = listing["products"] if listing else []
    return product_cache


def get_product_completer():
    if not product_cache:
        refresh_product_cache()
    return WordCompleter([p["id"] for p in product_cache if p.get("id")], ignore_case=True)


def get_category_completer():
    categories = {p["category"] for p in product_cache if p.get("category")}
    return WordCompleter(sorted(categories), ignore_case=True)


# ---------------------------
# Input helpers
# ---------------------------
def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: Optional[float] = None) -> Optional[float]:
    while True:
        raw = Prompt.ask(message, default="" if default is None else str(default))
        if raw == "" and default is None:
            return None
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_stock(message: str) -> Optional[bool]:
    raw = Prompt.ask(message, choices=["yes", "no", ""], default="")
    if raw == "":
        return None
    return raw == "yes"


def collect_fields(partial: bool) -> Dict[str, Any]:
    """Prompt for product fields. With ``partial`` every answer may be left blank."""
    fields: Dict[str, Any] = {}
    name = prompt_with_autocomplete("Name" + (" (blank to keep)" if partial else ""))
    if name:
        fields["name"] = name
    price = ask_float("💰 Price" + (" (blank to keep)" if partial else ""), default=None if partial else 10.0)
    if price is not None:
        fields["price"] = price
    description = prompt_with_autocomplete("Description (optional)")
    if description:
        fields["description"] = description
    category = prompt_with_autocomplete("🏷️ Category (optional)", completer=get_category_completer())
    if category:
        fields["category"] = category
    in_stock = ask_stock("In stock? (blank to " + ("keep" if partial else "default to yes") + ")")
    if in_stock is not None:
        fields["in_stock"] = in_stock
    return fields


# ---------------------------
# Layout and Header
# ---------------------------
def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Product Catalog",
        f"[bold blue]{c.base_url}[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message

    console.clear()
    console.print(create_header())
    refresh_product_cache()

    while True:
        if status_message:
            console.print(show_status(status_message, not status_message.startswith("Error")))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "4", "✏️ Update product"),
            ("2", "🔍 Filter products", "5", "🗑️ Delete product"),
            ("3", "➕ Create product", "6", "ℹ️ Get product by ID"),
            ("", "", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 7)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            listing = try_api(c.list_products, success_msg="Products loaded successfully")
            if listing is not None:
                show_products(listing["products"])

        elif choice == "2":
            category = prompt_with_autocomplete("🏷️ Category (blank for any)", completer=get_category_completer())
            in_stock = ask_stock("In stock? (blank for any)")
            listing = try_api(c.list_products, category or None, in_stock, success_msg="Filter applied")
            if listing is not None:
                show_products(listing["products"])

        elif choice == "3":
            fields = collect_fields(partial=False)
            resp = try_api(
                c.create_product,
                fields.pop("name", ""),
                fields.pop("price", None),
                success_msg="Product created",
                **fields,
            )
            if resp:
                show_products([resp["product"]])
                refresh_product_cache()

        elif choice == "4":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            fields = collect_fields(partial=True)
            resp = try_api(c.update_product, pid, success_msg=f"Product {pid} updated", **fields)
            if resp:
                show_products([resp["product"]])
                refresh_product_cache()

        elif choice == "5":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            if Confirm.ask(f"[red]Delete product {pid}?[/red]"):
                resp = try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")
                if resp:
                    refresh_product_cache()

        elif choice == "6":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            resp = try_api(c.get_product, pid, success_msg=f"Product {pid} details loaded")
            if resp:
                show_products([resp])

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Bye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


def main():
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
