"""CLI entry point using Typer."""
import typer

from hotel_app.config import settings, setup_logging
from hotel_app.dependencies import create_services

app = typer.Typer(
    name="hotel-reservation",
    help="Hotel room reservation system.",
    add_completion=False,
)


@app.command()
def menu():
    """Run the interactive text menu."""
    from rich.console import Console
    from hotel_app.menu import MainMenu

    setup_logging(settings)
    console = Console()
    services = create_services(settings)
    MainMenu(services, console).display_menu()


@app.command()
def seed():
    """Populate test data into a fresh store and print a summary."""
    from rich.console import Console
    from hotel_app.seed import populate_test_data

    setup_logging(settings)
    console = Console()
    services = create_services(settings)
    report = populate_test_data(services.hotel_resource, services.admin_resource, settings)

    console.print("\n[bold]Test data populated[/bold]")
    console.print(f"  Customers:    {report.customers_added} added, {report.customers_skipped} skipped")
    console.print(f"  Rooms:        {report.rooms_added} added, {report.rooms_skipped} skipped")
    console.print(f"  Reservations: {report.reservations_booked} booked\n")
    services.admin_resource.display_all_reservations(console.file)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "hotel_app.main:build_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    app()
