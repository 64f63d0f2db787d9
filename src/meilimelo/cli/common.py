"""Shared CLI utilities and decorators."""

import logging
import functools
import typer
from typing import Callable
from rich.console import Console

from ..errors import InvalidQueryError, UpstreamError

console = Console()
logger = logging.getLogger("meilimelo")

# Reusable option definitions
host_option = typer.Option(None, "--host", help="MeiliSearch URL (default: $MEILI_HOST or http://localhost:7700)")
key_option = typer.Option(None, "--key", help="Secret key (default: $MEILI_API_KEY)")
config_option = typer.Option(None, "--config", help="YAML configuration file")
timeout_option = typer.Option(None, "--timeout", help="Request timeout in seconds")
json_output_option = typer.Option(False, "--json", help="Emit JSON output")

# Output format options
table_output_option = typer.Option(False, "--table", help="Force table output (default when no format specified)")
xml_output_option = typer.Option(False, "--xml", help="Emit XML output")


def check_single_format(*flags: bool) -> None:
    """Exit when more than one output format was requested."""
    if sum(flags) > 1:
        console.print("[red]Error: Cannot specify more than one output format[/red]")
        raise typer.Exit(1)


def with_error_handling(func: Callable) -> Callable:
    """Decorator to add consistent error handling to CLI commands."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except InvalidQueryError as e:
            logger.debug(f"{func.__name__} rejected: %s", e)
            console.print(f"[red]Query rejected ({e.error.kind}/{e.error.code}): {e.error.message}[/red]")
            console.print(f"[dim]{e.error.link}[/dim]")
            raise typer.Exit(1)
        except UpstreamError as e:
            logger.debug(f"{func.__name__} failed upstream", exc_info=e.cause)
            console.print(f"[red]Upstream error: {e.cause}[/red]")
            raise typer.Exit(1)
        except Exception as e:
            logger.exception(f"{func.__name__} failed: %s", e)
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)
    return wrapper
