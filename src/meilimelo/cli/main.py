"""Main CLI entry point for meilimelo."""

import typer
from dotenv import load_dotenv

from ..utils.logging import setup_logging
from .commands import documents, indexes, search

# Load .env file at startup
load_dotenv()

app = typer.Typer(help="MeiliSearch command-line client")


@app.callback()
def _configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging (DEBUG)."),
):
    """Configure logging before executing a subcommand."""
    setup_logging(verbose=verbose)


# Register search commands
app.command()(search.search)

# Register index commands
app.command("indexes")(indexes.list_indexes)
app.command("create-index")(indexes.create_index)
app.command("delete-index")(indexes.delete_index)

# Register document commands
app.command("documents")(documents.list_documents)
app.command("get-document")(documents.get_document)
app.command("delete-document")(documents.delete_document)
app.command()(documents.insert)


if __name__ == "__main__":
    app()
