from pathlib import Path

import typer
import uvicorn

from .loader import RedirectConfigError, build_map, load_file

app = typer.Typer(help="Path-to-URL redirect service.")


@app.command()
def serve(host: str = "127.0.0.1", port: int = 8080):
    """Run the redirect service."""
    uvicorn.run("urlshort.main:application", host=host, port=port)


@app.command()
def check(redirect_file: Path):
    """Decode a YAML/JSON redirect file and print the resulting table."""
    try:
        table = build_map(load_file(redirect_file))
    except RedirectConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    for path, url in table.items():
        typer.echo(f"{path} -> {url}")


if __name__ == "__main__":
    app()
