import typer

from blockgrid.cli.commands.generate import generate_command
from blockgrid.cli.commands.preview import preview_command

app = typer.Typer(help="LED layout generator for perimeter-lit block grids.")

app.command(name="generate")(generate_command)
app.command(name="preview")(preview_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
