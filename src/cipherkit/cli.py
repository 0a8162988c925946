from __future__ import annotations

import json
import logging

import typer

from cipherkit.classical import register_all
from cipherkit.classical.polyalphabetic.otp import generate_pad
from cipherkit.core.alphabet import TABLE
from cipherkit.core.errors import CipherError
from cipherkit.core.registry import describe_plugins, run

app = typer.Typer(
    help="cipherkit: Caesar, Vigenère and one-time-pad ciphers over A-Z plus space. "
    "For teaching only; none of these ciphers is secure."
)


@app.callback()
def _init(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr."),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # Register plugins exactly once per CLI run
    register_all()


@app.command()
def ciphers():
    """List all registered ciphers."""
    for name, description in describe_plugins():
        typer.echo(f"{name:10s} {description}".rstrip())


@app.command()
def table():
    """Show the symbol/index table."""
    for index, symbol in TABLE.items():
        shown = "<space>" if symbol == " " else symbol
        typer.echo(f"{index:2d}  {shown}")


def _run(operation: str, cipher: str, key: str, text: str, as_json: bool) -> None:
    try:
        result = run(cipher, operation, key, text)
    except CipherError as e:
        raise typer.BadParameter(str(e))

    if as_json:
        typer.echo(json.dumps(result.to_dict()))
    else:
        typer.echo(result.text)


@app.command()
def encrypt(
    cipher: str = typer.Option(..., "--cipher", "-c", help="Cipher name (caesar, vigenere, otp)."),
    key: str = typer.Option(..., "--key", "-k", help="Key made of A-Z and spaces."),
    text: str = typer.Argument(..., help="Plaintext to encrypt."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
):
    """Encrypt TEXT with a known cipher and key."""
    _run("encrypt", cipher, key, text, as_json)


@app.command()
def decrypt(
    cipher: str = typer.Option(..., "--cipher", "-c", help="Cipher name (caesar, vigenere, otp)."),
    key: str = typer.Option(..., "--key", "-k", help="Key made of A-Z and spaces."),
    text: str = typer.Argument(..., help="Ciphertext to decrypt."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
):
    """Decrypt TEXT with a known cipher and key."""
    _run("decrypt", cipher, key, text, as_json)


@app.command()
def pad(
    length: int = typer.Argument(..., min=0, help="Number of symbols in the pad."),
):
    """Print a random one-time-pad key."""
    # Quoted so leading/trailing spaces survive copy and paste
    typer.echo(json.dumps(generate_pad(length)))


def main():
    app()


if __name__ == "__main__":
    main()
