"""Command-line front end: prompts for a key and ciphertext, prints the
decrypted plaintext."""

import click
from . import decoder, inverter, parsing
from .errors import HillCipherError, InvalidKeyError
from .matrices import Matrix3, determinant
from .utils import CRT_MODULI, PADDING_LETTER


def echo_matrix(title: str, matrix: Matrix3) -> None:
    click.echo(f"{title}:")
    for row in matrix.tolist():
        click.echo("  " + " ".join(f"{value:3d}" for value in row))


def _parse_key(
    ctx: click.Context, param: click.Parameter, value: str
) -> Matrix3:
    try:
        return parsing.parse_key(value)
    except InvalidKeyError as e:
        raise click.BadParameter(str(e)) from e


def _validate_padding(
    ctx: click.Context, param: click.Parameter, value: str
) -> str:
    if not parsing.is_letter(value):
        raise click.BadParameter("must be a single letter A-Z.")
    return value.upper()


@click.command
@click.option(
    "--key",
    prompt="Enter 9-letter key (row-major, A-Z)",
    type=str,
    callback=_parse_key,
    help="Nine key letters, row-major; other characters are ignored.",
)
@click.option(
    "--ciphertext",
    prompt="Enter ciphertext (any text; non-letters ignored)",
    type=str,
    help="Text to decrypt.",
)
@click.option(
    "--padding",
    default=PADDING_LETTER,
    envvar="HILL_CRT_PADDING",
    show_default=True,
    callback=_validate_padding,
    help="Letter used to fill the last block.",
)
@click.option(
    "--verbose", is_flag=True, help="Show the key and inverse matrices."
)
def decrypt(
    key: Matrix3, ciphertext: str, padding: str, verbose: bool
) -> None:
    try:
        if verbose:
            echo_matrix("Key matrix", key)
            det = determinant(key)
            residues = ", ".join(f"{det % m} (mod {m})" for m in CRT_MODULI)
            click.echo(f"Determinant: {det} = {residues}")
        inverse_key = inverter.invert_key(key)
        if verbose:
            echo_matrix("Inverse key matrix (mod 26)", inverse_key)
        plaintext = decoder.decrypt(ciphertext, inverse_key, padding)
    except HillCipherError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Decrypted plaintext (uppercase): {plaintext}")


if __name__ == "__main__":
    decrypt()
