# stdlib imports
import sys

# vendor imports
import click
import colorama
from colorama import Fore, Style

# local imports
from .client import KeiranClient
from .clipboard import copyToClipboard
from .exceptions import ClipboardError, KeiranError


# Initialize colorama
colorama.init()

# Paste fields in the order they are prompted for
PASTE_PROMPTS = [
    ("title", "Enter the title of the paste: "),
    ("description", "Enter the description of the paste (optional): "),
    ("content", "Enter the content of the paste: "),
    ("language", "Enter the language of the paste: "),
    ("expirationTime", "Enter the expiration time of the paste (optional): "),
    ("domain", "Enter the domain of the paste (optional): "),
]


def printError(message: str) -> None:
    """ Print an error in red and abort execution """
    click.echo(f"{Fore.RED}{message}{Style.RESET_ALL}", err=True)
    sys.exit(1)


def printWarning(message: str) -> None:
    click.echo(f"{Fore.YELLOW}Warning:{Style.RESET_ALL} {message}")


def share(result: str, done: str, label: str) -> None:
    """
    Report a successful operation and try to put its URL on the clipboard.

    A clipboard failure only produces a warning, the command still succeeds.
    """
    click.echo(f"{done} successfully. {Fore.GREEN}{label}:{Style.RESET_ALL} {result}")
    try:
        copyToClipboard(result)
    except ClipboardError as e:
        printWarning(f"Failed to copy to clipboard: {e}")
        return
    click.echo(f"{label} copied to clipboard.")


def readField(prompt: str) -> str:
    click.echo(prompt, nl=False)
    # An exhausted stdin reads as an empty answer, undecodable bytes are replaced
    line = click.get_binary_stream("stdin").readline()
    return line.decode("utf-8", errors="replace").strip()


@click.group(name="keirancli")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Upload files, create pastes and shorten URLs on keiran.cc"""
    if ctx.obj is None:
        ctx.obj = KeiranClient()


@cli.command(name="upload")
@click.argument("file", type=str)
@click.pass_obj
def cli_upload(client: KeiranClient, file: str) -> None:
    """Upload a file to the site"""
    try:
        imageUrl = client.uploadFile(file)
    except (KeiranError, OSError) as e:
        printError(f"Upload failed: {e}")
    share(imageUrl, "File uploaded", "Image URL")


@cli.command(name="paste")
@click.pass_obj
def cli_paste(client: KeiranClient) -> None:
    """Create a new paste"""
    fields = {name: readField(prompt) for name, prompt in PASTE_PROMPTS}

    try:
        pasteUrl = client.createPaste(**fields)
    except KeiranError as e:
        printError(f"Paste creation failed: {e}")
    share(pasteUrl, "Paste created", "Paste URL")


@cli.command(name="shorten")
@click.argument("url", type=str)
@click.pass_obj
def cli_shorten(client: KeiranClient, url: str) -> None:
    """Shorten a given URL"""
    try:
        shortUrl = client.shortenUrl(url)
    except KeiranError as e:
        printError(f"URL shortening failed: {e}")
    share(shortUrl, "URL shortened", "Shortened URL")


if __name__ == "__main__":
    cli()
