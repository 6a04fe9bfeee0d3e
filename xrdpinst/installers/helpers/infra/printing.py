from dataclasses import dataclass

from rich.console import Console
from rich.text import Text


console = Console()
error_console = Console(stderr=True)


@dataclass(frozen=True)
class ConsoleStyle:
    """
    Usage 1:
        print_status("message")
    Usage 2:
        style = ConsoleStyle(info="cyan")
        print_status("message", style=style)
    """

    info: str = "green"
    warning: str = "yellow"
    error: str = "red"
    header: str = "blue"
    rule_char: str = "="
    rule_width: int = 40


DEFAULT_STYLE = ConsoleStyle()


def print_status(
        message: str,
        style: ConsoleStyle = DEFAULT_STYLE
) -> None:
    console.print(Text.assemble(("[INFO] ", style.info), message))


def print_warning(
        message: str,
        style: ConsoleStyle = DEFAULT_STYLE
) -> None:
    console.print(Text.assemble(("[WARN] ", style.warning), message))


def print_error(
        message: str,
        style: ConsoleStyle = DEFAULT_STYLE
) -> None:
    error_console.print(Text.assemble(("[ERROR] ", style.error), message))


def print_header(
        title: str,
        style: ConsoleStyle = DEFAULT_STYLE
) -> None:
    rule: str = style.rule_char * style.rule_width
    console.print(rule, style=style.header, markup=False)
    console.print(title, style=style.header, markup=False)
    console.print(rule, style=style.header, markup=False)


def printc(
        message: str,
        color: str
):
    console.print(message, style=color.lower(), markup=False)
