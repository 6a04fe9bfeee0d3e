import argparse
import sys

from rich.console import Console
from rich.table import Table

from . import __version__
from .installers import _base, xrdp
from .installers.helpers.infra import permissions


console = Console()


INSTALLERS: dict[str, type[_base.BaseInstaller]] = {
    "xrdp": xrdp.Xrdp,
}


def get_installer(name: str) -> _base.BaseInstaller | None:
    installer_class = INSTALLERS.get(name)
    if installer_class is None:
        console.print(f"Unknown installer '{name}'. Run 'xrdpinst available' to list installers.",
                      style='red', markup=False)
        return None
    return installer_class()


def show_available() -> int:
    table = Table(title=f"xrdpinst {__version__}")
    table.add_column("Name")
    table.add_column("Description")
    table.add_column("Version")
    table.add_column("Platforms")

    for installer_class in INSTALLERS.values():
        installer = installer_class()
        table.add_row(installer.name, installer.description, installer.version, ", ".join(installer.platforms))

    console.print(table)
    return 0


def run_install(name: str) -> int:
    installer = get_installer(name)
    if installer is None:
        return 1

    if not installer.is_platform_supported():
        console.print(f"'{name}' supports only: {', '.join(installer.platforms)}", style='red', markup=False)
        return 1

    if installer.is_admin_required("install") and not permissions.is_admin():
        console.print(f"'{name} install' must be run as root or with sudo.", style='red', markup=False)
        return 1

    return installer.install()


def show_help(
        name: str,
        method: str
) -> int:
    installer = get_installer(name)
    if installer is None:
        return 1

    try:
        installer.show_help(method)
    except (NotImplementedError, ValueError):
        console.print(f"No help for '{name} {method}'.", style='yellow', markup=False)
        return 1
    return 0


def run_manual(
        name: str,
        helper_args: list[str]
) -> int:
    installer = get_installer(name)
    if installer is None:
        return 1

    if installer.helper is None:
        console.print(f"'{name}' doesn't have a helper script.", style='yellow', markup=False)
        return 1

    parser: argparse.ArgumentParser = installer.helper._make_parser()
    if helper_args == ["help"]:
        parser.print_help()
        return 0

    parsed = parser.parse_args(helper_args)
    return installer.helper.main(**vars(parsed))


def _make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="xrdpinst", description="Remote desktop server installers.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("available", help="List the available installers.")

    install_parser = subparsers.add_parser("install", help="Run the install method of an installer.")
    install_parser.add_argument("name", help="Installer name.")

    help_parser = subparsers.add_parser("help", help="Show the help of an installer method.")
    help_parser.add_argument("name", help="Installer name.")
    help_parser.add_argument("method", nargs="?", default="install", choices=["install"])

    manual_parser = subparsers.add_parser("manual", help="Pass arguments directly to the installer helper script.")
    manual_parser.add_argument("name", help="Installer name.")
    manual_parser.add_argument("helper_args", nargs=argparse.REMAINDER, help="Arguments of the helper script.")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = _make_parser().parse_args(argv)

    if args.command == "available":
        return show_available()
    elif args.command == "help":
        return show_help(args.name, args.method)
    elif args.command == "manual":
        return run_manual(args.name, args.helper_args)
    else:
        return run_install(args.name)


if __name__ == '__main__':
    sys.exit(main())
