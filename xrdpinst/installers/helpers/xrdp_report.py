from datetime import datetime
from pathlib import Path

from .infra.networks import HostInfo
from .infra.printing import print_status, print_warning, print_header


REPORT_TEMPLATE: str = """\
XRDP Connection Information
===========================

Server Details:
- Hostname: {host.hostname}
- Public IP: {host.public_ip}
- Local IP: {host.local_ip}
- XRDP Port: {port}

Available Users:
{user_lines}

Connection Instructions:
1. Use Remote Desktop Client (Windows) or Remmina (Linux)
2. Connect to: {host.public_ip} (or {host.local_ip} if on local network)
3. Port: {port}
4. Use your system username and password

Security Notes:
- Only users with password authentication can connect
- Consider setting up SSH keys for more secure access
- Keep your system updated regularly

Generated on: {generated_on}
"""


def format_timestamp(moment: datetime) -> str:
    """Format like the 'date' command: 'Wed Oct  7 20:39:00 UTC 2026', day of month padded with a space."""
    local = moment.astimezone()
    return f"{local:%a %b} {local.day:2d} {local:%H:%M:%S %Z %Y}"


def render_report(
        host: HostInfo,
        users: list[str],
        port: int,
        generated_at: datetime | None = None
) -> str:
    if generated_at is None:
        generated_at = datetime.now()

    return REPORT_TEMPLATE.format(
        host=host,
        port=port,
        user_lines="\n".join(f"- {user}" for user in users),
        generated_on=format_timestamp(generated_at),
    )


def write_report(
        file_path: str,
        report: str
) -> None:
    Path(file_path).write_text(report)


def print_users(users: list[str]) -> None:
    print_header("Available System Users")
    print("The following users can access the system via XRDP:")
    print("----------------------------------------")
    for user in users:
        print(f"- {user}")
    print("----------------------------------------")
    print_password_reminder()


def print_password_reminder() -> None:
    print_warning("Note: Users must have a password set to login via XRDP")
    print_warning("Set a password with: sudo passwd username")


def print_closing_reminder() -> None:
    print_warning("Important: Users must have a password set to login via XRDP")
    print_warning("Set a password for a user with: sudo passwd username")


def print_summary(
        host: HostInfo,
        users: list[str],
        port: int,
        info_file: str
) -> None:
    print_header("XRDP SERVER SETUP COMPLETE")
    print_status(f"Hostname: {host.hostname}")
    print_status(f"Public IP: {host.public_ip}")
    print_status(f"Local IP: {host.local_ip}")
    print_status(f"XRDP Port: {port}")
    print_status("")
    print_status("Available users for XRDP access:")
    for user in users:
        print_status(f"  - {user}")
    print_status("")
    print_status(f"Connection information saved to: {info_file}")
