import subprocess

from . import ubuntu_terminal


UFW_EXECUTABLE: str = "ufw"


def is_ufw_installed() -> bool:
    return ubuntu_terminal.is_executable_exists(UFW_EXECUTABLE)


def allow_port(
        port: int,
        protocol: str = "tcp"
):
    """
    Add an 'allow' rule for the port.
    :param port: int, port number.
    :param protocol: str, 'tcp' or 'udp'.
    :return:
    """
    subprocess.check_call([UFW_EXECUTABLE, "allow", f"{port}/{protocol}"])


def reload():
    subprocess.check_call([UFW_EXECUTABLE, "reload"])
