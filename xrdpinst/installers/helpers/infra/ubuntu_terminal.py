import subprocess
import shutil


def is_executable_exists(package: str) -> bool:
    """
    Function checks if an executable is available on PATH.
    :param package: str, executable name.
    :return:
    """

    if not shutil.which(package):
        return False
    else:
        return True


def update_system_packages():
    """
    Function refreshes the apt package index and upgrades the installed packages.
    Raises 'subprocess.CalledProcessError' if any of the apt commands fail.
    :return:
    """
    subprocess.check_call(['apt', 'update'])
    subprocess.check_call(['apt', 'upgrade', '-y'])


def install_packages(package_list: list[str]):
    """
    Function installs packages using apt.
    :param package_list: list of strings, package names to install.
    :return:
    """

    # Construct the command with the package list
    command = ["apt", "install", "-y"] + package_list

    subprocess.check_call(command)


def enable_service(service_name: str):
    subprocess.check_call(['systemctl', 'enable', service_name])


def restart_service(service_name: str):
    subprocess.check_call(['systemctl', 'restart', service_name])


def is_service_active(service_name: str) -> bool:
    """
    Function checks if a systemd service is in the 'active' state.
    :param service_name: str, the service name.
    :return: bool, True if 'systemctl is-active' exits with 0.
    """

    result = subprocess.run(['systemctl', 'is-active', '--quiet', service_name])
    return result.returncode == 0


def enable_restart_service(service_name: str):
    """
    Function enables the service at boot and restarts it.
    Nothing is verified between the two calls.

    :param service_name: str, the service name.
    :return:
    """

    enable_service(service_name)
    restart_service(service_name)
