"""
xRDP server setup for Ubuntu.

Installs xrdp with the Xorg backend, writes xrdp.ini, sesman.ini and startwm.sh for this host,
enables the xrdp and xrdp-sesman services, opens the RDP port in ufw (if installed), and reports the
local accounts that can log in, to the console and to a connection information file.

Run this script as root.
"""

import argparse
import os
import shutil
import subprocess
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable

from . import xrdp_templates, xrdp_report
from .infra import permissions, ubuntu_terminal, firewalls, networks, users
from .infra.printing import print_status, print_warning, print_error, print_header


SCRIPT_NAME: str = "xRDP Server Setup"
VERSION: str = "1.0.0"
RELEASE_COMMENT: str = "Initial."


XRDP_PORT: int = 3389
SESMAN_PORT: int = 3350
PACKAGES: list[str] = ["xrdp", "xorgxrdp", "xauth", "xorg", "dbus-x11"]
SERVICES: list[str] = ["xrdp", "xrdp-sesman"]
PRIMARY_SERVICE: str = "xrdp"
PUBLIC_IP_URL: str = "https://api.ipify.org"
CONFIG_DIR: str = "/etc/xrdp"
INFO_FILE: str = "/tmp/xrdp_connection_info.txt"


# ----------------- Configuration and state -----------------


@dataclass(frozen=True)
class SetupConfig:
    config_dir: str = CONFIG_DIR
    info_file: str = INFO_FILE
    home_root: str = users.HOME_ROOT
    xrdp_port: int = XRDP_PORT
    sesman_port: int = SESMAN_PORT
    packages: tuple[str, ...] = tuple(PACKAGES)
    services: tuple[str, ...] = tuple(SERVICES)
    primary_service: str = PRIMARY_SERVICE
    public_ip_url: str = PUBLIC_IP_URL

    @property
    def xrdp_ini_path(self) -> Path:
        return Path(self.config_dir) / "xrdp.ini"

    @property
    def xrdp_ini_backup_path(self) -> Path:
        return Path(self.config_dir) / "xrdp.ini.backup"

    @property
    def sesman_ini_path(self) -> Path:
        return Path(self.config_dir) / "sesman.ini"

    @property
    def startwm_path(self) -> Path:
        return Path(self.config_dir) / "startwm.sh"


@dataclass
class SetupState:
    config: SetupConfig
    host: networks.HostInfo | None = None
    users: list[str] = field(default_factory=list)


class StepStatus(Enum):
    SUCCESS = "success"
    DEGRADED = "degraded"
    FATAL = "fatal"


@dataclass(frozen=True)
class StepResult:
    status: StepStatus
    message: str = ""
    return_code: int = 0


@dataclass(frozen=True)
class Step:
    name: str
    title: str
    run: Callable[[SetupState], StepResult]


# ----------------- Steps -----------------


def sync_packages(state: SetupState) -> StepResult:
    print_status("Updating system packages...")
    ubuntu_terminal.update_system_packages()

    print_status("Installing XRDP and required packages...")
    ubuntu_terminal.install_packages(list(state.config.packages))
    return StepResult(StepStatus.SUCCESS)


def discover_host(state: SetupState) -> StepResult:
    state.host = networks.discover_host(state.config.public_ip_url)

    if not state.host.public_ip_available:
        return StepResult(StepStatus.DEGRADED, "Public IP could not be determined.")
    return StepResult(StepStatus.SUCCESS)


def write_configs(
        config: SetupConfig,
        host: networks.HostInfo
) -> None:
    """
    Back up xrdp.ini, then overwrite xrdp.ini, sesman.ini and startwm.sh with the rendered templates.
    Only xrdp.ini is backed up.
    """

    shutil.copyfile(config.xrdp_ini_path, config.xrdp_ini_backup_path)

    rendered: dict[Path, str] = {
        config.xrdp_ini_path: xrdp_templates.render_template(
            "xrdp.ini", host, xrdp_port=config.xrdp_port, sesman_port=config.sesman_port),
        config.sesman_ini_path: xrdp_templates.render_template(
            "sesman.ini", host, xrdp_port=config.xrdp_port, sesman_port=config.sesman_port),
        config.startwm_path: xrdp_templates.render_template(
            "startwm.sh", host, xrdp_port=config.xrdp_port, sesman_port=config.sesman_port),
    }
    for file_path, content in rendered.items():
        file_path.write_text(content)

    os.chmod(config.startwm_path, 0o755)


def configure_xrdp(state: SetupState) -> StepResult:
    write_configs(state.config, state.host)
    return StepResult(StepStatus.SUCCESS)


def activate_services(state: SetupState) -> StepResult:
    print_status("Enabling and starting XRDP service...")
    for service_name in state.config.services:
        ubuntu_terminal.enable_restart_service(service_name)
    return StepResult(StepStatus.SUCCESS)


def configure_firewall(state: SetupState) -> StepResult:
    if not firewalls.is_ufw_installed():
        print_warning("ufw is not installed; skipping firewall step.")
        return StepResult(StepStatus.SUCCESS)

    firewalls.allow_port(state.config.xrdp_port, "tcp")
    firewalls.reload()
    print_status(f"Firewall configured to allow XRDP connections (port {state.config.xrdp_port})")
    return StepResult(StepStatus.SUCCESS)


def enumerate_users(state: SetupState) -> StepResult:
    state.users = list(users.iter_eligible_users(home_root=state.config.home_root))
    xrdp_report.print_users(state.users)
    return StepResult(StepStatus.SUCCESS)


def write_report(state: SetupState) -> StepResult:
    report: str = xrdp_report.render_report(state.host, state.users, state.config.xrdp_port)
    xrdp_report.write_report(state.config.info_file, report)
    xrdp_report.print_summary(state.host, state.users, state.config.xrdp_port, state.config.info_file)
    return StepResult(StepStatus.SUCCESS)


def check_health(state: SetupState) -> StepResult:
    service_name: str = state.config.primary_service
    if ubuntu_terminal.is_service_active(service_name):
        print_status("XRDP service is running successfully")
        return StepResult(StepStatus.SUCCESS)

    print_error(f"XRDP service is not running. Check logs: journalctl -u {service_name}")
    return StepResult(StepStatus.DEGRADED, f"Service '{service_name}' is not active.")


STEPS: list[Step] = [
    Step("packages", "", sync_packages),
    Step("host", "", discover_host),
    Step("configs", "Configuring XRDP...", configure_xrdp),
    Step("services", "", activate_services),
    Step("firewall", "Configuring firewall...", configure_firewall),
    Step("users", "", enumerate_users),
    Step("report", "", write_report),
    Step("health", "Testing XRDP service...", check_health),
]


# ----------------- Pipeline driver -----------------


def run_step(
        step: Step,
        state: SetupState
) -> StepResult:
    try:
        return step.run(state)
    except subprocess.CalledProcessError as e:
        return StepResult(
            StepStatus.FATAL,
            f"Command '{' '.join(map(str, e.cmd))}' failed with exit code {e.returncode}.",
            e.returncode or 1,
        )
    except OSError as e:
        return StepResult(StepStatus.FATAL, str(e), 1)


def run_pipeline(
        state: SetupState,
        steps: list[Step] | None = None
) -> StepResult:
    """
    Run the steps in order, stopping on the first FATAL result.

    :return: StepResult, the FATAL result that stopped the pipeline, or SUCCESS if every step ran.
    """

    if steps is None:
        steps = STEPS

    for step in steps:
        if step.title:
            print_status(step.title)
        result: StepResult = run_step(step, state)

        if result.status == StepStatus.FATAL:
            print_error(f"Step '{step.name}' failed: {result.message}")
            return result
        elif result.status == StepStatus.DEGRADED:
            print_warning(result.message)

    return StepResult(StepStatus.SUCCESS)


# ----------------- Argparse setup -----------------


def _make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Install and configure the xrdp remote desktop server on this host."
    )

    parser.add_argument(
        "--config-dir",
        default=CONFIG_DIR,
        help=f"Directory of xrdp.ini, sesman.ini and startwm.sh. Default: {CONFIG_DIR}",
    )
    parser.add_argument(
        "--info-file",
        default=INFO_FILE,
        help=f"Path of the connection information file. Default: {INFO_FILE}",
    )
    parser.add_argument(
        "--home-root",
        default=users.HOME_ROOT,
        help=f"Directory holding the home directories of login users. Default: {users.HOME_ROOT}",
    )

    return parser


def main(
        config_dir: str = CONFIG_DIR,
        info_file: str = INFO_FILE,
        home_root: str = users.HOME_ROOT,
) -> int:
    if not permissions.is_admin():
        print_error("Please run as root or with sudo")
        return 1

    print_header("XRDP Server Setup for Ubuntu")

    config = SetupConfig(config_dir=config_dir, info_file=info_file, home_root=home_root)
    state = SetupState(config=config)

    result: StepResult = run_pipeline(state)
    if result.status == StepStatus.FATAL:
        return result.return_code

    print_header("SETUP COMPLETED SUCCESSFULLY")
    print_status(f"You can now connect using any RDP client to: {state.host.public_ip}")
    print_status("")
    xrdp_report.print_closing_reminder()

    return 0


if __name__ == '__main__':
    exec_parser = _make_parser()
    args = exec_parser.parse_args()
    sys.exit(main(**vars(args)))
