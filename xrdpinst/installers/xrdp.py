from types import ModuleType
from typing import Literal

from . import _base
from .helpers import xrdp_manager
from .helpers.infra.printing import printc


class Xrdp(_base.BaseInstaller):
    def __init__(self):
        super().__init__(__file__)
        self.description: str = "xRDP Server Installer"
        self.version: str = xrdp_manager.VERSION
        self.platforms: list = ["debian"]
        self.helper: ModuleType = xrdp_manager
        self.admins: dict = {"debian": ["install"]}

    def install(self) -> int:
        return install_function()

    def _show_help(
            self,
            method: Literal["install"]
    ) -> None:
        if method == "install":
            method_help: str = (
                "This method installs xrdp, xorgxrdp, xauth, xorg and dbus-x11 from apt repo and configures them:\n"
                "  - /etc/xrdp/xrdp.ini is backed up to xrdp.ini.backup, then rewritten for port 3389 and the local IP.\n"
                "  - /etc/xrdp/sesman.ini and /etc/xrdp/startwm.sh are rewritten.\n"
                "  - xrdp and xrdp-sesman services are enabled and restarted.\n"
                "  - If ufw is installed, port 3389/tcp is allowed.\n"
                f"  - Login users are listed and saved to {xrdp_manager.INFO_FILE}.\n"
                "\n"
                "You can also use the 'manual' method to provide custom arguments to the helper script.\n"
                "Example:\n"
                "  xrdpinst manual xrdp help\n"
                "  xrdpinst manual xrdp --info-file /root/xrdp_connection_info.txt\n"
            )
            print(method_help)
        else:
            raise ValueError(f"Unknown method '{method}'.")


def install_function() -> int:
    rc: int = xrdp_manager.main()
    if rc != 0:
        printc("xRDP setup failed.", color="red")
        return rc

    return 0
