import os
import sys
from pathlib import Path
from types import ModuleType
from typing import Literal


def get_current_platform() -> str:
    """
    Return the platform name as used in 'BaseInstaller.platforms'.
    'debian' covers Debian and its derivatives (Ubuntu), detected by '/etc/debian_version'.
    """

    if sys.platform.lower() == "win32":
        return "windows"
    if os.path.isfile("/etc/debian_version"):
        return "debian"
    return sys.platform.lower()


class BaseInstaller:
    def __init__(
            self,
            file_path: str | None = None
    ):
        self.name: str = Path(file_path).stem if file_path else ""
        self.description: str = ""
        self.version: str = "1.0.0"
        self.platforms: list = []
        self.helper: ModuleType | None = None
        # Methods that need root per platform, e.g. {"debian": ["install"]}.
        self.admins: dict = {}

    def install(self) -> int:
        raise NotImplementedError(f"'{self.name}' doesn't have an install method.")

    def is_platform_supported(self) -> bool:
        return get_current_platform() in self.platforms

    def is_admin_required(
            self,
            method: Literal["install"]
    ) -> bool:
        return method in self.admins.get(get_current_platform(), [])

    def show_help(
            self,
            method: Literal["install"]
    ) -> None:
        print(f"{self.name} {self.version}: {self.description}")
        print(f"Platforms: {', '.join(self.platforms)}")
        print()
        self._show_help(method)

    def _show_help(
            self,
            method: Literal["install"]
    ) -> None:
        raise NotImplementedError
