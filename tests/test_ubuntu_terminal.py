import subprocess
import unittest
from types import SimpleNamespace
from unittest.mock import patch, call

from xrdpinst.installers.helpers.infra import ubuntu_terminal


class TestApt(unittest.TestCase):
    @patch.object(ubuntu_terminal.subprocess, "check_call", return_value=0)
    def test_install_packages_command(self, mock_check_call):
        ubuntu_terminal.install_packages(["xrdp", "xorgxrdp"])

        mock_check_call.assert_called_once_with(["apt", "install", "-y", "xrdp", "xorgxrdp"])

    @patch.object(ubuntu_terminal.subprocess, "check_call", return_value=0)
    def test_update_then_upgrade(self, mock_check_call):
        ubuntu_terminal.update_system_packages()

        self.assertEqual(mock_check_call.call_args_list, [
            call(["apt", "update"]),
            call(["apt", "upgrade", "-y"]),
        ])

    @patch.object(ubuntu_terminal.subprocess, "check_call",
                  side_effect=subprocess.CalledProcessError(100, ["apt", "update"]))
    def test_update_failure_skips_upgrade(self, mock_check_call):
        with self.assertRaises(subprocess.CalledProcessError):
            ubuntu_terminal.update_system_packages()

        mock_check_call.assert_called_once_with(["apt", "update"])


class TestServices(unittest.TestCase):
    @patch.object(ubuntu_terminal.subprocess, "check_call", return_value=0)
    def test_enable_then_restart(self, mock_check_call):
        ubuntu_terminal.enable_restart_service("xrdp-sesman")

        self.assertEqual(mock_check_call.call_args_list, [
            call(["systemctl", "enable", "xrdp-sesman"]),
            call(["systemctl", "restart", "xrdp-sesman"]),
        ])

    @patch.object(ubuntu_terminal.subprocess, "run", return_value=SimpleNamespace(returncode=3))
    def test_inactive_service(self, mock_run):
        self.assertFalse(ubuntu_terminal.is_service_active("xrdp"))
        mock_run.assert_called_once_with(["systemctl", "is-active", "--quiet", "xrdp"])


if __name__ == '__main__':
    unittest.main()
