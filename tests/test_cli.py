import unittest
from unittest.mock import patch

from xrdpinst import cli
from xrdpinst.installers import _base, xrdp
from xrdpinst.installers.helpers import xrdp_manager
from xrdpinst.installers.helpers.infra import permissions


class TestInstallCommand(unittest.TestCase):
    @patch.object(xrdp_manager, "main", return_value=0)
    @patch.object(permissions, "is_admin", return_value=True)
    @patch.object(_base, "get_current_platform", return_value="debian")
    def test_install_runs_helper(self, mock_platform, mock_admin, mock_main):
        self.assertEqual(cli.main(["install", "xrdp"]), 0)
        mock_main.assert_called_once_with()

    @patch.object(xrdp_manager, "main", return_value=100)
    @patch.object(permissions, "is_admin", return_value=True)
    @patch.object(_base, "get_current_platform", return_value="debian")
    def test_install_propagates_return_code(self, mock_platform, mock_admin, mock_main):
        self.assertEqual(cli.main(["install", "xrdp"]), 100)

    @patch.object(xrdp_manager, "main")
    @patch.object(permissions, "is_admin", return_value=False)
    @patch.object(_base, "get_current_platform", return_value="debian")
    def test_install_requires_root(self, mock_platform, mock_admin, mock_main):
        self.assertEqual(cli.main(["install", "xrdp"]), 1)
        mock_main.assert_not_called()

    @patch.object(xrdp_manager, "main")
    @patch.object(_base, "get_current_platform", return_value="windows")
    def test_unsupported_platform(self, mock_platform, mock_main):
        self.assertEqual(cli.main(["install", "xrdp"]), 1)
        mock_main.assert_not_called()

    @patch.object(xrdp_manager, "main")
    def test_only_install_is_offered(self, mock_main):
        for argv in (["uninstall", "xrdp"], ["upgrade", "xrdp"], ["install", "xrdp", "force"]):
            with self.subTest(argv=argv), self.assertRaises(SystemExit):
                cli.main(argv)
        mock_main.assert_not_called()

    def test_unknown_installer(self):
        self.assertEqual(cli.main(["install", "vlc"]), 1)


class TestManualCommand(unittest.TestCase):
    @patch.object(xrdp_manager, "main", return_value=0)
    def test_forwards_arguments(self, mock_main):
        rc = cli.main(["manual", "xrdp", "--info-file", "/root/info.txt", "--config-dir", "/srv/xrdp"])

        self.assertEqual(rc, 0)
        mock_main.assert_called_once_with(config_dir="/srv/xrdp", info_file="/root/info.txt", home_root="/home")

    @patch.object(xrdp_manager, "main")
    def test_help(self, mock_main):
        self.assertEqual(cli.main(["manual", "xrdp", "help"]), 0)
        mock_main.assert_not_called()


class TestInstaller(unittest.TestCase):
    def test_attributes(self):
        installer = xrdp.Xrdp()

        self.assertEqual(installer.name, "xrdp")
        self.assertEqual(installer.version, xrdp_manager.VERSION)
        self.assertIs(installer.helper, xrdp_manager)
        self.assertEqual(installer.platforms, ["debian"])

    def test_help_methods(self):
        self.assertEqual(cli.main(["help", "xrdp"]), 0)
        self.assertEqual(cli.main(["help", "vlc"]), 1)
        with self.assertRaises(SystemExit):
            cli.main(["help", "xrdp", "upgrade"])

    def test_available(self):
        self.assertEqual(cli.main(["available"]), 0)


if __name__ == '__main__':
    unittest.main()
