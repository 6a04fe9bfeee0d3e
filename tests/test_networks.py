import socket
import unittest
from types import SimpleNamespace
from unittest.mock import patch, MagicMock

import requests

from xrdpinst.installers.helpers.infra import networks


def make_address(family, address):
    return SimpleNamespace(family=family, address=address)


class TestPublicIp(unittest.TestCase):
    @patch.object(networks.requests, "get")
    def test_returns_stripped_body(self, mock_get):
        mock_get.return_value = MagicMock(text="203.0.113.7\n")

        self.assertEqual(networks.get_public_ip("https://api.ipify.org"), "203.0.113.7")
        mock_get.assert_called_once_with("https://api.ipify.org", timeout=None)

    @patch.object(networks.requests, "get", side_effect=requests.exceptions.ConnectionError("down"))
    def test_network_failure_gives_placeholder(self, mock_get):
        self.assertEqual(networks.get_public_ip("https://api.ipify.org"), "Unable to determine")

    @patch.object(networks.requests, "get")
    def test_http_error_gives_placeholder(self, mock_get):
        response = MagicMock()
        response.raise_for_status.side_effect = requests.exceptions.HTTPError("503")
        mock_get.return_value = response

        self.assertEqual(networks.get_public_ip("https://api.ipify.org"), networks.UNAVAILABLE_PUBLIC_IP)


class TestLocalIp(unittest.TestCase):
    @patch.object(networks.psutil, "net_if_addrs")
    def test_first_non_loopback_ipv4(self, mock_addrs):
        mock_addrs.return_value = {
            "lo": [make_address(socket.AF_INET, "127.0.0.1")],
            "eth0": [
                make_address(socket.AF_INET6, "fe80::1"),
                make_address(socket.AF_INET, "192.168.1.20"),
            ],
            "eth1": [make_address(socket.AF_INET, "10.0.0.5")],
        }

        self.assertEqual(networks.get_local_ip(), "192.168.1.20")

    @patch.object(networks.psutil, "net_if_addrs", return_value={"lo": [make_address(socket.AF_INET, "127.0.0.1")]})
    def test_no_address(self, mock_addrs):
        self.assertEqual(networks.get_local_ip(), "")


class TestDiscoverHost(unittest.TestCase):
    @patch.object(networks, "get_local_ip", return_value="192.168.1.20")
    @patch.object(networks, "get_public_ip", return_value=networks.UNAVAILABLE_PUBLIC_IP)
    @patch.object(networks, "get_hostname", return_value="desk01")
    def test_degraded_public_ip(self, mock_hostname, mock_public, mock_local):
        host = networks.discover_host("https://api.ipify.org")

        self.assertEqual(host, networks.HostInfo("desk01", "Unable to determine", "192.168.1.20"))
        self.assertFalse(host.public_ip_available)


if __name__ == '__main__':
    unittest.main()
