import socket
from dataclasses import dataclass

import psutil
import requests


UNAVAILABLE_PUBLIC_IP: str = "Unable to determine"


@dataclass(frozen=True)
class HostInfo:
    hostname: str
    public_ip: str      # UNAVAILABLE_PUBLIC_IP if the lookup failed
    local_ip: str       # empty string if no address was found

    @property
    def public_ip_available(self) -> bool:
        return self.public_ip != UNAVAILABLE_PUBLIC_IP


def get_hostname() -> str:
    return socket.gethostname()


def get_public_ip(
        url: str,
        timeout: float | None = None
) -> str:
    """
    Query an IP echo service for the public IP address of this host.

    :param url: str, the URL of the service. The response body must be the bare IP address.
    :param timeout: float, seconds to wait for the service. None waits as long as the connection allows.
    :return: str, the public IP, or UNAVAILABLE_PUBLIC_IP if the request failed.
    """

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.RequestException:
        return UNAVAILABLE_PUBLIC_IP

    public_ip: str = response.text.strip()
    if not public_ip:
        return UNAVAILABLE_PUBLIC_IP

    return public_ip


def get_local_ip() -> str:
    """
    Return the first non-loopback IPv4 address in interface enumeration order.
    """

    for addresses in psutil.net_if_addrs().values():
        for address in addresses:
            if address.family != socket.AF_INET:
                continue
            if address.address.startswith("127."):
                continue
            return address.address

    return ""


def discover_host(public_ip_url: str) -> HostInfo:
    return HostInfo(
        hostname=get_hostname(),
        public_ip=get_public_ip(public_ip_url),
        local_ip=get_local_ip(),
    )
