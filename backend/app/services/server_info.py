"""
Host introspection for the "access info" panel and startup banner.
"""
import ipaddress
import platform
import socket
import sys
import time

import psutil


def get_network_addresses() -> list[dict[str, str]]:
    """All non-loopback IPv4 addresses as ``{"interface", "address"}`` pairs."""
    addresses = []
    for interface, snics in psutil.net_if_addrs().items():
        for snic in snics:
            if snic.family != socket.AF_INET:
                continue
            if ipaddress.ip_address(snic.address).is_loopback:
                continue
            addresses.append({"interface": interface, "address": snic.address})
    return addresses


def get_access_urls(port: int) -> list[str]:
    """URLs under which the server is reachable from the network."""
    return [f"http://{a['address']}:{port}/" for a in get_network_addresses()]


def collect_server_info(port: int) -> dict:
    """Descriptive snapshot of the host and this server process."""
    memory = psutil.Process().memory_info()
    return {
        "hostname": socket.gethostname(),
        "platform": sys.platform,
        "addresses": get_network_addresses(),
        "port": port,
        "uptime": time.time() - psutil.boot_time(),
        "memoryUsage": {"rss": memory.rss, "vms": memory.vms},
        "pythonVersion": platform.python_version(),
    }
