# internal/generator/extract.py

from __future__ import annotations

from typing import Any, Dict, List, Tuple

from internal.errors import InspectionError, NotFound
from internal.log import get_logger
from internal.scanner.docker_query import inspect_network, list_networks

logger = get_logger(__name__)


def _attached_networks(attrs: dict) -> dict:
    return (attrs.get("NetworkSettings") or {}).get("Networks") or {}


def container_volumes(attrs: dict, create_volumes: bool) -> List[str]:
    out: List[str] = []
    for m in attrs.get("Mounts") or []:
        mtype = m.get("Type")
        dst = m.get("Destination")

        if mtype == "volume":
            if create_volumes:
                out.append(f"{m.get('Name')}:{dst}")
        elif mtype == "bind":
            out.append(f"{m.get('Source')}:{dst}")
        else:
            # tmpfs, npipe, cluster: nothing compose can express as a volume string
            logger.warning("Ignoring mount", type=mtype, destination=dst)

    return sorted(out)


def _as_int(value: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _port_sort_key(container_port: str, binding: dict) -> Tuple[int, str, int, str]:
    number, _, proto = str(container_port).partition("/")
    return (_as_int(number), proto, _as_int(binding.get("HostPort")), binding.get("HostIp") or "")


def container_ports(attrs: dict) -> List[str]:
    bindings_map = (attrs.get("HostConfig") or {}).get("PortBindings") or {}
    pairs: List[Tuple[str, dict]] = []
    for container_port, bindings in bindings_map.items():
        for b in bindings or []:
            pairs.append((container_port, b or {}))
    pairs.sort(key=lambda p: _port_sort_key(*p))

    out: List[str] = []
    for container_port, b in pairs:
        host_port = b.get("HostPort") or ""
        host_ip = b.get("HostIp") or ""
        if not host_port and not host_ip:
            # published on an ephemeral host port, all interfaces
            out.append(str(container_port))
            continue
        if host_ip:
            host_port = f"{host_ip}:{host_port}"
        out.append(f"{host_port}:{container_port}")
    return out


def container_network_stubs(client: Any, attrs: dict) -> Dict[str, Dict[str, Any]]:
    """
    One `{name, external}` stub per network the container is attached to.
    A network that cannot be inspected is logged and left out.
    """
    stubs: Dict[str, Dict[str, Any]] = {}
    for name in sorted(_attached_networks(attrs).keys()):
        try:
            net = inspect_network(client, name)
        except (NotFound, InspectionError) as e:
            logger.warning("Skipping network", network=name, error=e.message)
            continue

        stubs[name] = {
            "external": not bool(net.get("Internal")),
            "name": name,
        }
    return stubs


def _ipam_config(entries: list) -> List[Dict[str, Any]]:
    keys = (
        ("Subnet", "subnet"),
        ("IPRange", "ip_range"),
        ("Gateway", "gateway"),
        ("AuxiliaryAddresses", "aux_addresses"),
    )
    out: List[Dict[str, Any]] = []
    for e in entries or []:
        cfg = {dst: e.get(src) for src, dst in keys if e.get(src)}
        out.append(cfg)
    return out


def host_network_details(client: Any) -> Dict[str, Dict[str, Any]]:
    """Full detail for every network on the host. Any inspection failure is fatal."""
    networks: Dict[str, Dict[str, Any]] = {}
    for summary in list_networks(client):
        name = summary.get("Name")
        if not name:
            continue
        net = inspect_network(client, name)
        ipam = net.get("IPAM") or {}

        networks[name] = {
            "name": net.get("Name") or name,
            "scope": net.get("Scope"),
            "driver": net.get("Driver"),
            "enable_ipv6": bool(net.get("EnableIPv6")),
            "internal": bool(net.get("Internal")),
            "ipam": {
                "driver": ipam.get("Driver"),
                "config": _ipam_config(ipam.get("Config")),
            },
        }
    return dict(sorted(networks.items()))
