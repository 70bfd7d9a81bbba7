# internal/generator/normalize.py

from __future__ import annotations

from typing import Any, Dict

from internal.generator.extract import container_ports, container_volumes
from internal.models.schema import DEFAULT_NETWORK_MODE, SENTINEL_STRINGS, SERVICE_KEYS


def is_sentinel(value: Any) -> bool:
    """
    True when `value` is exactly one of the unset markers:
    None, "", [], "null", {}, "default", 0, ",", "no".

    Booleans never match (False is a real setting, not an int 0).
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        return value in SENTINEL_STRINGS
    if isinstance(value, int):
        return value == 0
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def strip_sentinels(values: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in values.items() if not is_sentinel(v)}


def network_mode(attrs: dict) -> str:
    mode = (attrs.get("HostConfig") or {}).get("NetworkMode") or ""
    if mode == DEFAULT_NETWORK_MODE:
        nets = (attrs.get("NetworkSettings") or {}).get("Networks") or {}
        for name in nets:
            return name
    return mode


def normalize_container(attrs: dict, create_volumes: bool = False) -> Dict[str, Any]:
    """Map one inspected container onto compose service attributes."""
    cfg = attrs.get("Config") or {}
    host_cfg = attrs.get("HostConfig") or {}
    restart = host_cfg.get("RestartPolicy") or {}
    name = attrs.get("Name") or ""

    values = {
        "container_name": name[1:] if name.startswith("/") else name,
        "image": cfg.get("Image"),
        "labels": cfg.get("Labels"),
        "volumes": container_volumes(attrs, create_volumes),
        "environment": cfg.get("Env"),
        "command": cfg.get("Cmd"),
        "entrypoint": cfg.get("Entrypoint"),
        "working_dir": cfg.get("WorkingDir"),
        "user": cfg.get("User"),
        "hostname": cfg.get("Hostname"),
        "domainname": cfg.get("Domainname"),
        "network_mode": network_mode(attrs),
        "ports": container_ports(attrs),
        "privileged": host_cfg.get("Privileged"),
        "restart": restart.get("Name"),
        "tty": cfg.get("Tty"),
        "stdin_open": cfg.get("OpenStdin"),
    }
    return strip_sentinels({k: values[k] for k in SERVICE_KEYS})
