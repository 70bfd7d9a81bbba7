# internal/models/schema.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

COMPOSE_VERSION = "3.6"

# Network mode docker reports when none was requested at `docker run`.
DEFAULT_NETWORK_MODE = "default"

# Values that mark an attribute as unset; matched by value and type, see is_sentinel().
SENTINEL_STRINGS = frozenset({"", "null", "default", ",", "no"})

# Service attributes in output order.
SERVICE_KEYS = (
    "container_name",
    "image",
    "labels",
    "volumes",
    "environment",
    "command",
    "entrypoint",
    "working_dir",
    "user",
    "hostname",
    "domainname",
    "network_mode",
    "ports",
    "privileged",
    "restart",
    "tty",
    "stdin_open",
)


@dataclass
class ComposeDocument:
    version: str = COMPOSE_VERSION
    services: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    networks: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    volumes: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        # version, services, then the optional sections only when populated
        out: Dict[str, Any] = {"version": self.version, "services": self.services}
        if self.networks:
            out["networks"] = self.networks
        if self.volumes:
            out["volumes"] = self.volumes
        return out

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ComposeDocument":
        if not isinstance(d, dict):
            raise ValueError("Compose document root must be a mapping.")
        if not d.get("version"):
            raise ValueError("Compose document has no version.")
        return cls(
            version=str(d["version"]),
            services=dict(d.get("services") or {}),
            networks=dict(d.get("networks") or {}),
            volumes=dict(d.get("volumes") or {}),
        )
