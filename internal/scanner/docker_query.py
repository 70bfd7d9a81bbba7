# internal/scanner/docker_query.py

from __future__ import annotations

from typing import Any

import docker
import requests
from docker.errors import APIError, DockerException
from docker.errors import NotFound as DockerNotFound

from internal.errors import InspectionError, NotFound, TransportError


def connect_from_env() -> docker.DockerClient:
    try:
        client = docker.from_env()
        client.ping()
    except (DockerException, requests.exceptions.RequestException) as e:
        raise TransportError(f"Docker is not accessible from this host: {e}")
    return client


def list_containers(client: Any) -> list[dict]:
    """
    Summaries (Id, Names, ...) of every container, running or stopped.
    Sparse listing keeps this to one daemon call; details come from inspect_container().
    """
    try:
        containers = client.containers.list(all=True, sparse=True)
    except (DockerException, requests.exceptions.RequestException) as e:
        raise TransportError(f"Failed to list containers: {e}")
    return [c.attrs or {} for c in containers]


def inspect_container(client: Any, container_id: str) -> dict:
    try:
        return client.containers.get(container_id).attrs or {}
    except DockerNotFound as e:
        raise NotFound(f"Container {container_id} not found: {e}")
    except APIError as e:
        raise InspectionError(f"Failed to inspect container {container_id}: {e}")
    except (DockerException, requests.exceptions.RequestException) as e:
        raise TransportError(f"Failed to inspect container {container_id}: {e}")


def list_networks(client: Any) -> list[dict]:
    try:
        networks = client.networks.list()
    except (DockerException, requests.exceptions.RequestException) as e:
        raise TransportError(f"Failed to list networks: {e}")
    return [n.attrs or {} for n in networks]


def inspect_network(client: Any, name: str) -> dict:
    try:
        return client.networks.get(name).attrs or {}
    except DockerNotFound as e:
        raise NotFound(f"Network {name} not found: {e}")
    except APIError as e:
        raise InspectionError(f"Failed to inspect network {name}: {e}")
    except (DockerException, requests.exceptions.RequestException) as e:
        raise TransportError(f"Failed to inspect network {name}: {e}")
