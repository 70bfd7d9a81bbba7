import copy
from unittest.mock import Mock

import docker
import pytest


def container_attrs(name, container_id, **sections):
    """Inspect payload shaped like `docker inspect <container>`."""
    attrs = {
        "Id": container_id,
        "Name": f"/{name}",
        "Config": {
            "Image": "nginx:latest",
            "Labels": {},
            "Env": ["PATH=/usr/local/sbin:/usr/local/bin"],
            "Cmd": ["nginx", "-g", "daemon off;"],
            "Entrypoint": None,
            "WorkingDir": "",
            "User": "",
            "Hostname": name,
            "Domainname": "",
            "Tty": False,
            "OpenStdin": False,
        },
        "HostConfig": {
            "NetworkMode": "default",
            "PortBindings": {},
            "Privileged": False,
            "RestartPolicy": {"Name": "no", "MaximumRetryCount": 0},
        },
        "NetworkSettings": {"Networks": {}},
        "Mounts": [],
    }
    for key, value in sections.items():
        if isinstance(value, dict) and isinstance(attrs.get(key), dict):
            attrs[key].update(value)
        else:
            attrs[key] = value
    return attrs


def network_attrs(name, internal=False, **extra):
    attrs = {
        "Name": name,
        "Id": f"net-{name}",
        "Scope": "local",
        "Driver": "bridge",
        "EnableIPv6": False,
        "Internal": internal,
        "IPAM": {"Driver": "default", "Config": [{"Subnet": "172.20.0.0/16", "Gateway": "172.20.0.1"}]},
    }
    attrs.update(extra)
    return attrs


class FakeDocker:
    """Holds inspect payloads and hands out a Mock shaped like docker.DockerClient."""

    def __init__(self, containers=(), networks=()):
        self.containers = {c["Id"]: c for c in containers}
        self.networks = {n["Name"]: n for n in networks}
        self.missing_containers = set()
        self.missing_networks = set()
        self.client = Mock()
        self.client.containers.list.side_effect = self._list_containers
        self.client.containers.get.side_effect = self._get_container
        self.client.networks.list.side_effect = self._list_networks
        self.client.networks.get.side_effect = self._get_network

    def _list_containers(self, all=False, sparse=False):
        return [Mock(attrs={"Id": cid, "Names": [c["Name"]]}) for cid, c in self.containers.items()]

    def _get_container(self, container_id):
        if container_id in self.missing_containers or container_id not in self.containers:
            raise docker.errors.NotFound(f"No such container: {container_id}")
        return Mock(attrs=copy.deepcopy(self.containers[container_id]))

    def _list_networks(self):
        return [Mock(attrs={"Name": name, "Id": n["Id"]}) for name, n in self.networks.items()]

    def _get_network(self, name):
        if name in self.missing_networks or name not in self.networks:
            raise docker.errors.NotFound(f"network {name} not found")
        return Mock(attrs=copy.deepcopy(self.networks[name]))


@pytest.fixture
def fake_docker():
    web1 = container_attrs(
        "web1",
        "aaa111",
        HostConfig={"PortBindings": {"80/tcp": [{"HostIp": "", "HostPort": "8080"}]}},
        NetworkSettings={"Networks": {"frontend": {}}},
    )
    web2 = container_attrs("web2", "bbb222", NetworkSettings={"Networks": {"frontend": {}, "backend": {}}})
    db1 = container_attrs(
        "db1",
        "ccc333",
        Config={"Image": "postgres:16", "Cmd": ["postgres"], "Hostname": "db1"},
        HostConfig={"RestartPolicy": {"Name": "unless-stopped"}},
        NetworkSettings={"Networks": {"backend": {}}},
        Mounts=[{"Type": "volume", "Name": "pgdata", "Source": "/var/lib/docker/volumes/pgdata/_data",
                 "Destination": "/var/lib/postgresql/data"}],
    )
    return FakeDocker(
        containers=[web1, web2, db1],
        networks=[
            network_attrs("bridge"),
            network_attrs("frontend"),
            network_attrs("backend", internal=True),
            network_attrs("monitoring"),
        ],
    )
