# internal/generator/compose.py

from __future__ import annotations

from typing import Any, Dict

from internal.errors import InspectionError, NotFound
from internal.generator.extract import container_network_stubs, host_network_details
from internal.generator.normalize import normalize_container
from internal.log import get_logger
from internal.models.schema import ComposeDocument
from internal.reporter.render_yaml import render_document
from internal.scanner.docker_query import inspect_container, list_containers
from internal.scanner.resolve import compile_filter, display_name, filter_names, resolve_container_id

logger = get_logger(__name__)


def _select_containers(client: Any, container_filter: str) -> tuple[list[dict], list[str]]:
    # Compile before touching the daemon so a bad pattern costs no calls.
    pattern = compile_filter(container_filter)
    summaries = list_containers(client)
    return summaries, filter_names([display_name(s) for s in summaries], pattern)


def selected_container_names(client: Any, container_filter: str = "") -> list[str]:
    return _select_containers(client, container_filter)[1]


def build_document(
    client: Any,
    include_all_networks: bool = False,
    container_filter: str = "",
    create_volumes: bool = False,
) -> ComposeDocument:
    summaries, names = _select_containers(client, container_filter)

    services: Dict[str, Dict[str, Any]] = {}
    networks: Dict[str, Dict[str, Any]] = {}
    volumes: Dict[str, Dict[str, Any]] = {}

    for name in names:
        logger.debug("Inspecting container", container=name)
        try:
            container_id = resolve_container_id(summaries, name)
            attrs = inspect_container(client, container_id)
        except (NotFound, InspectionError) as e:
            logger.warning("Skipping container", container=name, error=e.message, error_code=e.error_code)
            continue

        service_name = display_name(attrs)
        services[service_name] = normalize_container(attrs, create_volumes)
        if not include_all_networks:
            networks.update(container_network_stubs(client, attrs))
        logger.debug("Generated service", container=service_name)

    if include_all_networks:
        networks = host_network_details(client)

    doc = ComposeDocument(
        services=dict(sorted(services.items())),
        networks=dict(sorted(networks.items())),
        volumes=volumes,
    )
    logger.info("Generated compose document", services=len(doc.services), networks=len(doc.networks))
    return doc


def generate_compose_file(
    client: Any,
    include_all_networks: bool = False,
    container_filter: str = "",
    create_volumes: bool = False,
) -> str:
    doc = build_document(
        client,
        include_all_networks=include_all_networks,
        container_filter=container_filter,
        create_volumes=create_volumes,
    )
    return render_document(doc)
