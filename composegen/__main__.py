#!/usr/bin/env python3
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from internal.errors import ComposeGenError
from internal.generator.compose import generate_compose_file, selected_container_names
from internal.log import configure_logging
from internal.scanner.docker_query import connect_from_env


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


def _default_filter() -> str:
    return os.environ.get("COMPOSEGEN_FILTER", "")


def _default_log_level() -> str:
    return os.environ.get("COMPOSEGEN_LOG_LEVEL", "WARNING")


def _safe_write(text: str) -> None:
    """
    Prevent BrokenPipeError when piping YAML to tools like `head`.
    """
    try:
        sys.stdout.write(text)
        sys.stdout.flush()
    except BrokenPipeError:
        try:
            sys.stdout.close()
        except Exception:
            pass
        raise SystemExit(0)


def cmd_generate(args: argparse.Namespace) -> int:
    client = connect_from_env()
    text = generate_compose_file(
        client,
        include_all_networks=args.all_networks,
        container_filter=args.filter,
        create_volumes=args.create_volumes,
    )

    if args.output:
        out_path = Path(args.output).expanduser().resolve()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
        print(f"Wrote compose file: {out_path}", file=sys.stderr)
        return 0

    _safe_write(text)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    client = connect_from_env()
    names = selected_container_names(client, container_filter=args.filter)
    _safe_write("".join(f"{n}\n" for n in names))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="composegen",
        description="Reconstruct a docker-compose file from the containers on this host.",
    )
    p.add_argument(
        "--log-level",
        default=_default_log_level(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level for messages written to stderr.",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Print a compose file for the selected containers.")
    gen.add_argument("--filter", default=_default_filter(), help="Regex matched against container names. Empty = all.")
    gen.add_argument(
        "--all-networks",
        action="store_true",
        default=_env_flag("COMPOSEGEN_ALL_NETWORKS"),
        help="Export every network on the host instead of only the attached ones.",
    )
    gen.add_argument(
        "--create-volumes",
        action="store_true",
        default=_env_flag("COMPOSEGEN_CREATE_VOLUMES"),
        help="Render named-volume mounts as name:destination.",
    )
    gen.add_argument("--output", default="", help="Write the compose file to this path instead of stdout.")
    gen.set_defaults(func=cmd_generate)

    lst = sub.add_parser("list", help="List the container names a generate run would process.")
    lst.add_argument("--filter", default=_default_filter(), help="Regex matched against container names. Empty = all.")
    lst.set_defaults(func=cmd_list)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    try:
        return int(args.func(args))
    except ComposeGenError as e:
        print(f"{e.error_code}: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
