#!/usr/bin/env python3
"""Entry point for the create-tau-app CLI."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Sequence

import requests

from create_tau_app import __version__
from create_tau_app.adapters.console_prompter import ConsolePrompter
from create_tau_app.adapters.github_registry import GitHubReleaseRegistry
from create_tau_app.app.archive_cache import ArchiveCache
from create_tau_app.app.customizer import ProjectCustomizer
from create_tau_app.app.generator import GenerateRequest, GenerateService
from create_tau_app.app.materializer import TemplateMaterializer
from create_tau_app.app.release_cache import ReleaseCache
from create_tau_app.domain.errors import GenerateError
from create_tau_app.domain.release import LATEST_VERSION
from create_tau_app.settings import ConfigError, RuntimeSettings, load_settings
from create_tau_app.utils.console import Console
from create_tau_app.utils.telemetry import record_event

PROG = "create-tau-app"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Creates a new application using Tau.",
        add_help=False,
    )
    parser.add_argument("dir", help="Directory of the new application (must not exist)")
    parser.add_argument("-h", "--help", action="help", help="Displays this help screen.")
    parser.add_argument("-X", action="version", version=f"{PROG} {__version__}", help="Print the version of this tool.")
    parser.add_argument("-n", "--name", help="The name of your new application (default: directory name).")
    parser.add_argument("-u", "--update", action="store_true", help="Force update the cache.")
    parser.add_argument(
        "-v",
        "--version",
        dest="template_version",
        default=LATEST_VERSION,
        help="The version of the template (default: latest).",
    )
    parser.add_argument("-V", "--verbose", action="store_true", help="Enable verbose logging.")
    return parser


def _build_service(settings: RuntimeSettings, console: Console) -> GenerateService:
    session = requests.Session()
    registry = GitHubReleaseRegistry(
        settings.repository_owner,
        settings.repository_name,
        api_url=settings.api_url,
        token_env=settings.github_token_env,
        session=session,
    )
    return GenerateService(
        ReleaseCache(registry, settings.releases_file, ttl=settings.release_cache_ttl, console=console),
        ArchiveCache(settings.download_dir, session=session, console=console),
        TemplateMaterializer(),
        ProjectCustomizer(ConsolePrompter()),
        cache_dirs=(settings.home_dir, settings.download_dir),
        console=console,
    )


def _record(
    settings: RuntimeSettings,
    console: Console,
    payload: dict[str, object],
    started: float,
    *,
    level: str = "info",
    status: str,
) -> None:
    # The run outcome stands even when the event log cannot be written.
    try:
        record_event(
            settings,
            "generate",
            payload,
            level=level,
            status=status,
            duration_ms=(time.monotonic() - started) * 1000,
        )
    except OSError as exc:
        console.verbose(f"Could not write the telemetry log: {exc}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    console = Console(verbose=args.verbose)

    try:
        settings = load_settings()
    except ConfigError as exc:
        console.error(str(exc))
        return 1

    target = Path(args.dir).expanduser().resolve()
    request = GenerateRequest(
        target=target,
        name=args.name or target.name,
        version=args.template_version,
        refresh=args.update,
    )
    payload = {"requested": request.version, "refresh": request.refresh}
    started = time.monotonic()
    try:
        result = _build_service(settings, console).generate(request)
    except GenerateError as exc:
        console.error(str(exc))
        _record(settings, console, payload, started, level="error", status=exc.code)
        return 1

    payload["resolved"] = result.version
    _record(settings, console, payload, started, status="ok")
    return 0


if __name__ == "__main__":
    sys.exit(main())
