"""Deploy default configuration to app/host/user target directories."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from lib_layered_config import deploy_config
from lib_layered_config.examples.deploy import DeployAction

from b5kata import __init__conf__
from b5kata.adapters.config.loader import get_default_config_path, validate_profile
from b5kata.domain.enums import DeployTarget

logger = logging.getLogger(__name__)

_DEPLOYED_ACTIONS = frozenset({DeployAction.CREATED, DeployAction.OVERWRITTEN})


def deploy_configuration(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
    set_permissions: bool = True,
) -> list[Path]:
    r"""Copy the bundled defaultconfig.toml into the requested target layers.

    Args:
        targets: Layers to deploy to (app, host, user). Several may be given.
        force: Overwrite existing files. When False (default), existing files
            are skipped.
        profile: Optional profile name; files land in a ``profile/<name>/``
            subdirectory of each layer.
        set_permissions: Apply lib_layered_config's default POSIX modes
            (755/644 for app/host, 700/600 for user). False leaves the umask
            in charge.

    Returns:
        Paths that were created or overwritten. Empty when every target
        already existed and ``force`` was False.

    Raises:
        PermissionError: When deploying to app/host without sufficient privileges.
        ValueError: When the profile name is invalid.

    Note:
        Platform-specific paths (without profile):
        - Linux (user): ~/.config/{slug}/config.toml
        - macOS (user): ~/Library/Application Support/{vendor}/{app}/config.toml
        - Windows (user): %APPDATA%\{vendor}\{app}\config.toml
    """
    if profile is not None:
        validate_profile(profile)

    results = deploy_config(
        source=get_default_config_path(),
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        targets=[t.value for t in targets],
        force=force,
        set_permissions=set_permissions,
    )

    paths: list[Path] = []
    for result in results:
        if result.action in _DEPLOYED_ACTIONS:
            paths.append(result.destination)
        paths.extend(
            dot_d_result.destination
            for dot_d_result in result.dot_d_results
            if dot_d_result.action in _DEPLOYED_ACTIONS
        )
    logger.debug("Deployed configuration files", extra={"count": len(paths)})
    return paths


__all__ = [
    "deploy_configuration",
]
