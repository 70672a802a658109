"""Package apizza as per-platform zipapp archives.

Archives contain only the ``apizza`` package; the runtime dependencies
must be installed in the interpreter that executes them.
"""

from __future__ import annotations

import logging
import re
import zipapp
from pathlib import Path

import apizza
from apizza.release.errors import InvalidTagError, TagExistsError

logger = logging.getLogger(__name__)

# target -> shebang interpreter (None: no shebang line)
TARGETS: dict[str, str | None] = {
    "linux": "/usr/bin/env python3",
    "darwin": "/usr/bin/env python3",
    "windows": None,
}

ENTRY_POINT = "apizza.cli:main"

_TAG_RE = re.compile(r"^v(?P<version>\d+\.\d+\.\d+(?:-[0-9A-Za-z.-]+)?)$")


def validate_tag(tag: str, existing: list[str]) -> str:
    """Check *tag* is well formed and unused; return its version part."""
    match = _TAG_RE.match(tag)
    if match is None:
        raise InvalidTagError(tag)
    if tag in existing:
        raise TagExistsError(tag)
    return match.group("version")


def artifact_name(version: str, target: str) -> str:
    return f"apizza-{version}-{target}.pyz"


def _package_filter(path: Path) -> bool:
    return path.parts[0] == "apizza" and "__pycache__" not in path.parts


def build_release(release_dir: Path, version: str = apizza.__version__) -> list[Path]:
    """Write one archive per target into *release_dir* and return their paths."""
    source_root = Path(apizza.__file__).resolve().parent.parent
    release_dir.mkdir(parents=True, exist_ok=True)

    built: list[Path] = []
    for target, interpreter in TARGETS.items():
        out = release_dir / artifact_name(version, target)
        zipapp.create_archive(
            source_root,
            target=out,
            interpreter=interpreter,
            main=ENTRY_POINT,
            filter=_package_filter,
            compressed=True,
        )
        logger.info("Built %s", out)
        built.append(out)
    return built
