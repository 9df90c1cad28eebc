from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Paths:
    schema_dir: Path
    userdata_dir: Path


def get_paths() -> Paths:
    # schemas ship inside the package; userdata is relative to where the tool runs
    package_dir = Path(__file__).resolve().parent
    return Paths(
        schema_dir=package_dir / "data" / "schemas",
        userdata_dir=Path.cwd() / "userdata",
    )
