"""Pick the climate file whose temperature and downfall best match a target."""

from __future__ import annotations

import json
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator


@dataclass(frozen=True)
class ClimateData:
    """Climate values of one biome description."""

    temperature: float = 0.0
    downfall: float = 0.0


def _number(value: Any, key: str) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number, got {value!r}")
    return float(value)


def _climate_from(document: Any) -> ClimateData:
    if document is None:
        return ClimateData()
    if not isinstance(document, dict):
        raise ValueError("climate document must be a JSON object")
    folded = {str(key).lower(): value for key, value in document.items()}
    return ClimateData(
        temperature=_number(folded.get("temperature"), "temperature"),
        downfall=_number(folded.get("downfall"), "downfall"),
    )


def _extension(name: str) -> str:
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def _json_files(directory: Path) -> Iterator[Path]:
    """Yield ``.json`` files below ``directory`` in lexical walk order."""
    try:
        entries = sorted(os.scandir(directory), key=lambda entry: entry.name)
    except OSError:
        return
    for entry in entries:
        path = directory / entry.name
        if entry.is_dir(follow_symlinks=False):
            yield from _json_files(path)
        elif _extension(entry.name) == ".json":
            yield path


def load_closest_file(
    directory: str | os.PathLike[str],
    target_temperature: float,
    target_downfall: float,
) -> tuple[ClimateData, Path]:
    """Return the climate data and path of the closest ``.json`` file.

    Distance is the squared Euclidean distance in (temperature, downfall);
    on ties the file met first in the walk wins. Raises FileNotFoundError when
    no file matches, and ValueError for a file that is not valid climate JSON.
    """
    best: tuple[ClimateData, Path] | None = None
    best_distance = math.inf
    for path in _json_files(Path(directory)):
        climate = _climate_from(json.loads(path.read_bytes()))
        distance = (climate.temperature - target_temperature) ** 2 + (
            climate.downfall - target_downfall
        ) ** 2
        if distance < best_distance:
            best_distance = distance
            best = (climate, path)
    if best is None:
        raise FileNotFoundError(f"no suitable climate files found in {directory}")
    return best