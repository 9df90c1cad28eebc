from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError as InvalidSchema


class SchemaError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise SchemaError(f"Missing schema file: {path}") from e
    except json.JSONDecodeError as e:
        raise SchemaError(f"Invalid JSON in {path}: {e}") from e


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: e.path)
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise SchemaError("\n".join(lines))


@dataclass
class SchemaService:
    """Loads the packaged JSON schemas once and validates records against them."""

    schema_dir: Path
    _cache: dict[str, object] = field(default_factory=dict)

    def schema(self, name: str) -> object:
        if name not in self._cache:
            schema = _load_json(self.schema_dir / f"{name}.schema.json")
            try:
                Draft202012Validator.check_schema(schema)
            except InvalidSchema as e:
                raise SchemaError(f"Invalid schema {name}: {e.message}") from e
            self._cache[name] = schema
        return self._cache[name]

    def validate(self, name: str, instance: object) -> None:
        validate_json(instance, self.schema(name), context=name)

    def validate_all(self) -> None:
        for path in sorted(self.schema_dir.glob("*.schema.json")):
            self.schema(path.name.removesuffix(".schema.json"))
