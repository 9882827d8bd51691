from typing import Any, Dict, List
import jsonschema


# JSON Schema for the merged settings
CONFIG_SCHEMA = {
    "type": "object",
    "required": ["scan", "match", "output"],
    "properties": {
        "scan": {
            "type": "object",
            "required": ["base_dir", "extensions"],
            "properties": {
                "base_dir": {"type": "string", "minLength": 1},
                "extensions": {
                    "type": "array",
                    "items": {"type": "string", "pattern": r"^\.[^./\\]+$"},
                    "minItems": 1
                }
            }
        },
        "match": {
            "type": "object",
            "required": ["rule", "patterns"],
            "properties": {
                "rule": {"type": "string", "enum": ["substring", "regex"]},
                "patterns": {
                    "type": "array",
                    "items": {"type": "string", "minLength": 1},
                    "minItems": 1
                },
                "case_sensitive": {"type": "boolean"}
            }
        },
        "output": {
            "type": "object",
            "required": ["path"],
            "properties": {
                "path": {"type": "string", "minLength": 1},
                "title": {"type": "string", "minLength": 1}
            }
        },
        "logging": {
            "type": "object",
            "properties": {
                "file": {"type": ["string", "null"]}
            }
        }
    }
}


def validate_config(config: Dict[str, Any]) -> List[str]:
    """Validate settings and return a list of problems (empty when valid)."""
    validator = jsonschema.Draft7Validator(CONFIG_SCHEMA)
    errors = []

    for error in sorted(validator.iter_errors(config), key=lambda e: list(e.path)):
        location = ".".join(str(p) for p in error.path) or "<root>"
        errors.append(f"{location}: {error.message}")

    return errors
