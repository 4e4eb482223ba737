"""JSON / YAML output for scraped records."""

import json

import yaml

from tfdoc_scraper.scraper.base import ProviderRecord, ResourceRecord

FORMATS = ("json", "yaml")


def record_to_dict(record: ResourceRecord | ProviderRecord) -> dict:
    return record.model_dump(mode="json")


def dump_record(record: ResourceRecord | ProviderRecord, fmt: str = "json") -> str:
    """Serialize a record as ``json`` or ``yaml`` text."""
    data = record_to_dict(record)
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    raise ValueError(f"Unsupported output format: {fmt}")
