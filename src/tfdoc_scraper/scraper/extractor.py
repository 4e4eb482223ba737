"""Document extractor for legacy terraform.io documentation pages.

Turns a fetched page into a ResourceRecord (description plus arguments,
with argument blocks attached to their owners) or a ProviderRecord (the
resource names of a provider's sidebar). Missing page regions give an empty
record rather than an error.
"""

from loguru import logger

from tfdoc_scraper.scraper import layout
from tfdoc_scraper.scraper.base import ArgumentRecord, DocKind, ProviderRecord, ResourceRecord, to_kind
from tfdoc_scraper.scraper.dom import Node, parse_document


def extract(kind: DocKind | str, markup: str | bytes, name: str = "") -> ResourceRecord | ProviderRecord:
    """Extract the record for ``kind`` from an HTML page body."""
    kind = to_kind(kind)

    root = parse_document(markup)
    if kind is DocKind.RESOURCE:
        return extract_resource(root, name)
    return extract_provider(root, name)


def extract_resource(root: Node, name: str = "") -> ResourceRecord:
    """Extract description and arguments from a resource page."""
    region = f"{layout.CONTENT_REGION} > "
    first_paragraph = root.find(region + layout.DESCRIPTION)
    description = _clean(first_paragraph.text()) if first_paragraph else ""

    args: list[ArgumentRecord] = []
    nested: dict[int, list[ArgumentRecord]] = {}

    for i, arg_list in enumerate(root.find_all(region + layout.ARGUMENT_LIST)):
        items = [c for c in arg_list.children() if c.tag_name == layout.ARGUMENT_ITEM]
        if i == 0:
            args.extend(parse_argument_item(li) for li in items)
            continue

        owner = _owner_name(arg_list)
        owners = [j for j, arg in enumerate(args) if owner and arg.name == owner]
        if not owners:
            logger.debug(f"Dropping nested list #{i}: no argument named {owner!r}")
            continue
        for j in owners:
            nested.setdefault(j, []).extend(parse_argument_item(li) for li in items)

    args = [
        arg.model_copy(update={"nested_fields": tuple(nested[j])}) if j in nested else arg
        for j, arg in enumerate(args)
    ]
    logger.info(f"Extracted {len(args)} arguments from resource {name!r}")
    return ResourceRecord(name=name, description=description, args=tuple(args))


def parse_argument_item(li: Node) -> ArgumentRecord:
    """Parse one ``name - (Required) description`` list item."""
    name_node = li.find(layout.EMPHASIZED)
    text = li.text()

    parts = text.split(layout.DESCRIPTION_SEPARATOR, 1)
    description = _clean(parts[1]) if len(parts) == 2 else ""

    tokens = text.split(" ", layout.ITEM_TOKEN_LIMIT - 1)
    required = (
        len(tokens) > layout.REQUIRED_TOKEN_INDEX
        and layout.REQUIRED_MARKER in tokens[layout.REQUIRED_TOKEN_INDEX]
    )

    return ArgumentRecord(
        name=name_node.text() if name_node else "",
        description=description,
        required=required,
    )


def extract_provider(root: Node, name: str = "") -> ProviderRecord:
    """Collect resource names from every non-excluded sidebar section."""
    sidebars = root.find_all(layout.SIDEBAR)
    if not sidebars:
        logger.info(f"No sidebar found for provider {name!r}")
        return ProviderRecord(name=name)

    resource_names: list[str] = []
    sections = [section for sidebar in sidebars for section in sidebar.children()]
    for section in sections:
        text = section.text()
        if any(marker in text for marker in layout.EXCLUDED_SECTIONS):
            continue
        resource_names.extend(li.trimmed_text() for li in section.find_all(layout.SIDEBAR_ITEMS))

    logger.info(f"Extracted {len(resource_names)} resources from provider {name!r}")
    return ProviderRecord(name=name, resource_names=tuple(resource_names))


def _owner_name(arg_list: Node) -> str:
    """Text of the code/strong elements in the element preceding a list."""
    prev = arg_list.previous()
    if prev is None:
        return ""
    return "".join(n.text() for n in prev.find_all(layout.EMPHASIZED))


def _clean(text: str) -> str:
    return text.strip().replace("\n", "")
