"""HCL generator: renders scraped records as Terraform configuration skeletons."""

from tfdoc_scraper.scraper.base import ArgumentRecord, ProviderRecord, ResourceRecord

INDENT = "  "
BLOCK_LABEL = "example"


def generate_hcl(record: ResourceRecord | ProviderRecord, required_only: bool = False) -> str:
    """Render a record as HCL text.

    Resource arguments become ``name = ""`` attributes preceded by their
    description; arguments with nested fields become nested blocks. With
    ``required_only`` optional arguments, and the blocks they own, are left out.
    """
    if isinstance(record, ProviderRecord):
        lines = [f'provider "{record.name}" {{}}', ""]
        lines += [f"# {name}" for name in record.resource_names]
    else:
        lines = [f'resource "{record.name}" "{BLOCK_LABEL}" {{']
        lines += _render_args(record.args, 1, required_only)
        lines.append("}")
    return "\n".join(lines) + "\n"


def _render_args(args: tuple[ArgumentRecord, ...], depth: int, required_only: bool) -> list[str]:
    pad = INDENT * depth
    lines = []
    for arg in args:
        if required_only and not arg.required:
            continue
        if arg.description:
            lines.append(f"{pad}# {arg.description}")
        if arg.nested_fields:
            lines.append(f"{pad}{arg.name} {{")
            lines += _render_args(arg.nested_fields, depth + 1, required_only)
            lines.append(f"{pad}}}")
        else:
            lines.append(f'{pad}{arg.name} = ""')
    return lines
