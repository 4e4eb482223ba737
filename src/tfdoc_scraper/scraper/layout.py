"""Selectors and markers describing the legacy terraform.io page layout.

Resource pages keep their body in ``#inner``: a leading paragraph describing
the resource, then one bullet list of top-level arguments, then further
lists documenting argument blocks. Each block list follows an element that
names its owning argument in ``code`` or ``strong`` text. Only one level of
nesting is represented: a nested argument never owns a further list.

Provider index pages list their resources in the ``.docs-sidenav`` sidebar,
one section per category.
"""

# Resource pages
CONTENT_REGION = "#inner"
DESCRIPTION = "p"
ARGUMENT_LIST = "ul"
ARGUMENT_ITEM = "li"
EMPHASIZED = "code, strong"

# Argument items read as "name - (Required) description..."
DESCRIPTION_SEPARATOR = "-"
REQUIRED_MARKER = "Required"
REQUIRED_TOKEN_INDEX = 2
ITEM_TOKEN_LIMIT = 4

# Provider pages
SIDEBAR = ".docs-sidenav"
SIDEBAR_ITEMS = ".nav-visible > li"
EXCLUDED_SECTIONS = ("Guides", "Data Sources", "Provider")
