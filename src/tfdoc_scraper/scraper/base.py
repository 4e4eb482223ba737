"""Data models for scraped Terraform documentation.

Both extraction paths (resource pages and provider index pages) produce
these immutable records. Nothing here outlives the call that built it.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator

from tfdoc_scraper.errors import InvalidKindError, InvalidNameError

NAME_SEPARATOR = "_"


class DocKind(str, Enum):
    PROVIDER = "provider"
    RESOURCE = "resource"


def to_kind(kind: "DocKind | str") -> DocKind:
    """Coerce a kind string, raising InvalidKindError for anything unknown."""
    try:
        return DocKind(kind)
    except ValueError:
        raise InvalidKindError(str(kind)) from None


def split_resource_name(name: str) -> tuple[str, str]:
    """Split ``aws_lambda_function`` into ``("aws", "lambda_function")``."""
    if NAME_SEPARATOR not in name:
        raise InvalidNameError(name)
    provider, rest = name.split(NAME_SEPARATOR, 1)
    return provider, rest


class DocRequest(BaseModel):
    """A document kind plus the provider or resource name to look up.

    Resource names must read ``<provider>_<resource>``; anything else raises
    InvalidNameError as is (it is not wrapped in a pydantic ValidationError).
    """

    model_config = ConfigDict(frozen=True)

    kind: DocKind
    name: str

    @model_validator(mode="after")
    def _check_resource_name(self) -> "DocRequest":
        if self.kind is DocKind.RESOURCE:
            split_resource_name(self.name)
        return self


class ResolvedUrl(BaseModel):
    """A documentation URL that answered the existence check with HTTP 200."""

    model_config = ConfigDict(frozen=True)

    kind: DocKind
    name: str
    url: str


class ArgumentRecord(BaseModel):
    """One documented argument, with the fields of its block if it has one."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    required: bool = False
    nested_fields: tuple["ArgumentRecord", ...] = ()


class ResourceRecord(BaseModel):
    """A resource page: description plus top-level arguments in page order."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    args: tuple[ArgumentRecord, ...] = ()

    def get_arg(self, name: str) -> ArgumentRecord | None:
        return next((a for a in self.args if a.name == name), None)


class ProviderRecord(BaseModel):
    """A provider index page: resource names listed in its sidebar."""

    model_config = ConfigDict(frozen=True)

    name: str
    resource_names: tuple[str, ...] = ()
