"""Link component models."""

from pydantic import BaseModel, ConfigDict


class UrlComponents(BaseModel):
    """Normalized pieces of a repository link.

    Field order is the order the pieces are substituted into a
    ``base-url`` template.
    """

    model_config = ConfigDict(frozen=True)

    url: str = ""
    hostname: str = ""
    port: str = ""
    project: str = ""
    repo: str = ""
    path: str = ""
    rev: str = ""
    anchor: str = ""

    def as_values(self) -> dict[str, str]:
        """Return the components as an ordered template mapping."""
        return self.model_dump()
