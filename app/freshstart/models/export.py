"""Model of the package manager's export document.

``winget export`` writes JSON shaped like::

    {
      "$schema": "https://aka.ms/winget-packages.schema.2.0.json",
      "Sources": [
        {
          "SourceDetails": {"Name": "winget", "Identifier": "...", ...},
          "Packages": [{"PackageIdentifier": "Git.Git"}, ...]
        }
      ]
    }

Only the parts needed for counting and listing are modelled; everything
else is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


class ExportPackage(BaseModel):
    """A single exported package."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    package_id: str = Field(alias="PackageIdentifier")


class ExportSourceDetails(BaseModel):
    """Metadata describing the package source."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str | None = Field(default=None, alias="Name")


class ExportSource(BaseModel):
    """A package source and the packages exported from it."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    details: ExportSourceDetails | None = Field(default=None, alias="SourceDetails")
    packages: list[ExportPackage] = Field(default_factory=list, alias="Packages")


class ExportDocument(BaseModel):
    """Top-level export document."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    sources: list[ExportSource] = Field(default_factory=list, alias="Sources")

    @property
    def package_count(self) -> int:
        """Total number of packages across all sources."""
        return sum(len(source.packages) for source in self.sources)

    def package_ids(self) -> list[str]:
        """Return all package identifiers in document order."""
        return [pkg.package_id for source in self.sources for pkg in source.packages]
