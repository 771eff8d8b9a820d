from pydantic import BaseModel, Field


class NamespaceRules(BaseModel):
    package_scope: str = "@bit"
    modules_dir: str = "node_modules"


class ManifestRules(BaseModel):
    name: str = "package.json"
    indent: int = Field(default=4, ge=0, le=8)


class EntryPointRules(BaseModel):
    index_name: str = "index"


class ConcurrencyRules(BaseModel):
    max_workers: int = Field(default=8, ge=1)


class LinkerRules(BaseModel):
    schema_version: int = 1
    namespace: NamespaceRules = Field(default_factory=NamespaceRules)
    manifest: ManifestRules = Field(default_factory=ManifestRules)
    entry_points: EntryPointRules = Field(default_factory=EntryPointRules)
    concurrency: ConcurrencyRules = Field(default_factory=ConcurrencyRules)
    link_templates: dict[str, str] = Field(default_factory=dict)  # extension -> template
