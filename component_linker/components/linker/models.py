"""
Linker component input/output models.

LinkRequest is validated at the boundary; everything downstream trusts it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from component_linker.core.entities import Component, ComponentWithDependencies


class LinkRequest(BaseModel):
    """
    Input for one linking pass.

    written_dependencies are dependencies that were (re)written as
    standalone components in the same operation. write_package_json means
    the written components' manifests carry "main", so no entry-point file
    is generated for them.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    components_with_dependencies: list[ComponentWithDependencies] = Field(default_factory=list)
    written_components: list[Component]
    written_dependencies: list[Component] | None = None
    create_npm_link_files: bool = False
    write_package_json: bool = False

    @field_validator("written_dependencies", mode="before")
    @classmethod
    def flatten_dependencies(cls, value: object) -> object:
        """Accept dependencies grouped per component and flatten them."""
        if not isinstance(value, list | tuple):
            return value
        flat: list[object] = []
        for item in value:
            if isinstance(item, list | tuple):
                flat.extend(item)
            else:
                flat.append(item)
        return flat

    @field_validator("written_components")
    @classmethod
    def unique_ids(cls, value: list[Component]) -> list[Component]:
        ids = [c.id for c in value]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"written_components contains duplicate ids: {duplicates}")
        return value

    @property
    def all_components(self) -> list[Component]:
        """Written components followed by written dependencies, without duplicates."""
        components: dict[str, Component] = {}
        for component in [*self.written_components, *(self.written_dependencies or [])]:
            components.setdefault(component.id, component)
        return list(components.values())
