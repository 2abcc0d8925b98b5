"""Raw document kind declarations.

These pydantic models accept the partial, nested declaration a caller
writes (snake_case or camelCase keys). They are only read by the
PermissionResolver, which turns them into a fully populated DocumentConfig.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ....config.constants import Role


class OptionsModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )


class OwnedPermissionOptions(OptionsModel):
    role: Role
    public: bool = False


class AdvancePermissionOptions(OptionsModel):
    get_all: Optional[Role] = None
    get_one: Optional[Role] = None
    create: Optional[Role] = None
    edit: Optional[OwnedPermissionOptions] = None
    delete: Optional[OwnedPermissionOptions] = None
    get_drafts: Optional[OwnedPermissionOptions] = None


class PermissionOptions(OptionsModel):
    read: Optional[Role] = None
    write: Optional[Role] = None
    advance: Optional[AdvancePermissionOptions] = None


class CommentOptions(OptionsModel):
    enabled: bool = False
    can_write: Optional[Role] = None
    need_to_verify: Optional[bool] = None
    can_verify: Optional[OwnedPermissionOptions] = None
    can_manage: Optional[Role] = None


class CategoryAdvancePermissionOptions(OptionsModel):
    get_all: Optional[Role] = None
    get_all_and_docs: Optional[Role] = None
    get_one: Optional[Role] = None
    create: Optional[Role] = None
    use: Optional[OwnedPermissionOptions] = None
    edit: Optional[OwnedPermissionOptions] = None
    delete: Optional[OwnedPermissionOptions] = None


class CategoryPermissionOptions(OptionsModel):
    read: Optional[Role] = None
    write: Optional[Role] = None
    advance: Optional[CategoryAdvancePermissionOptions] = None


class CategoryOptions(OptionsModel):
    enabled: bool = False
    permissions: Optional[CategoryPermissionOptions] = None


class FieldSpecOptions(OptionsModel):
    """One field of the storage schema descriptor."""

    type: str = "any"
    required: bool = False
    default: Any = None
    unique: bool = False


class DocumentOptions(OptionsModel):
    """Declaration of a document kind."""

    name: str = Field(min_length=1)
    database_schema: Dict[str, Union[FieldSpecOptions, str]] = Field(default_factory=dict)
    slug_base: Optional[str] = None
    permissions: Optional[PermissionOptions] = None
    comments: Optional[CommentOptions] = None
    category: Optional[CategoryOptions] = None
    indexes: List[Dict[str, int]] = Field(default_factory=list)
    search_on: List[str] = Field(default_factory=list)
    sort_fields: List[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        normalized = v.strip()
        if not normalized.replace("_", "").isalnum():
            raise ValueError("Name must contain only alphanumeric characters and underscores")
        return normalized

    @field_validator("database_schema")
    @classmethod
    def expand_shorthand(cls, v: Dict[str, Any]) -> Dict[str, FieldSpecOptions]:
        # "title": "string" is shorthand for {"type": "string"}
        return {
            name: FieldSpecOptions(type=spec) if isinstance(spec, str) else spec
            for name, spec in v.items()
        }
