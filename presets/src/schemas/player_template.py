"""
Pydantic models (schemas) for the player templates file.
Used to validate the document envelope and each record's header fields.
Color slots stay as raw values; their meaning depends on the document version.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from common.src.constants import DEFAULT_TEMPLATE_VERSION


class PlayerTemplatesDocument(BaseModel):
    """
    Schema for the top level of a player templates file.
    """

    model_config = ConfigDict(extra="allow", strict=True)

    version: int = Field(DEFAULT_TEMPLATE_VERSION, alias="Version", ge=1)
    player_templates: List[Any] = Field(alias="PlayerTemplates")

    @field_validator("version", mode="before")
    @classmethod
    def null_version_is_default(cls, value: Any) -> Any:
        """A null "Version" reads the same as an absent one."""
        if value is None:
            return DEFAULT_TEMPLATE_VERSION
        return value


class PlayerTemplateRecord(BaseModel):
    """
    Schema for one record in "PlayerTemplates".

    Only "Name" is required. Unknown keys (the color slots) are kept as extras.
    """

    model_config = ConfigDict(extra="allow", strict=True)

    name: str = Field(alias="Name")
    face: Optional[str] = Field(None, alias="Face")
    hair_type: Optional[str] = Field(None, alias="HairType")
    facehair_type: Optional[str] = Field(None, alias="FacehairType")
    hat_type: Optional[str] = Field(None, alias="HatType")
    glasses_type: Optional[str] = Field(None, alias="GlassesType")

    def present_fields(self) -> Dict[str, Any]:
        """
        Label -> value for every key present in the record.

        Keys holding null are left out, so null and absent read the same.
        """
        return self.model_dump(by_alias=True, exclude_none=True)
