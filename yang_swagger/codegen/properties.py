"""
Swagger property models produced by the type converter.

Properties are frozen pydantic models: equal when their class and fields are
equal, and never modified after construction.
"""

from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from yang_swagger.config import settings


class Property(BaseModel):
    """Base for every property variant."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    swagger_type: ClassVar[Optional[str]] = None
    swagger_format: ClassVar[Optional[str]] = None

    def to_swagger(self) -> Dict[str, Any]:
        """Render as a Swagger property object (unset fields are omitted)."""
        schema: Dict[str, Any] = {}
        if self.swagger_type:
            schema["type"] = self.swagger_type
        if self.swagger_format:
            schema["format"] = self.swagger_format
        schema.update(self.model_dump(by_alias=True, exclude_none=True))
        return schema


class BooleanProperty(Property):
    swagger_type: ClassVar[Optional[str]] = "boolean"


class BaseIntegerProperty(Property):
    swagger_type: ClassVar[Optional[str]] = "integer"


class IntegerProperty(BaseIntegerProperty):
    swagger_format: ClassVar[Optional[str]] = "int32"


class LongProperty(BaseIntegerProperty):
    swagger_format: ClassVar[Optional[str]] = "int64"


class StringProperty(Property):
    swagger_type: ClassVar[Optional[str]] = "string"

    min_length: Optional[int] = Field(default=None, alias="minLength")
    max_length: Optional[int] = Field(default=None, alias="maxLength")
    pattern: Optional[str] = None


class RefProperty(Property):
    """Reference to a model registered under `definitions`."""

    ref: str

    @property
    def simple_ref(self) -> str:
        prefix = settings.DEFINITIONS_PREFIX
        if self.ref.startswith(prefix):
            return self.ref[len(prefix):]
        return self.ref

    def get_ref(self) -> str:
        if self.ref.startswith("#/"):
            return self.ref
        return f"{settings.DEFINITIONS_PREFIX}{self.ref}"

    def to_swagger(self) -> Dict[str, Any]:
        return {"$ref": self.get_ref()}
