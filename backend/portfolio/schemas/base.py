"""Base Pydantic model exposing camelCase field names on the wire."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict:
        """Dump the top-level fields the caller actually sent; sub-objects are dumped whole."""
        data = self.model_dump(mode="json", by_alias=True)
        sent = {type(self).model_fields[name].alias or name for name in self.model_fields_set}
        return {key: value for key, value in data.items() if key in sent}
