"""Shared base for models persisted as Firestore documents.

Firestore field names are camelCase; attributes are snake_case and the
alias generator bridges the two.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FirestoreModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_firestore(self, exclude=None, exclude_unset: bool = False) -> dict:
        """Document payload: camelCase keys, without the document id.

        With exclude_unset only the fields the caller sent are kept, for
        merge writes that must not reset the rest to defaults.
        """
        excluded = {"id"} | set(exclude or ())
        return self.model_dump(by_alias=True, exclude=excluded, exclude_unset=exclude_unset)

    def to_api(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
