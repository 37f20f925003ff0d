"""
Data Models for Band Documents

This file describes the shape of a band's MongoDB document, as far as the
membership backfill needs it.
Each band embeds its list of members, every member holding a single role.

It defines 2 models:
    BandMember : A member entry embedded in a band document.
    Band : The band document itself, with the derived uid arrays.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

ADMIN_ROLE = "admin"
EDITOR_ROLE = "editor"


class BandMember(BaseModel):
    """
    Model for a member entry of a band

    Attributes:
        uid (str): Unique Identifier for a user, a user id.
        role (Any): Role of the member in the band,
                    e.g. "admin", "editor" or "member".
    """

    uid: str = Field(..., description="User ID")
    role: Any = None

    model_config = ConfigDict(extra="allow")


class Band(BaseModel):
    """
    Model for a band document

    Attributes:
        id (str): String form of the document's _id.
        name (Any): Display name of the band, only used for console lines.
        members (List[BandMember]): Members of the band, in stored order.
        memberUids (Any): Stored uids of all members, not validated.
        adminUids (Any): Stored uids of admins, not validated.
        editorUids (Any): Stored uids of editors, not validated.

    Field Validators:
        transform_id: Converts the stored _id (ObjectId or str) to a string.
        default_members: Treats a missing or falsy members value as empty.
    """

    id: str = Field(..., alias="_id")
    name: Any = None
    members: List[BandMember] = Field(default_factory=list)
    memberUids: Any = None
    adminUids: Any = None
    editorUids: Any = None

    @field_validator("id", mode="before")
    @classmethod
    def transform_id(cls, v: Any):
        return str(v)

    @field_validator("members", mode="before")
    @classmethod
    def default_members(cls, v):
        if not v:
            return []
        return v

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
    )
