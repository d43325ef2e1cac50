"""
Watson Workspace business objects.

This module defines the pydantic models that responses are deserialized into,
together with the enums naming the GraphQL fields, children and attributes of
each object. Field enums are what the query builders consume; every member
carries its GraphQL label and the Python type its values take.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WWModel(BaseModel):
    """Base model: camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class PageInfo(WWModel):
    """Cursor information returned for paginated collections."""

    start_cursor: Optional[str] = None
    end_cursor: Optional[str] = None
    has_next_page: bool = False
    has_previous_page: bool = False


class Person(WWModel):
    """A Watson Workspace user or application."""

    id: Optional[str] = None
    display_name: Optional[str] = None
    ext_id: Optional[str] = None
    email: Optional[str] = None
    photo_url: Optional[str] = None
    customer_id: Optional[str] = None
    ibm_unique_id: Optional[str] = Field(default=None, alias="ibmUniqueID")
    presence: Optional[str] = None
    email_addresses: Optional[List[str]] = None
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    created_by: Optional[Person] = None
    updated_by: Optional[Person] = None


class Message(WWModel):
    """A message in the conversation of a space."""

    id: Optional[str] = None
    content_type: Optional[str] = None
    content: Optional[str] = None
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    created_by: Optional[Person] = None
    updated_by: Optional[Person] = None


class MembersContainer(WWModel):
    """Members of a space, or people matching a query (wrapped in ``items``)."""

    page_info: Optional[PageInfo] = None
    items: List[Person] = Field(default_factory=list)


class MessagesContainer(WWModel):
    """Page of messages in a conversation."""

    page_info: Optional[PageInfo] = None
    items: List[Message] = Field(default_factory=list)


class Conversation(WWModel):
    """The message stream belonging to a space."""

    id: Optional[str] = None
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    created_by: Optional[Person] = None
    updated_by: Optional[Person] = None
    messages: Optional[MessagesContainer] = None

    @property
    def message_list(self) -> List[Message]:
        """Messages returned with the conversation, or an empty list."""
        return self.messages.items if self.messages else []


class Space(WWModel):
    """A Watson Workspace space."""

    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    members_updated: Optional[datetime] = None
    created_by: Optional[Person] = None
    updated_by: Optional[Person] = None
    members: Optional[MembersContainer] = None
    conversation: Optional[Conversation] = None

    @property
    def member_list(self) -> List[Person]:
        """Members returned with the space, or an empty list."""
        return self.members.items if self.members else []


class SpacesContainer(WWModel):
    """Page of spaces available to the user or application."""

    page_info: Optional[PageInfo] = None
    items: List[Space] = Field(default_factory=list)


class CreateSpaceContainer(WWModel):
    space: Optional[Space] = None


class DeleteSpaceContainer(WWModel):
    successful: bool = False


class UpdateSpaceContainer(WWModel):
    """Result of an updateSpace mutation."""

    member_ids_changed: List[str] = Field(default_factory=list)
    space: Optional[Space] = None


# Field, children and attribute enums


class WWFieldsAttributes(Enum):
    """
    Base for enums naming GraphQL fields and attributes.

    Each member is declared as ``(label, object_class_type)``. ``label`` is the
    name used in the query; ``object_class_type`` is the type an attribute
    value must have (for children enums, the model the child deserializes to).
    """

    def __init__(self, label: str, object_class_type: Type[Any] = str) -> None:
        self.label = label
        self.object_class_type = object_class_type

    @property
    def enum_class(self) -> Type[Any]:
        return self.object_class_type

    def __str__(self) -> str:
        return self.label


class PersonFields(WWFieldsAttributes):
    ID = ("id", str)
    DISPLAY_NAME = ("displayName", str)
    EXT_ID = ("extId", str)
    EMAIL = ("email", str)
    PHOTO_URL = ("photoUrl", str)
    CUSTOMER_ID = ("customerId", str)
    IBM_UNIQUE_ID = ("ibmUniqueID", str)
    PRESENCE = ("presence", str)
    EMAIL_ADDRESSES = ("emailAddresses", list)
    CREATED = ("created", datetime)
    UPDATED = ("updated", datetime)


class PersonChildren(WWFieldsAttributes):
    CREATED_BY = ("createdBy", Person)
    UPDATED_BY = ("updatedBy", Person)


class PersonAttributes(WWFieldsAttributes):
    ID = ("id", str)
    EMAIL = ("email", str)


class PeopleAttributes(WWFieldsAttributes):
    ID = ("id", list)
    NAME = ("name", str)
    FIRST = ("first", int)
    LAST = ("last", int)
    BEFORE = ("before", str)
    AFTER = ("after", str)


class SpaceFields(WWFieldsAttributes):
    ID = ("id", str)
    TITLE = ("title", str)
    DESCRIPTION = ("description", str)
    CREATED = ("created", datetime)
    UPDATED = ("updated", datetime)
    MEMBERS_UPDATED = ("membersUpdated", datetime)


class SpaceChildren(WWFieldsAttributes):
    CREATED_BY = ("createdBy", Person)
    UPDATED_BY = ("updatedBy", Person)
    MEMBERS = ("members", Person)
    CONVERSATION = ("conversation", Conversation)


class SpaceAttributes(WWFieldsAttributes):
    ID = ("id", str)


class SpacesAttributes(WWFieldsAttributes):
    FIRST = ("first", int)
    LAST = ("last", int)
    BEFORE = ("before", str)
    AFTER = ("after", str)


class MembersAttributes(WWFieldsAttributes):
    FIRST = ("first", int)
    LAST = ("last", int)
    BEFORE = ("before", str)
    AFTER = ("after", str)


class ConversationFields(WWFieldsAttributes):
    ID = ("id", str)
    CREATED = ("created", datetime)
    UPDATED = ("updated", datetime)


class ConversationChildren(WWFieldsAttributes):
    CREATED_BY = ("createdBy", Person)
    UPDATED_BY = ("updatedBy", Person)
    MESSAGES = ("messages", Message)


class ConversationAttributes(WWFieldsAttributes):
    ID = ("id", str)


class MessageFields(WWFieldsAttributes):
    ID = ("id", str)
    CONTENT_TYPE = ("contentType", str)
    CONTENT = ("content", str)
    CREATED = ("created", datetime)
    UPDATED = ("updated", datetime)


class MessageChildren(WWFieldsAttributes):
    CREATED_BY = ("createdBy", Person)
    UPDATED_BY = ("updatedBy", Person)


class MessageAttributes(WWFieldsAttributes):
    ID = ("id", str)


class MessagesAttributes(WWFieldsAttributes):
    FIRST = ("first", int)
    LAST = ("last", int)
    BEFORE = ("before", str)
    AFTER = ("after", str)
    OLDEST_TIMESTAMP = ("oldestTimestamp", datetime)
    MOST_RECENT_TIMESTAMP = ("mostRecentTimestamp", datetime)


class PageInfoFields(WWFieldsAttributes):
    START_CURSOR = ("startCursor", str)
    END_CURSOR = ("endCursor", str)
    HAS_NEXT_PAGE = ("hasNextPage", bool)
    HAS_PREVIOUS_PAGE = ("hasPreviousPage", bool)


PAGE_INFO_LABEL = "pageInfo"
