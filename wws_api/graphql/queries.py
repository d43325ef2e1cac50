"""
Pre-built Watson Workspace queries and mutations.

Each class wraps one ObjectDataSenderBuilder tree with an operation name and
offers classmethod constructors for the standard requests the endpoint
methods use. Callers can start from those and adjust the tree through
``query_object`` before sending.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from ..exceptions import BuilderError
from .builder import InputDataSenderBuilder, ObjectDataSenderBuilder
from .models import GraphQLOperationType, GraphQLRequest
from ..models import (
    ConversationAttributes,
    ConversationChildren,
    ConversationFields,
    MembersAttributes,
    MessageAttributes,
    MessageChildren,
    MessageFields,
    MessagesAttributes,
    PeopleAttributes,
    PersonAttributes,
    PersonChildren,
    PersonFields,
    SpaceAttributes,
    SpaceChildren,
    SpaceFields,
    SpacesAttributes,
    WWFieldsAttributes,
)

DEFAULT_PAGE_SIZE = 100
DEFAULT_MESSAGE_PAGE_SIZE = 50

BASIC_PERSON_FIELDS = (
    PersonFields.ID,
    PersonFields.DISPLAY_NAME,
    PersonFields.PHOTO_URL,
    PersonFields.EMAIL,
)

FULL_PERSON_FIELDS = (
    PersonFields.ID,
    PersonFields.DISPLAY_NAME,
    PersonFields.EMAIL,
    PersonFields.PHOTO_URL,
    PersonFields.EXT_ID,
    PersonFields.EMAIL_ADDRESSES,
    PersonFields.CUSTOMER_ID,
    PersonFields.CREATED,
    PersonFields.UPDATED,
)


def basic_person(label: WWFieldsAttributes) -> ObjectDataSenderBuilder:
    """createdBy / updatedBy style child with the basic person fields."""
    return ObjectDataSenderBuilder(label.label, fields=BASIC_PERSON_FIELDS)


def _space_object(object_name: str, has_items: bool = False) -> ObjectDataSenderBuilder:
    return (
        ObjectDataSenderBuilder(object_name, has_items, fields=SpaceFields)
        .add_child(basic_person(SpaceChildren.CREATED_BY))
        .add_child(basic_person(SpaceChildren.UPDATED_BY))
    )


def _messages_object(first: int = DEFAULT_MESSAGE_PAGE_SIZE) -> ObjectDataSenderBuilder:
    return (
        ObjectDataSenderBuilder(ConversationChildren.MESSAGES.label, has_items=True)
        .add_attribute(MessagesAttributes.FIRST, first)
        .add_fields(*MessageFields)
        .add_child(basic_person(MessageChildren.CREATED_BY))
    )


class BaseGraphQLQuery:
    """A named operation wrapping one object builder."""

    operation_type = GraphQLOperationType.QUERY

    def __init__(
        self,
        operation_name: Optional[str] = None,
        query_object: Optional[ObjectDataSenderBuilder] = None,
    ):
        """
        Initialize the operation.

        Args:
            operation_name: GraphQL operation name
            query_object: Root object of the selection
        """
        self.operation_name = operation_name
        self.query_object = query_object

    def set_operation_name(self, operation_name: str) -> BaseGraphQLQuery:
        self.operation_name = operation_name
        return self

    def set_query_object(self, query_object: ObjectDataSenderBuilder) -> BaseGraphQLQuery:
        self.query_object = query_object
        return self

    def build(self, pretty: bool = False) -> str:
        """
        Render the full operation document.

        Args:
            pretty: Emit one entry per line with indentation

        Returns:
            GraphQL document, e.g. ``query getMe {me {id}}``
        """
        if self.query_object is None:
            raise BuilderError("No query object set")

        operation_line = self.operation_type.value
        if self.operation_name:
            operation_line += f" {self.operation_name}"

        if pretty:
            return f"{operation_line} {{\n{self.query_object.to_string(1)}\n}}"
        return f"{operation_line} {{{self.query_object.build()}}}"

    def to_request(
        self, variables: Optional[Dict[str, Any]] = None, pretty: bool = False
    ) -> GraphQLRequest:
        return GraphQLRequest(
            query=self.build(pretty),
            variables=variables or {},
            operation_name=self.operation_name,
            operation_type=self.operation_type,
        )

    def __str__(self) -> str:
        return self.build()


class BaseGraphQLMutation(BaseGraphQLQuery):
    """A named mutation wrapping one object builder."""

    operation_type = GraphQLOperationType.MUTATION


class SpacesGraphQLQuery(BaseGraphQLQuery):
    """Query for the spaces available to the user or application."""

    @classmethod
    def build_standard_get_spaces_query(cls, first: int = DEFAULT_PAGE_SIZE) -> SpacesGraphQLQuery:
        """
        Spaces with id, title, description, dates, creators and conversation id.

        Args:
            first: Number of spaces to return

        Returns:
            SpacesGraphQLQuery named ``getSpaces``
        """
        conversation = ObjectDataSenderBuilder(
            SpaceChildren.CONVERSATION.label,
            fields=(ConversationFields.ID, ConversationFields.CREATED, ConversationFields.UPDATED),
        )
        spaces = (
            _space_object("spaces", has_items=True)
            .add_attribute(SpacesAttributes.FIRST, first)
            .add_page_info()
            .add_child(conversation)
        )
        return cls("getSpaces", spaces)


class SpaceGraphQLQuery(BaseGraphQLQuery):
    """Query for a single space with its members and latest messages."""

    @classmethod
    def build_space_graph_query_with_space_id(cls, space_id: str) -> SpaceGraphQLQuery:
        members = (
            ObjectDataSenderBuilder(SpaceChildren.MEMBERS.label, has_items=True)
            .add_attribute(MembersAttributes.FIRST, DEFAULT_PAGE_SIZE)
            .add_fields(*BASIC_PERSON_FIELDS)
        )
        conversation = (
            ObjectDataSenderBuilder(SpaceChildren.CONVERSATION.label, fields=ConversationFields)
            .add_child(_messages_object())
        )
        space = (
            _space_object("space")
            .add_attribute(SpaceAttributes.ID, space_id)
            .add_child(members)
            .add_child(conversation)
        )
        return cls("getSpace", space)


class SpaceMembersGraphQLQuery(BaseGraphQLQuery):
    """Query for the members of a space."""

    @classmethod
    def build_space_member_graph_query_by_space_id(
        cls, space_id: str, first: int = DEFAULT_PAGE_SIZE
    ) -> SpaceMembersGraphQLQuery:
        members = (
            ObjectDataSenderBuilder(SpaceChildren.MEMBERS.label, has_items=True)
            .add_attribute(MembersAttributes.FIRST, first)
            .add_page_info()
            .add_fields(*BASIC_PERSON_FIELDS)
            .add_field(PersonFields.EXT_ID)
        )
        space = (
            ObjectDataSenderBuilder("space")
            .add_attribute(SpaceAttributes.ID, space_id)
            .add_child(members)
        )
        return cls("getSpaceMembers", space)


class PersonGraphQLQuery(BaseGraphQLQuery):
    """Query for the current user or one person."""

    @staticmethod
    def _person_object(object_name: str) -> ObjectDataSenderBuilder:
        return (
            ObjectDataSenderBuilder(object_name, fields=FULL_PERSON_FIELDS)
            .add_child(basic_person(PersonChildren.CREATED_BY))
            .add_child(basic_person(PersonChildren.UPDATED_BY))
        )

    @classmethod
    def build_my_profile_query(cls) -> PersonGraphQLQuery:
        return cls("getMe", cls._person_object("me"))

    @classmethod
    def build_person_query_by_id(cls, person_id: str) -> PersonGraphQLQuery:
        if not person_id:
            return cls.build_my_profile_query()
        person = cls._person_object("person").add_attribute(PersonAttributes.ID, person_id)
        return cls("getPerson", person)

    @classmethod
    def build_person_query_by_email(cls, email: str) -> PersonGraphQLQuery:
        if not email:
            return cls.build_my_profile_query()
        person = cls._person_object("person").add_attribute(PersonAttributes.EMAIL, email)
        return cls("getPerson", person)


class PeopleGraphQLQuery(BaseGraphQLQuery):
    """
    Query for people matching ids or a name.

    Filters are added with ``add_attribute``:
    ```python
    query = PeopleGraphQLQuery().add_attribute(PeopleAttributes.NAME, "Paul")
    ```
    """

    def __init__(self, operation_name: str = "getPeople"):
        people = ObjectDataSenderBuilder("people", has_items=True, fields=BASIC_PERSON_FIELDS)
        super().__init__(operation_name, people)

    def add_attribute(self, key: PeopleAttributes, value: Any) -> PeopleGraphQLQuery:
        self.query_object.add_attribute(key, value)
        return self

    def remove_attribute(self, key: PeopleAttributes) -> PeopleGraphQLQuery:
        self.query_object.remove_attribute(key)
        return self


class ProfileGraphQLQuery(BaseGraphQLQuery):
    """Query for a profile; an empty id means the current user."""

    def __init__(self, profile_id: str = ""):
        if profile_id == "":
            operation_name, query = "getMyself", ObjectDataSenderBuilder("me")
        else:
            operation_name = "getProfile"
            query = ObjectDataSenderBuilder("person").add_attribute(
                PersonAttributes.ID, profile_id
            )
        query.add_fields(*FULL_PERSON_FIELDS)
        query.add_child(basic_person(PersonChildren.CREATED_BY))
        query.add_child(basic_person(PersonChildren.UPDATED_BY))
        super().__init__(operation_name, query)


class ConversationGraphQLQuery(BaseGraphQLQuery):
    """Query for a conversation and its first page of messages."""

    @classmethod
    def build_standard_conversation_query_by_id(
        cls, conversation_id: str, first: int = DEFAULT_MESSAGE_PAGE_SIZE
    ) -> ConversationGraphQLQuery:
        conversation = (
            ObjectDataSenderBuilder("conversation", fields=ConversationFields)
            .add_attribute(ConversationAttributes.ID, conversation_id)
            .add_child(basic_person(ConversationChildren.CREATED_BY))
            .add_child(basic_person(ConversationChildren.UPDATED_BY))
            .add_child(_messages_object(first).add_page_info())
        )
        return cls("getConversation", conversation)


class MessageGraphQLQuery(BaseGraphQLQuery):
    """Query for a single message."""

    @classmethod
    def build_message_graph_query_with_message_id(cls, message_id: str) -> MessageGraphQLQuery:
        message = (
            ObjectDataSenderBuilder("message", fields=MessageFields)
            .add_attribute(MessageAttributes.ID, message_id)
            .add_child(basic_person(MessageChildren.CREATED_BY))
            .add_child(basic_person(MessageChildren.UPDATED_BY))
        )
        return cls("getMessage", message)


class UpdateSpaceMemberOperation(str, Enum):
    """Whether updateSpace adds or removes the listed members."""

    ADD = "ADD"
    REMOVE = "REMOVE"


class SpaceCreateGraphQLMutation(BaseGraphQLMutation):
    """Mutation creating a space."""

    @classmethod
    def _build(cls, title: str, members: Optional[List[str]] = None) -> SpaceCreateGraphQLMutation:
        payload = InputDataSenderBuilder({"title": title})
        if members is not None:
            payload.add("members", list(members))
        space = ObjectDataSenderBuilder(
            "space", fields=(SpaceFields.ID, SpaceFields.TITLE, SpaceFields.DESCRIPTION)
        )
        create = (
            ObjectDataSenderBuilder("createSpace")
            .add_attribute("input", payload)
            .add_child(space)
        )
        return cls("createSpace", create)

    @classmethod
    def build_create_space_mutation_with_space_title(cls, title: str) -> SpaceCreateGraphQLMutation:
        return cls._build(title)

    @classmethod
    def build_create_space_mutation_with_space_title_and_members(
        cls, title: str, members: List[str]
    ) -> SpaceCreateGraphQLMutation:
        return cls._build(title, members)


class SpaceDeleteGraphQLMutation(BaseGraphQLMutation):
    """Mutation deleting a space."""

    @classmethod
    def build_delete_space_mutation(cls, space_id: str) -> SpaceDeleteGraphQLMutation:
        delete = (
            ObjectDataSenderBuilder("deleteSpace", fields=("successful",))
            .add_attribute("input", InputDataSenderBuilder({"id": space_id}))
        )
        return cls("deleteSpace", delete)


class SpaceUpdateGraphQLMutation(BaseGraphQLMutation):
    """Mutation changing the title and/or members of a space."""

    @classmethod
    def _build(
        cls,
        space_id: str,
        title: Optional[str] = None,
        members: Optional[List[str]] = None,
        operation: Optional[UpdateSpaceMemberOperation] = None,
    ) -> SpaceUpdateGraphQLMutation:
        payload = InputDataSenderBuilder({"id": space_id})
        if title is not None:
            payload.add("title", title)
        if members is not None:
            if operation is None:
                raise BuilderError("A member operation is required when updating members")
            payload.add("members", list(members))
            payload.add("memberOperation", operation)

        update = ObjectDataSenderBuilder("updateSpace").add_attribute("input", payload)
        if members is not None:
            update.add_field("memberIdsChanged")
        update.add_child(
            ObjectDataSenderBuilder("space", fields=(SpaceFields.ID, SpaceFields.TITLE))
        )
        return cls("updateSpace", update)

    @classmethod
    def build_update_space_mutation_change_title(
        cls, space_id: str, title: str
    ) -> SpaceUpdateGraphQLMutation:
        return cls._build(space_id, title=title)

    @classmethod
    def build_update_space_mutation_change_members(
        cls,
        space_id: str,
        members: List[str],
        operation: UpdateSpaceMemberOperation,
    ) -> SpaceUpdateGraphQLMutation:
        return cls._build(space_id, members=members, operation=operation)

    @classmethod
    def build_update_space_mutation_change_title_and_members(
        cls,
        space_id: str,
        title: str,
        members: List[str],
        operation: UpdateSpaceMemberOperation,
    ) -> SpaceUpdateGraphQLMutation:
        return cls._build(space_id, title=title, members=members, operation=operation)
