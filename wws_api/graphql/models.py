"""
GraphQL request and response models.

This module defines the request payload sent to the Workspace endpoint and
the containers responses are unwrapped from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, PrivateAttr, ValidationError

from ..exceptions import ContentError, NoDataError
from ..models import (
    Conversation,
    CreateSpaceContainer,
    DeleteSpaceContainer,
    MembersContainer,
    Message,
    Person,
    Space,
    SpacesContainer,
    UpdateSpaceContainer,
    WWModel,
)


class GraphQLOperationType(str, Enum):
    """GraphQL operation types."""

    QUERY = "query"
    MUTATION = "mutation"


@dataclass
class GraphQLRequest:
    """Payload for one GraphQL call."""

    query: str
    variables: Dict[str, Any] = field(default_factory=dict)
    operation_name: Optional[str] = None
    operation_type: GraphQLOperationType = GraphQLOperationType.QUERY

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: Dict[str, Any] = {
            "query": self.query,
            "variables": self.variables,
        }

        if self.operation_name:
            result["operationName"] = self.operation_name

        return result


@dataclass
class GraphQLResult:
    """Raw result of a GraphQL call."""

    success: bool
    data: Optional[Dict[str, Any]] = None
    errors: List[Dict[str, Any]] = field(default_factory=list)
    extensions: Optional[Dict[str, Any]] = None
    response_time: Optional[float] = None
    status_code: int = 200
    headers: Dict[str, str] = field(default_factory=dict)
    raw_response: Optional[str] = None

    @property
    def has_errors(self) -> bool:
        """Check if result has errors."""
        return len(self.errors) > 0

    @property
    def error_messages(self) -> List[str]:
        """Get list of error messages."""
        return [error.get("message", "Unknown error") for error in self.errors]

    def get_data(self, path: Optional[str] = None) -> Any:
        """
        Get data from result with optional path.

        Args:
            path: Dot-separated path to data (e.g., "space.conversation.id")

        Returns:
            Data at the specified path or full data if no path
        """
        if not self.data:
            return None

        if not path:
            return self.data

        current: Any = self.data
        for key in path.split("."):
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return None

        return current


class DataContainer(WWModel):
    """
    Top-level ``data`` object of a Workspace response.

    Each accessor returns one field of the response and raises NoDataError
    when the query did not return it. Keys the model does not know, such as
    aliased objects, are kept in ``aliased_children``.
    """

    model_config = ConfigDict(extra="allow")

    spaces: Optional[SpacesContainer] = None
    me: Optional[Person] = None
    person: Optional[Person] = None
    conversation: Optional[Conversation] = None
    space: Optional[Space] = None
    people: Optional[MembersContainer] = None
    message: Optional[Message] = None
    create_space: Optional[CreateSpaceContainer] = None
    delete_space: Optional[DeleteSpaceContainer] = None
    update_space: Optional[UpdateSpaceContainer] = None

    _errors: List[Dict[str, Any]] = PrivateAttr(default_factory=list)

    @property
    def aliased_children(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})

    def _require(self, name: str) -> Any:
        value = getattr(self, name)
        if value is None:
            raise NoDataError(name, self._errors)
        return value

    def get_spaces(self) -> SpacesContainer:
        return self._require("spaces")

    def get_me(self) -> Person:
        return self._require("me")

    def get_person(self) -> Person:
        return self._require("person")

    def get_conversation(self) -> Conversation:
        return self._require("conversation")

    def get_space(self) -> Space:
        return self._require("space")

    def get_people(self) -> MembersContainer:
        return self._require("people")

    def get_message(self) -> Message:
        return self._require("message")

    def get_create_space(self) -> Space:
        """Space created by a createSpace mutation."""
        container: CreateSpaceContainer = self._require("create_space")
        if container.space is None:
            raise NoDataError("createSpace.space", self._errors)
        return container.space

    def get_deletion_successful(self) -> bool:
        return self._require("delete_space").successful

    def get_update_space_container(self) -> UpdateSpaceContainer:
        return self._require("update_space")

    def get_update_space_member_ids_changed(self) -> List[str]:
        return list(self.get_update_space_container().member_ids_changed)

    def get_update_space_space(self) -> Space:
        container = self.get_update_space_container()
        if container.space is None:
            raise NoDataError("updateSpace.space", self._errors)
        return container.space


@dataclass
class ResultContainer:
    """Deserialized response: typed data plus any GraphQL errors."""

    data: Optional[DataContainer] = None
    errors: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_result(cls, result: GraphQLResult) -> ResultContainer:
        """
        Deserialize a raw result.

        Raises:
            ContentError: If the data does not match the response models
        """
        data = None
        if result.data is not None:
            try:
                data = DataContainer.model_validate(result.data)
            except ValidationError as e:
                raise ContentError(
                    f"Unexpected response shape: {e}",
                    content_type="application/json",
                    response_text=result.raw_response,
                ) from e
            data._errors = list(result.errors)
        return cls(data=data, errors=list(result.errors))

    def get_data(self) -> DataContainer:
        """
        Get the data container.

        Raises:
            NoDataError: If the response carried no data at all
        """
        if self.data is None:
            raise NoDataError("data", self.errors)
        return self.data
