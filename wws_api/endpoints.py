"""
Convenience endpoint for Watson Workspace.

Each method selects a pre-built query or mutation, executes it and unwraps
one field of the result. The ``*_with_query`` / ``*_with_mutation`` variants
accept a customised query object instead.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .graphql.client import GraphQLClient, Operation
from .graphql.models import DataContainer, ResultContainer
from .graphql.queries import (
    ConversationGraphQLQuery,
    MessageGraphQLQuery,
    PeopleGraphQLQuery,
    PersonGraphQLQuery,
    SpaceCreateGraphQLMutation,
    SpaceDeleteGraphQLMutation,
    SpaceGraphQLQuery,
    SpaceMembersGraphQLQuery,
    SpacesGraphQLQuery,
    SpaceUpdateGraphQLMutation,
    UpdateSpaceMemberOperation,
)
from .models import (
    Conversation,
    Message,
    PeopleAttributes,
    Person,
    Space,
    UpdateSpaceContainer,
)

logger = logging.getLogger(__name__)


class WWGraphQLEndpoint:
    """
    Simplified access to the Watson Workspace GraphQL API.

    Examples:
        ```python
        async with GraphQLClient(token=access_token) as client:
            endpoint = WWGraphQLEndpoint(client)
            for space in await endpoint.get_spaces():
                print(space.title)
        ```
    """

    def __init__(self, client: GraphQLClient):
        """
        Initialize endpoint.

        Args:
            client: GraphQL client holding the endpoint URL and access token
        """
        self.client = client
        self.result_container: Optional[ResultContainer] = None

    async def execute_request(self, operation: Operation) -> DataContainer:
        """
        Execute an operation and keep its result container.

        Args:
            operation: Query, mutation or raw request

        Returns:
            DataContainer of the response

        Raises:
            NoDataError: If the response carried no data
        """
        result = await self.client.execute(operation)
        self.result_container = ResultContainer.from_result(result)
        return self.result_container.get_data()

    # Spaces

    async def get_spaces(self) -> List[Space]:
        """Spaces available to the user or application."""
        query = SpacesGraphQLQuery.build_standard_get_spaces_query()
        return await self.get_spaces_with_query(query)

    async def get_spaces_with_query(self, query: SpacesGraphQLQuery) -> List[Space]:
        data = await self.execute_request(query)
        return data.get_spaces().items

    async def get_space_by_id(self, space_id: str) -> Space:
        query = SpaceGraphQLQuery.build_space_graph_query_with_space_id(space_id)
        return await self.get_space_with_query(query)

    async def get_space_with_query(self, query: SpaceGraphQLQuery) -> Space:
        data = await self.execute_request(query)
        return data.get_space()

    async def get_space_members(self, space_id: str) -> List[Person]:
        query = SpaceMembersGraphQLQuery.build_space_member_graph_query_by_space_id(space_id)
        return await self.get_space_members_with_query(query)

    async def get_space_members_with_query(self, query: SpaceMembersGraphQLQuery) -> List[Person]:
        data = await self.execute_request(query)
        return data.get_space().member_list

    async def create_space(self, title: str, members: Optional[List[str]] = None) -> Space:
        """
        Create a space.

        Args:
            title: Title of the new space
            members: Member ids to add, if any

        Returns:
            Space containing the id of the new space
        """
        if members is None:
            mutation = SpaceCreateGraphQLMutation.build_create_space_mutation_with_space_title(title)
        else:
            mutation = SpaceCreateGraphQLMutation.build_create_space_mutation_with_space_title_and_members(
                title, members
            )
        return await self.create_space_with_mutation(mutation)

    async def create_space_with_mutation(self, mutation: SpaceCreateGraphQLMutation) -> Space:
        data = await self.execute_request(mutation)
        space = data.get_create_space()
        logger.info("Created space %s", space.id)
        return space

    async def delete_space(self, space_id: str) -> bool:
        """
        Delete a space.

        Returns:
            Whether the deletion succeeded
        """
        mutation = SpaceDeleteGraphQLMutation.build_delete_space_mutation(space_id)
        data = await self.execute_request(mutation)
        return data.get_deletion_successful()

    async def update_space_title(self, space_id: str, title: str) -> Space:
        mutation = SpaceUpdateGraphQLMutation.build_update_space_mutation_change_title(space_id, title)
        data = await self.execute_request(mutation)
        return data.get_update_space_space()

    async def update_space_members(
        self,
        space_id: str,
        members: List[str],
        operation: UpdateSpaceMemberOperation,
    ) -> List[str]:
        """
        Add or remove members of a space.

        Returns:
            Ids of the members actually changed
        """
        mutation = SpaceUpdateGraphQLMutation.build_update_space_mutation_change_members(
            space_id, members, operation
        )
        data = await self.execute_request(mutation)
        return data.get_update_space_member_ids_changed()

    async def update_space_members_and_title(
        self,
        space_id: str,
        title: str,
        members: List[str],
        operation: UpdateSpaceMemberOperation,
    ) -> UpdateSpaceContainer:
        mutation = SpaceUpdateGraphQLMutation.build_update_space_mutation_change_title_and_members(
            space_id, title, members, operation
        )
        return await self.update_space_with_mutation(mutation)

    async def update_space_with_mutation(
        self, mutation: SpaceUpdateGraphQLMutation
    ) -> UpdateSpaceContainer:
        data = await self.execute_request(mutation)
        return data.get_update_space_container()

    # People

    async def get_me(self) -> Person:
        data = await self.execute_request(PersonGraphQLQuery.build_my_profile_query())
        return data.get_me()

    async def get_person_by_id(self, person_id: str) -> Person:
        """Person with the given id, or the current user when the id is blank."""
        if not person_id:
            return await self.get_me()
        return await self.get_person_with_query(PersonGraphQLQuery.build_person_query_by_id(person_id))

    async def get_person_by_email(self, email: str) -> Person:
        if not email:
            return await self.get_me()
        return await self.get_person_with_query(PersonGraphQLQuery.build_person_query_by_email(email))

    async def get_person_with_query(self, query: PersonGraphQLQuery) -> Person:
        data = await self.execute_request(query)
        return data.get_person()

    async def get_people(self, ids: List[str]) -> List[Person]:
        query = PeopleGraphQLQuery().add_attribute(PeopleAttributes.ID, list(ids))
        return await self.get_people_with_query(query)

    async def get_people_by_name(self, name: str) -> List[Person]:
        """
        People whose name contains a single word.

        Not available when authenticated as an application.
        """
        query = PeopleGraphQLQuery().add_attribute(PeopleAttributes.NAME, name)
        return await self.get_people_with_query(query)

    async def get_people_with_query(self, query: PeopleGraphQLQuery) -> List[Person]:
        data = await self.execute_request(query)
        return data.get_people().items

    # Conversations and messages

    async def get_conversation(self, conversation_id: str) -> Conversation:
        query = ConversationGraphQLQuery.build_standard_conversation_query_by_id(conversation_id)
        return await self.get_conversation_with_query(query)

    async def get_conversation_with_query(self, query: ConversationGraphQLQuery) -> Conversation:
        data = await self.execute_request(query)
        return data.get_conversation()

    async def get_message_by_id(self, message_id: str) -> Message:
        query = MessageGraphQLQuery.build_message_graph_query_with_message_id(message_id)
        return await self.get_message_with_query(query)

    async def get_message_with_query(self, query: MessageGraphQLQuery) -> Message:
        data = await self.execute_request(query)
        return data.get_message()
