"""
GraphQL support for wws_api.

This module provides the document builders, the pre-built Workspace queries
and mutations, the response containers and the HTTP client.
"""

from .builder import (
    DataSenderBuilder,
    InputDataSenderBuilder,
    ObjectDataSenderBuilder,
    format_value,
)
from .client import GraphQLClient
from .models import (
    DataContainer,
    GraphQLOperationType,
    GraphQLRequest,
    GraphQLResult,
    ResultContainer,
)
from .queries import (
    BaseGraphQLMutation,
    BaseGraphQLQuery,
    ConversationGraphQLQuery,
    MessageGraphQLQuery,
    PeopleGraphQLQuery,
    PersonGraphQLQuery,
    ProfileGraphQLQuery,
    SpaceCreateGraphQLMutation,
    SpaceDeleteGraphQLMutation,
    SpaceGraphQLQuery,
    SpaceMembersGraphQLQuery,
    SpacesGraphQLQuery,
    SpaceUpdateGraphQLMutation,
    UpdateSpaceMemberOperation,
)

__all__ = [
    # Builders
    "DataSenderBuilder",
    "ObjectDataSenderBuilder",
    "InputDataSenderBuilder",
    "format_value",
    # Client
    "GraphQLClient",
    # Models
    "GraphQLOperationType",
    "GraphQLRequest",
    "GraphQLResult",
    "DataContainer",
    "ResultContainer",
    # Queries
    "BaseGraphQLQuery",
    "BaseGraphQLMutation",
    "SpacesGraphQLQuery",
    "SpaceGraphQLQuery",
    "SpaceMembersGraphQLQuery",
    "PersonGraphQLQuery",
    "PeopleGraphQLQuery",
    "ProfileGraphQLQuery",
    "ConversationGraphQLQuery",
    "MessageGraphQLQuery",
    # Mutations
    "SpaceCreateGraphQLMutation",
    "SpaceDeleteGraphQLMutation",
    "SpaceUpdateGraphQLMutation",
    "UpdateSpaceMemberOperation",
]
