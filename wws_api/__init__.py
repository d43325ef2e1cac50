"""
wws_api - Python client for the IBM Watson Workspace GraphQL API.

Build Workspace queries and mutations from object trees, send them to the
GraphQL endpoint with a caller-supplied access token, and get Spaces,
Conversations, Messages and People back as typed models.

Example:
    ```python
    from wws_api import GraphQLClient, WWGraphQLEndpoint

    async with GraphQLClient(token=access_token) as client:
        endpoint = WWGraphQLEndpoint(client)
        me = await endpoint.get_me()
    ```
"""

__version__ = "0.1.0"

from .config import ConfigLoader, LoggingConfig, LogLevel, WWSConfig, load_config
from .endpoints import WWGraphQLEndpoint
from .exceptions import (
    AuthenticationError,
    BuilderError,
    ContentError,
    ErrorHandler,
    GraphQLError,
    HTTPError,
    NetworkError,
    NoDataError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TimeoutError,
    WWException,
)
from .graphql import (
    BaseGraphQLMutation,
    BaseGraphQLQuery,
    ConversationGraphQLQuery,
    DataContainer,
    GraphQLClient,
    GraphQLRequest,
    GraphQLResult,
    InputDataSenderBuilder,
    MessageGraphQLQuery,
    ObjectDataSenderBuilder,
    PeopleGraphQLQuery,
    PersonGraphQLQuery,
    ProfileGraphQLQuery,
    ResultContainer,
    SpaceCreateGraphQLMutation,
    SpaceDeleteGraphQLMutation,
    SpaceGraphQLQuery,
    SpaceMembersGraphQLQuery,
    SpacesGraphQLQuery,
    SpaceUpdateGraphQLMutation,
    UpdateSpaceMemberOperation,
)
from .logging import setup_logging
from .models import (
    Conversation,
    ConversationAttributes,
    ConversationChildren,
    ConversationFields,
    MembersAttributes,
    MembersContainer,
    Message,
    MessageAttributes,
    MessageChildren,
    MessageFields,
    MessagesAttributes,
    MessagesContainer,
    PageInfo,
    PageInfoFields,
    PeopleAttributes,
    Person,
    PersonAttributes,
    PersonChildren,
    PersonFields,
    Space,
    SpaceAttributes,
    SpaceChildren,
    SpaceFields,
    SpacesAttributes,
    SpacesContainer,
    UpdateSpaceContainer,
    WWFieldsAttributes,
)

__all__ = [
    "__version__",
    # Client and endpoint
    "GraphQLClient",
    "WWGraphQLEndpoint",
    # Configuration and logging
    "WWSConfig",
    "LoggingConfig",
    "LogLevel",
    "ConfigLoader",
    "load_config",
    "setup_logging",
    # Builders
    "ObjectDataSenderBuilder",
    "InputDataSenderBuilder",
    # Queries and mutations
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
    "SpaceCreateGraphQLMutation",
    "SpaceDeleteGraphQLMutation",
    "SpaceUpdateGraphQLMutation",
    "UpdateSpaceMemberOperation",
    # Requests and results
    "GraphQLRequest",
    "GraphQLResult",
    "DataContainer",
    "ResultContainer",
    # Models
    "Person",
    "Space",
    "Conversation",
    "Message",
    "PageInfo",
    "SpacesContainer",
    "MembersContainer",
    "MessagesContainer",
    "UpdateSpaceContainer",
    # Field enums
    "WWFieldsAttributes",
    "PersonFields",
    "PersonChildren",
    "PersonAttributes",
    "PeopleAttributes",
    "SpaceFields",
    "SpaceChildren",
    "SpaceAttributes",
    "SpacesAttributes",
    "MembersAttributes",
    "ConversationFields",
    "ConversationChildren",
    "ConversationAttributes",
    "MessageFields",
    "MessageChildren",
    "MessageAttributes",
    "MessagesAttributes",
    "PageInfoFields",
    # Exceptions
    "WWException",
    "BuilderError",
    "NoDataError",
    "GraphQLError",
    "NetworkError",
    "TimeoutError",
    "ContentError",
    "HTTPError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "ErrorHandler",
]
