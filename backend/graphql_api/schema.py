"""GraphQL schema factory.

Usage:
    from graphql_api.schema import create_schema
    schema = create_schema()
"""

import strawberry

from graphql_api.errors import DomainErrorExtension
from graphql_api.resolvers.post_mutations import PostMutations
from graphql_api.resolvers.post_queries import PostQueries
from graphql_api.resolvers.post_subscriptions import PostSubscriptions
from graphql_api.resolvers.user_mutations import UserMutations


@strawberry.type
class Query(PostQueries):
    pass


@strawberry.type
class Mutation(UserMutations, PostMutations):
    pass


@strawberry.type
class Subscription(PostSubscriptions):
    pass


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with all resolvers and the error extension.

    Returns:
        Schema exposing getPosts/getPost, the user and post mutations and
        the newPost subscription
    """
    return strawberry.Schema(
        query=Query,
        mutation=Mutation,
        subscription=Subscription,
        extensions=[DomainErrorExtension],
    )
