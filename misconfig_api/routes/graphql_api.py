"""
/graphql -- GraphQL endpoint with the IDE and introspection left on.

Two fields, both hardcoded. The point is not the data but that anyone can
open GraphiQL in a browser, run an introspection query and discover the
"secret" field without reading any docs.

Executed by Strawberry's FastAPI router: GET renders GraphiQL (or runs a
query passed in the query string), POST runs a JSON query.
"""

import strawberry
from strawberry.fastapi import GraphQLRouter


@strawberry.type
class Query:
    @strawberry.field
    def hello(self) -> str:
        return "Hello from GraphQL!"

    @strawberry.field
    def secret(self) -> str:
        return "⚠️ This is a secret only meant for devs!"


schema = strawberry.Schema(query=Query)


def build_graphql_router() -> GraphQLRouter:
    # No extensions: introspection stays enabled, no depth or cost limits
    return GraphQLRouter(schema, graphql_ide="graphiql")
