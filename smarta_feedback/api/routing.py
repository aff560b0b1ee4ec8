from fastapi.routing import APIRoute
from starlette.routing import Match

# Methods advertised in the OpenAPI schema. Requests with any other method
# still reach the endpoint through AnyMethodRoute.
ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


class AnyMethodRoute(APIRoute):
    """
    Route that dispatches every HTTP method to its endpoint.

    Starlette answers unlisted methods with its own 405 before the endpoint
    runs; endpoints using this route decide about the method themselves.
    """

    def matches(self, scope):
        match, child_scope = super().matches(scope)
        if match == Match.PARTIAL:
            match = Match.FULL
        return match, child_scope

    async def handle(self, scope, receive, send):
        await self.app(scope, receive, send)
