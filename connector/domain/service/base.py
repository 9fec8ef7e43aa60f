"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    A service owns the rules for one aggregate (users, posts, profiles) or
    one cross-cutting concern (tokens, credentials, request authentication).
    Services are stateless apart from their injected collaborators.
    """
