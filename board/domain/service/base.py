"""Base class for domain services."""


class Service:
    """Base class for domain services.

    Services hold the comment rules that span several repositories or
    several comments at once, such as threading and cascading deletes.
    """
