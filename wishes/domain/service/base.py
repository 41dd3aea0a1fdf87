"""Domain service base class."""


class Service:
    """Marker base for domain services.

    Services hold rules that involve repositories or more than one
    aggregate, such as "an identity supports a wish at most once".
    """
