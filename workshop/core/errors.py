"""Exceptions raised by workshop queries."""


class WorkshopError(Exception):
    """Base class for all workshop errors."""


class UserNotFoundError(WorkshopError, LookupError):
    """No user matched the given predicate."""


class NoAccountsError(WorkshopError, RuntimeError):
    """An aggregation that needs at least one account ran over none."""


class EmptyAccountsError(WorkshopError, ValueError):
    """A money total was requested for an empty list of accounts."""


class NotEnoughUsersError(WorkshopError, ValueError):
    """More users were requested than the dataset holds."""

    def __init__(self, requested: int, available: int):
        super().__init__(
            f"Requested {requested} users but only {available} are available"
        )
        self.requested = requested
        self.available = available
