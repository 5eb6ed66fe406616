class BudgetServerError(Exception):
    """Base class for errors raised by the budget server."""


class ConfigurationError(BudgetServerError):
    """The settings do not allow the requested wiring."""


class PersistenceNotConfiguredError(BudgetServerError):
    """A database session was requested but persistence is not connected."""
