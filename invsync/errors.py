# invsync Errors
# Exception hierarchy for the sync subsystem


class SyncError(Exception):
    """Base class for all invsync errors."""

    default_message = "Synchronization failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AccountUnavailableError(SyncError):
    """The cloud account is signed out or unknown; manual sync is rejected."""

    default_message = "Cloud account is not available"


class SyncInProgressError(SyncError):
    """A pass is already running."""

    default_message = "Synchronization is already in progress"


class FetchError(SyncError):
    """The remote change source could not deliver changes."""

    default_message = "Fetching remote changes failed"


class MalformedRecordError(SyncError):
    """A remote record lacks a usable identity or required field."""

    default_message = "Malformed remote record"


class CommitError(SyncError):
    """The local store could not persist its state."""

    default_message = "Saving the local store failed"
