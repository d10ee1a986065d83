class FanpageError(Exception):
    """Base exception for the fan-site backend."""
    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(self.message)

# --- Validation Errors (400) ---
class InvalidInputError(FanpageError):
    def __init__(self, message: str = "Invalid input"):
        super().__init__(message)

# --- Not Found Errors (404) ---
class EntityNotFoundError(FanpageError):
    """Base for Not Found errors."""
    pass

class GuestbookEntryNotFoundError(EntityNotFoundError):
    def __init__(self, message: str = "Guestbook entry not found"):
        super().__init__(message)

class MemoNotFoundError(EntityNotFoundError):
    def __init__(self, message: str = "Memo not found"):
        super().__init__(message)

class BotConfigNotFoundError(EntityNotFoundError):
    def __init__(self, message: str = "Bot config not found"):
        super().__init__(message)

class BotCommandNotFoundError(EntityNotFoundError):
    def __init__(self, message: str = "Bot command not found"):
        super().__init__(message)

# --- Duplicate Errors (400) ---
class EntityAlreadyExistsError(FanpageError):
    pass

class BotCommandAlreadyExistsError(EntityAlreadyExistsError):
    def __init__(self, message: str = "Command trigger already exists for this channel"):
        super().__init__(message)

# --- Authentication/Authorization Errors (401/403) ---
class AuthError(FanpageError):
    pass

class InvalidCredentialsError(AuthError):
    def __init__(self, message: str = "Access denied"):
        super().__init__(message)

class InvalidApiKeyError(AuthError):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)

class PermissionDeniedError(AuthError):
    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)

# --- System Errors (500) ---
class InternalError(FanpageError):
    pass

class ServerMisconfiguredError(InternalError):
    def __init__(self, message: str = "Server is not configured"):
        super().__init__(message)

class PersistenceError(InternalError):
    def __init__(self, message: str = "Failed to save changes. Please try again later."):
        super().__init__(message)
