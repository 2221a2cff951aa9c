"""
Custom exceptions for the leaderboard boundary with user-friendly error messages.

The ranking engine never raises; these cover user input parsing and the
data source.
"""

class LeaderboardException(Exception):
    """Base exception for leaderboard-related errors."""
    def __init__(self, message: str, user_message: str = None):
        super().__init__(message)
        self.user_message = user_message or message

class InvalidLimitError(LeaderboardException):
    """Raised when a display limit cannot be parsed."""
    def __init__(self, limit):
        super().__init__(
            f"Invalid display limit {limit!r}",
            "❌ Show a positive number of trainers, or 'all'."
        )
        self.limit = limit

class InvalidFilterError(LeaderboardException):
    """Raised when a metric, period or grouping name is not recognised."""
    def __init__(self, kind: str, value: str, allowed):
        super().__init__(
            f"Unknown {kind} '{value}'",
            f"❌ Unknown {kind} '{value}'. Choose one of: {', '.join(allowed)}."
        )
        self.kind = kind
        self.value = value

class DataSourceError(LeaderboardException):
    """Raised when leaderboard rows cannot be loaded."""
    def __init__(self, operation: str, details: str = None):
        super().__init__(
            f"Data source error during {operation}: {details}",
            "❌ Leaderboard data is unavailable right now. Please try again later."
        )
