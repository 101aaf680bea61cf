"""
Error types raised by the cache package.
Why: callers catch one base class; bad config is still a ValueError.
"""


class LuvvixCacheError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidConfiguration(LuvvixCacheError, ValueError):
    pass
