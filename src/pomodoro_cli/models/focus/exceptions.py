"""Errors raised when the command channel between threads breaks.

All of them mean a collaborator is permanently gone, so none is retried.
"""


class ChannelError(Exception):
    """Base exception for broken communication on the command channel."""


class ChannelSendError(ChannelError):
    """Raised when a command cannot be delivered because the receiver is gone."""


class ChannelRecvError(ChannelError):
    """Raised when the channel closes during a blocking receive (paused timer)."""


class ChannelRecvTimeoutError(ChannelError):
    """Raised when the channel closes during a bounded receive (running timer)."""
