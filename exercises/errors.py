"""Failures raised while resolving a topic to an exercise.

Both kinds are configuration defects rather than learner mistakes. Callers
are expected to substitute a stub exercise instead of ending the session.
"""


class TopicError(Exception):
    """Base class for topic resolution failures."""

    def __init__(self, topic_id: str, message: str):
        super().__init__(message)
        self.topic_id = topic_id


class TopicNotFound(TopicError, LookupError):
    """The registry has no generator for the topic id."""

    def __init__(self, topic_id: str):
        super().__init__(topic_id, f"No generator found for topic: {topic_id}")


class TopicNotSupported(TopicError, ValueError):
    """A generator family was asked for a topic or tier it does not implement."""

    def __init__(self, topic_id: str, reason: str):
        super().__init__(topic_id, f"Topic {topic_id!r} not supported: {reason}")
        self.reason = reason
