"""Building blocks for a group-chat bot: messages, configuration, feature logic and stores."""

__version__ = "1.6.1"