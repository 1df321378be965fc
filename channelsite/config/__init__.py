from channelsite.config.settings import settings

__all__ = ["settings"]
