from helixapi.resources.clips import (
    HelixClipCreateParams, HelixClipFilter, HelixClipFilterType, HelixClipsAPI,
)

__all__ = ["HelixClipCreateParams", "HelixClipFilter", "HelixClipFilterType", "HelixClipsAPI"]
