from helixapi.models.clip import HelixClip

__all__ = ["HelixClip"]
