from .coqui import CoquiTtsClient
from .google import GoogleTtsClient
from .voices import GoogleVoice, resolve_google_voice, clamp_speaking_rate

__all__ = ["CoquiTtsClient", "GoogleTtsClient", "GoogleVoice", "clamp_speaking_rate", "resolve_google_voice"]
