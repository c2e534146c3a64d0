"""Scene partner session defaults pushed to the upstream service once per connection."""

from __future__ import annotations

ENV_SCENE_PARTNER_VOICE = "SCENE_PARTNER_VOICE"
ENV_SCENE_PARTNER_INSTRUCTIONS = "SCENE_PARTNER_INSTRUCTIONS"
ENV_SCENE_PARTNER_TRANSCRIPTION_MODEL = "SCENE_PARTNER_TRANSCRIPTION_MODEL"
ENV_SCENE_PARTNER_VAD_THRESHOLD = "SCENE_PARTNER_VAD_THRESHOLD"
ENV_SCENE_PARTNER_VAD_PREFIX_PADDING_MS = "SCENE_PARTNER_VAD_PREFIX_PADDING_MS"
ENV_SCENE_PARTNER_VAD_SILENCE_DURATION_MS = "SCENE_PARTNER_VAD_SILENCE_DURATION_MS"
ENV_SCENE_PARTNER_TEMPERATURE = "SCENE_PARTNER_TEMPERATURE"

SESSION_MODALITIES: tuple[str, ...] = ("text", "audio")
SESSION_AUDIO_FORMAT = "pcm16"
SESSION_TURN_DETECTION_TYPE = "server_vad"
SESSION_MAX_RESPONSE_OUTPUT_TOKENS = "inf"

DEFAULT_SCENE_PARTNER_VOICE = "alloy"
DEFAULT_SCENE_PARTNER_TRANSCRIPTION_MODEL = "whisper-1"
DEFAULT_SCENE_PARTNER_VAD_THRESHOLD = 0.5
DEFAULT_SCENE_PARTNER_VAD_PREFIX_PADDING_MS = 300
DEFAULT_SCENE_PARTNER_VAD_SILENCE_DURATION_MS = 800
DEFAULT_SCENE_PARTNER_TEMPERATURE = 0.8

DEFAULT_SCENE_PARTNER_INSTRUCTIONS = """You are an acting scene partner. Your role is to deliver dialogue lines \
naturally and conversationally, as if you're performing in a scene with another actor.

Key instructions:
- When given script lines, deliver them with appropriate emotion and timing
- Speak naturally as if you're having a real conversation
- Don't add commentary or explanations unless asked
- Match the tone and energy of the scene
- Pause naturally between lines to allow for actor responses
- Be supportive and encouraging as a scene partner would be

You will receive script content and should deliver the assigned character lines with natural acting performance."""

__all__ = [
    "ENV_SCENE_PARTNER_VOICE",
    "ENV_SCENE_PARTNER_INSTRUCTIONS",
    "ENV_SCENE_PARTNER_TRANSCRIPTION_MODEL",
    "ENV_SCENE_PARTNER_VAD_THRESHOLD",
    "ENV_SCENE_PARTNER_VAD_PREFIX_PADDING_MS",
    "ENV_SCENE_PARTNER_VAD_SILENCE_DURATION_MS",
    "ENV_SCENE_PARTNER_TEMPERATURE",
    "SESSION_MODALITIES",
    "SESSION_AUDIO_FORMAT",
    "SESSION_TURN_DETECTION_TYPE",
    "SESSION_MAX_RESPONSE_OUTPUT_TOKENS",
    "DEFAULT_SCENE_PARTNER_VOICE",
    "DEFAULT_SCENE_PARTNER_TRANSCRIPTION_MODEL",
    "DEFAULT_SCENE_PARTNER_VAD_THRESHOLD",
    "DEFAULT_SCENE_PARTNER_VAD_PREFIX_PADDING_MS",
    "DEFAULT_SCENE_PARTNER_VAD_SILENCE_DURATION_MS",
    "DEFAULT_SCENE_PARTNER_TEMPERATURE",
    "DEFAULT_SCENE_PARTNER_INSTRUCTIONS",
]
