"""
Adivina - Voice-driven "guess the number" engine

A deterministic, host-agnostic engine for a spoken Spanish number guessing game.
The engine picks a secret number and provides:
- Spanish number parsing from recognized speech
- The guessing/replay dialogue state machine
- Abstract intents (speak, listen, terminate) for speech/audio hosts
- Console and HTTP hosts that drive the state machine
"""

__version__ = "0.1.0"
