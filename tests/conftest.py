# tests/conftest.py
import os

# pygame must never try to open a real window or audio device under pytest
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
