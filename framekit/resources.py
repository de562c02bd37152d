"""Textures and sounds loaded from a resource directory."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PureWindowsPath
from typing import Any, Dict, Optional, Union

import pygame

PathLike = Union[str, Path]


class SoundChannel(Enum):
    BGM = 0
    EFFECT = 1


class Texture:
    """A bitmap loaded from disk."""

    def __init__(self) -> None:
        self.key = ""
        self.path: Optional[Path] = None
        self.surface: Optional[pygame.Surface] = None

    def load(self, path: PathLike) -> None:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"texture not found: {path}")
        self.surface = pygame.image.load(str(path))

    @property
    def width(self) -> int:
        return self.surface.get_width() if self.surface is not None else 0

    @property
    def height(self) -> int:
        return self.surface.get_height() if self.surface is not None else 0


@dataclass
class SoundInfo:
    sound: Any
    loop: bool


def _relative(path: PathLike) -> Path:
    """Accept both slash and backslash separated relative paths."""
    if isinstance(path, Path):
        return path
    return Path(*PureWindowsPath(path).parts)


class ResourceManager:
    """Caches textures and sounds by key and plays sounds on two channels."""

    def __init__(self, resource_path: Optional[PathLike] = None, mixer: Any = None) -> None:
        self.resource_path = (
            Path(resource_path) if resource_path is not None else Path.cwd() / "Resource"
        )
        self._mixer = mixer if mixer is not None else pygame.mixer
        self._mixer_started = False
        self._textures: Dict[str, Texture] = {}
        self._sounds: Dict[str, SoundInfo] = {}
        self._channels: Dict[SoundChannel, Any] = {}

    def texture_load(self, key: str, path: PathLike) -> Texture:
        """Return the texture cached under ``key``, loading it on first use."""
        texture = self.texture_find(key)
        if texture is not None:
            return texture
        full_path = self.resource_path / _relative(path)
        texture = Texture()
        texture.load(full_path)
        texture.key = key
        texture.path = full_path
        self._textures[key] = texture
        return texture

    def texture_find(self, key: str) -> Optional[Texture]:
        return self._textures.get(key)

    def release(self) -> None:
        """Forget every texture and sound and shut the mixer down."""
        self._textures.clear()
        self._sounds.clear()
        self._channels.clear()
        if self._mixer_started:
            self._mixer.quit()
            self._mixer_started = False

    def _ensure_mixer(self) -> None:
        if not self._mixer.get_init():
            self._mixer.init()
            self._mixer_started = True

    def load_sound(self, key: str, path: PathLike, loop: bool) -> None:
        """Load a sound under ``key``; an already loaded key is left alone."""
        if key in self._sounds:
            return
        self._ensure_mixer()
        full_path = self.resource_path / _relative(path)
        sound = self._mixer.Sound(str(full_path))
        self._sounds[key] = SoundInfo(sound, loop)

    def play(self, key: str) -> None:
        """Play a loaded sound: looping ones on BGM, others on EFFECT."""
        info = self._sounds.get(key)
        if info is None:
            return
        channel = SoundChannel.BGM if info.loop else SoundChannel.EFFECT
        self._channels[channel] = info.sound.play(loops=-1 if info.loop else 0)

    def _channel(self, channel: SoundChannel) -> Any:
        playing = self._channels.get(SoundChannel(channel))
        if playing is None:
            raise RuntimeError(f"nothing is playing on {channel!r}")
        return playing

    def stop(self, channel: SoundChannel) -> None:
        self._channel(channel).stop()

    def set_volume(self, channel: SoundChannel, volume: float) -> None:
        """Set a channel's volume, from 0.0 to 1.0."""
        self._channel(channel).set_volume(volume)

    def pause(self, channel: SoundChannel, paused: bool) -> None:
        playing = self._channel(channel)
        if paused:
            playing.pause()
        else:
            playing.unpause()