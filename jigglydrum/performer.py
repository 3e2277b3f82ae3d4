"""Drum pad state: which pads are held and how the square reacts."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from jigglydrum.me import MEDIUM_GRAY, ORANGE, PURPLE, Me

MAX_VOLUME = 128


def snare_volume(shift: bool) -> int:
    """Snare volume: full with Shift held, soft otherwise."""
    return MAX_VOLUME if shift else int(MAX_VOLUME * 0.1)


class Pad(enum.Enum):
    SNARE_J = "j"
    SNARE_I = "i"
    KICK = "space"

    @property
    def sample(self) -> str:
        return "kick" if self is Pad.KICK else "snare"


@dataclass(frozen=True)
class Hit:
    """A sample to play and the volume it plays at (0-128)."""

    sample: str
    volume: int


class Performer:
    """Tracks held pads and changes the square's colour and shape."""

    def __init__(self, me: Me) -> None:
        self.me = me
        self.held: set[Pad] = set()
        self.snare_volume = MAX_VOLUME
        me.set_color(MEDIUM_GRAY)
        me.relax()

    def key_down(self, pad: Pad, shift: bool) -> Hit | None:
        """Press a pad; return the hit to play, or None while it is already held."""
        self.snare_volume = snare_volume(shift)
        if pad in self.held:
            return None
        self.held.add(pad)
        if pad is Pad.KICK:
            self.me.set_color(PURPLE)
            self.me.expand()
            return Hit(pad.sample, MAX_VOLUME)
        self.me.set_color(ORANGE)
        self.me.shrink()
        return Hit(pad.sample, self.snare_volume)

    def key_up(self, pad: Pad) -> bool:
        """Release a pad; return whether it was held."""
        if pad not in self.held:
            return False
        self.held.discard(pad)
        self.me.set_color(MEDIUM_GRAY)
        self.me.relax()
        return True