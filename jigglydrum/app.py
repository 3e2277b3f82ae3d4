"""The drum window: keys play samples and a jiggling square reacts."""

from __future__ import annotations

import os
import random
import sys
from collections.abc import Sequence

import pygame

from jigglydrum.me import Me
from jigglydrum.performer import MAX_VOLUME, Pad, Performer, snare_volume
from jigglydrum.window_info import WindowFlag, WindowInfo, parse_window_args

SAMPLES = {
    "kick": "data/Dry-Kick.wav",
    "snare": "data/Ensoniq-ESQ-1-Snare.wav",
}
BACKGROUND = (20, 20, 20, 255)
FRAME_RATE = 60
JIGGLE = 1 / 16

_PAD_KEYS = {
    pygame.K_j: Pad.SNARE_J,
    pygame.K_i: Pad.SNARE_I,
    pygame.K_SPACE: Pad.KICK,
}


class AudioError(RuntimeError):
    """The audio device could not be opened."""


def window_flags(info: WindowInfo) -> int:
    """Display flags for pygame.display.set_mode."""
    flags = 0
    if WindowFlag.BORDERLESS in info.flags:
        flags |= pygame.NOFRAME
    if WindowFlag.RESIZABLE in info.flags:
        flags |= pygame.RESIZABLE
    return flags


def _load_samples() -> dict[str, pygame.mixer.Sound]:
    sounds = {}
    for name, path in SAMPLES.items():
        try:
            sounds[name] = pygame.mixer.Sound(path)
        except (pygame.error, FileNotFoundError) as err:
            print(f"Unable to load wave file: {err}", file=sys.stderr)
    return sounds


def run(info: WindowInfo, title: str = "jigglydrum") -> None:
    """Open the window and play until Alt-Q or Ctrl-Q."""
    os.environ["SDL_VIDEO_WINDOW_POS"] = f"{info.x},{info.y}"
    pygame.init()
    try:
        screen = pygame.display.set_mode((info.w, info.h), window_flags(info))
        pygame.display.set_caption(title)
        if WindowFlag.INPUT_GRABBED in info.flags:
            pygame.event.set_grab(True)
        try:
            pygame.mixer.init(44100, -16, 2, 512)
        except pygame.error as err:
            raise AudioError(f"Unable to open audio: {err}") from err
        _play(screen, info)
    finally:
        pygame.quit()


def _play(screen: pygame.Surface, info: WindowInfo) -> None:
    sounds = _load_samples()
    snare = sounds.get("snare")
    performer = Performer(Me(40, info.w / 2, info.h / 2))
    rng = random.Random(1)
    clock = pygame.time.Clock()
    quitting = False
    while not quitting:
        mods = pygame.key.get_mods()
        for event in pygame.event.get():
            if event.type == pygame.KEYDOWN:
                shift = bool(mods & pygame.KMOD_SHIFT)
                if snare is not None:
                    snare.set_volume(snare_volume(shift) / MAX_VOLUME)
                if event.key == pygame.K_q and mods & (pygame.KMOD_ALT | pygame.KMOD_CTRL):
                    quitting = True
                pad = _PAD_KEYS.get(event.key)
                if pad is not None:
                    hit = performer.key_down(pad, shift)
                    sound = sounds.get(hit.sample) if hit else None
                    if sound is not None:
                        sound.play()
            elif event.type == pygame.KEYUP:
                pad = _PAD_KEYS.get(event.key)
                if pad is not None:
                    performer.key_up(pad)

        screen.fill(BACKGROUND)
        me = performer.me
        me.jiggle(rng, JIGGLE)
        left, top, width, height = me.rect
        pygame.draw.rect(screen, me.color, pygame.Rect(round(left), round(top), round(width), round(height)))
        pygame.display.flip()
        clock.tick(FRAME_RATE)
    pygame.mixer.quit()


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    title = "jigglydrum"
    for line in [title, *args]:
        print(line)
    info = parse_window_args(args)
    try:
        run(info, title)
    except AudioError as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())