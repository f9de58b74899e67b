"""
Play the sky shooter in an arcade window.

Usage:
    python -m game.skyshooter.app
    python -m game.skyshooter.app --shape rect --score fixed --respawn-on-kill

Controls:
    Mouse: move to steer, click to fire (and to start / restart)
    Arrow keys / A D: move (with --keyboard)
    Space: fire
    Escape: quit
"""

import argparse
import logging

from .audio import ArcadeSoundCues, SoundCues
from .config import GameConfig, SCORE_POLICIES, SHAPE_FAMILIES
from .controller import GameController
from .utils import seed_everything


def build_config(args) -> GameConfig:
    return GameConfig(
        width=args.width,
        height=args.height,
        shape_family=args.shape,
        score_policy=args.score,
        respawn_on_kill=args.respawn_on_kill,
        pointer_control=not args.keyboard,
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Sky shooter arcade game")
    parser.add_argument("--width", type=int, default=800, help="Playfield width (default: 800)")
    parser.add_argument("--height", type=int, default=600, help="Playfield height (default: 600)")
    parser.add_argument("--shape", choices=SHAPE_FAMILIES, default="circle",
                        help="Collision shape family (default: circle)")
    parser.add_argument("--score", choices=SCORE_POLICIES, default="size",
                        help="Points per kill: enemy size or fixed (default: size)")
    parser.add_argument("--respawn-on-kill", action="store_true",
                        help="Spawn a replacement enemy for every kill")
    parser.add_argument("--keyboard", action="store_true",
                        help="Steer with the keyboard only (ignore the mouse position)")
    parser.add_argument("--mute", action="store_true", help="Disable sound")
    parser.add_argument("--volume", type=float, default=0.3, help="Sound volume (default: 0.3)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    seed_everything(args.seed)

    config = build_config(args)
    sound = SoundCues() if args.mute else ArcadeSoundCues(volume=args.volume)
    controller = GameController(config, sound=sound)

    # Window import pulls in the graphics stack; keep it out of headless paths
    import arcade
    from .renderer import ShooterWindow

    ShooterWindow(controller)
    arcade.run()


if __name__ == "__main__":
    main()
