"""
Entry point: play Mega Bonk, or watch a random-policy episode

    python -m game.megabonk.play
    python -m game.megabonk.play --scale 4 --seed 7
    python -m game.megabonk.play --random-episode --no-render
"""

import argparse

from .bonk_env import run_random_episode
from .config import DEFAULT_SCALE
from .utils import seed_everything


def main(argv=None):
    parser = argparse.ArgumentParser(description="Mega Bonk - a tiny top-down bonk-'em-up")
    parser.add_argument("--scale", type=int, default=DEFAULT_SCALE,
                        help="Integer window scale over the 320x180 logical surface")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for loot jitter and enemy spawns")
    parser.add_argument("--random-episode", action="store_true",
                        help="Run a random-policy BonkEnv episode instead of playing")
    parser.add_argument("--no-render", action="store_true",
                        help="With --random-episode: run headless")
    parser.add_argument("--max-steps", type=int, default=None,
                        help="With --random-episode: episode length cap")
    args = parser.parse_args(argv)

    if args.scale < 1:
        parser.error("--scale must be >= 1")

    if args.random_episode:
        run_random_episode(
            render=not args.no_render,
            seed=args.seed,
            max_steps=args.max_steps,
        )
        return

    seed_everything(args.seed)

    # Imported here so --random-episode --no-render never needs a display
    from .render import play

    print("Mega Bonk: WASD / arrows to move, J to bonk, Esc to quit")
    world = play(scale=args.scale)
    print(f"Loot collected: {world.player.loot}  Enemies left: {len(world.enemies)}")


if __name__ == "__main__":
    main()
