"""
Circle Warriors - arena wagering game with a seeded, reproducible round simulation.

Usage:
    python main.py [--seed <seed>] [--win-prob <0..1>]

The seed may be any string: integers are used as-is, anything else is hashed.
Leave it blank for a fresh random seed every round.
"""
import argparse

from config import SIM_SEED, WIN_PROBABILITY, BET_AMOUNT, BOOSTER_COST
from game.engine import GameEngine


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Circle Warriors - bet, watch the warriors roll, collect the payout"
    )
    parser.add_argument(
        "--seed",
        type=str,
        default=SIM_SEED,
        help="round seed (integer or any string; default: random per round)"
    )
    parser.add_argument(
        "--win-prob",
        type=float,
        default=WIN_PROBABILITY,
        help=f"configured win probability 0..1 (default: {WIN_PROBABILITY})"
    )
    return parser.parse_args()


def main():
    """Main entry point."""
    args = parse_args()

    print("=" * 50)
    print("  Circle Warriors")
    print("=" * 50)
    print()
    print("Controls (before a round):")
    print("  1-4       - Pick your warrior")
    print("  M         - Cycle mode (1v1, 1v2, 1v3)")
    print(f"  B         - Cycle pre-purchased booster (+{BOOSTER_COST} FUN)")
    print("  +/-       - Adjust win probability")
    print(f"  SPACE     - Start round ({BET_AMOUNT} FUN) / play again")
    print()
    print("Controls (during a round):")
    print(f"  H/G/S     - Buy burger / glove / shield (+{BOOSTER_COST} FUN)")
    print("  F         - Toggle x2 speed")
    print("  ESC       - Quit")
    print()

    game = GameEngine(seed_text=args.seed, win_probability=args.win_prob)
    game.run()


if __name__ == "__main__":
    main()
