import argparse
import sys

from minebot.bot import MinesweeperBot
from minebot.config import GAME_CONFIG, LOOP_CONFIG, PATHS, SIMULATOR_CONFIG, WAIT_TIMES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bot démineur : observe → infère → révèle")

    parser.add_argument("--url", default=GAME_CONFIG['url'], help="URL de la partie")
    parser.add_argument("--headless", action="store_true", help="Navigateur sans affichage")
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=LOOP_CONFIG['max_iterations'],
        help="Nombre maximum de cycles (garde-fou)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=WAIT_TIMES['between_cycles'],
        help="Délai entre cycles (secondes)",
    )
    parser.add_argument("--trace", action="store_true", help="Affiche chaque cycle")
    parser.add_argument("--log-dir", default=PATHS['logs'], help="Dossier des traces JSONL")
    parser.add_argument(
        "--keep-playing",
        action="store_true",
        help="Ignore la victoire/défaite signalée par la surface",
    )
    parser.add_argument("--simulate", action="store_true", help="Joue sur une grille simulée hors-ligne")
    parser.add_argument("--width", type=int, default=SIMULATOR_CONFIG['width'])
    parser.add_argument("--height", type=int, default=SIMULATOR_CONFIG['height'])
    parser.add_argument("--mines", type=int, default=SIMULATOR_CONFIG['mines'])
    parser.add_argument("--seed", type=int, default=None)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    loop_options = dict(
        max_iterations=args.max_iterations,
        delay=args.delay,
        stop_on_outcome=not args.keep_playing,
        trace=args.trace,
    )

    bot = MinesweeperBot(log_dir=args.log_dir)
    try:
        if args.simulate:
            report = bot.play_simulated(args.width, args.height, args.mines, seed=args.seed, **loop_options)
        else:
            report = bot.play_online(args.url, headless=args.headless, **loop_options)
    except KeyboardInterrupt:
        print("\nArrêt demandé par l'utilisateur.")
        return 1
    finally:
        bot.cleanup()

    print("[FIN] Succès" if report.success else "[FIN] Échec")
    return 0 if report.success else 1


if __name__ == "__main__":
    sys.exit(main())
