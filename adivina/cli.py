"""
Adivina CLI - Command-line interface for the engine.

Usage:
    adivina play                 Play in the console (type what you would say)
    adivina parse <text>         Show the number the parser finds in a phrase
    adivina serve                Run the HTTP API

Settings not given on the command line come from ADIVINA_* environment
variables (see adivina.config).
"""

import argparse
import dataclasses
import logging
import sys


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Adivina - voice guess-the-number engine",
        prog="adivina",
    )
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="Log game events (-vv for debug)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the console")
    play_parser.add_argument("--min", type=int, dest="min_number", help="Lowest number")
    play_parser.add_argument("--max", type=int, dest="max_number", help="Highest number")
    play_parser.add_argument("--attempts", type=int, dest="max_attempts", help="Attempts per game")
    play_parser.add_argument("--seed", type=int, help="Seed for the secret number")
    play_parser.add_argument("--replay-match", choices=["token", "substring"],
                             help="How to match the play-again answer")
    play_parser.add_argument("--pause", type=float, dest="message_pause",
                             help="Seconds to wait after each message")
    play_parser.add_argument("--hide-secret", action="store_true",
                             help="Do not log the secret number")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Parse a number from a phrase")
    parse_parser.add_argument("text", nargs="+", help="Phrase as recognized from speech")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "play":
        cmd_play(args)
    elif args.command == "parse":
        cmd_parse(args)
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def configure_logging(verbosity: int):
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_config(args):
    """Environment config overridden by command-line options."""
    from .config import GameConfig

    config = GameConfig.from_env()
    overrides = {
        name: getattr(args, name)
        for name in ("min_number", "max_number", "max_attempts", "seed",
                     "replay_match", "message_pause")
        if getattr(args, name, None) is not None
    }
    if getattr(args, "hide_secret", False):
        overrides["log_secret"] = False
    return dataclasses.replace(config, **overrides)


def cmd_play(args):
    """Play a game in the console."""
    from .engine_core import GuessGame, log_secret
    from .session import GameHost, ConsoleRecognizer, ConsoleSpeaker

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if config.log_secret:
        # The secret is logged at INFO; show it without -v
        secret_logger = logging.getLogger(log_secret.__module__)
        if not secret_logger.isEnabledFor(logging.INFO):
            secret_logger.setLevel(logging.INFO)

    game = GuessGame(config=config)
    host = GameHost(
        game,
        recognizer=ConsoleRecognizer(prompt="> "),
        speaker=ConsoleSpeaker(pause=config.message_pause),
    )

    try:
        host.run()
    except KeyboardInterrupt:
        print()

    if not host.closed:
        print("Partida interrumpida.")


def cmd_parse(args):
    """Parse a number from a phrase."""
    from .engine_core import parse_number

    text = " ".join(args.text)
    value = parse_number(text)
    if value is None:
        print(f"No number found in: {text!r}")
        sys.exit(1)
    print(value)


def cmd_serve(args):
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run("adivina.api.app:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
