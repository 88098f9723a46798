from __future__ import annotations

import argparse

from commit_reveal import from_hex, verify_commitment
from errors import (
    CommitmentVerificationFailed,
    DigestComputationFailed,
    InsufficientEntropy,
    InvalidMoveSet,
    UnknownMove,
)
from game_round import Reveal, check_reveal, new_round
from help_table import format_table
from rules import OutcomeEngine

EXIT_INTEGRITY_FAILURE = 3


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="hmac-rps")
    sub = parser.add_subparsers(dest="cmd", required=True)

    play = sub.add_parser("play", help="Play against the computer; its move is HMAC-committed before you choose")
    play.add_argument("moves", nargs="+", help="Odd number (>= 3) of distinct moves in cyclic order")
    play.add_argument("--rounds", type=int, default=None, help="Stop after this many rounds (default: until 0 is chosen)")

    table = sub.add_parser("table", help="Print who beats whom for a move set")
    table.add_argument("moves", nargs="+", help="Odd number (>= 3) of distinct moves in cyclic order")

    verify = sub.add_parser("verify", help="Check a disclosed key and move against a published HMAC")
    verify.add_argument("--key", required=True, help="Disclosed HMAC key (hex)")
    verify.add_argument("--move", required=True, help="Disclosed computer move")
    verify.add_argument("--hmac", required=True, help="HMAC published before you moved (hex)")

    args = parser.parse_args(argv)

    if args.cmd == "verify":
        return _verify(key=args.key, move=args.move, hmac_hex=args.hmac)

    try:
        engine = OutcomeEngine(args.moves)
    except InvalidMoveSet as exc:
        parser.error(f"{exc} (example: hmac-rps {args.cmd} rock paper scissors)")

    if args.cmd == "table":
        print(format_table(engine))
        return 0

    if args.cmd == "play":
        if args.rounds is not None and args.rounds < 1:
            parser.error("--rounds must be >= 1")
        try:
            return _play(engine, rounds=args.rounds)
        except (InsufficientEntropy, DigestComputationFailed) as exc:
            raise SystemExit(f"fatal: {exc}")

    raise SystemExit("unhandled command")


def _play(engine: OutcomeEngine, *, rounds: int | None) -> int:
    played = 0
    while rounds is None or played < rounds:
        game = new_round(engine)

        while True:
            choice = _prompt_for_move(engine, game.commitment_hex)
            if choice is None:
                # The key of an unanswered round is never shown.
                game.abandon()
                print("Bye!")
                return 0
            try:
                reveal = game.resolve(choice)
            except UnknownMove as exc:
                print(f"❌ Invalid choice: {exc.move!r}. Enter 1-{engine.size}, 0 or ?.")
                continue
            break

        _show_game_result(reveal)
        try:
            check_reveal(reveal)
        except CommitmentVerificationFailed as exc:
            print(f"🚨 INTEGRITY FAILURE, the computer changed its move: {exc}")
            return EXIT_INTEGRITY_FAILURE
        print("✅ HMAC verified against the disclosed key and move")
        played += 1
    return 0


def _verify(*, key: str, move: str, hmac_hex: str) -> int:
    try:
        secret = from_hex(key)
    except ValueError as exc:
        raise SystemExit(f"--key: {exc}")
    try:
        commitment = from_hex(hmac_hex)
    except ValueError as exc:
        raise SystemExit(f"--hmac: {exc}")
    if verify_commitment(secret=secret, move=move, expected_commitment=commitment):
        print(f"OK: HMAC matches move {move!r}")
        return 0
    print(f"🚨 INTEGRITY FAILURE: HMAC does not match move {move!r} with this key")
    return EXIT_INTEGRITY_FAILURE


def _show_menu(engine: OutcomeEngine, commitment_hex: str) -> None:
    print(f"HMAC: {commitment_hex}")
    print("Available moves:")
    for i, move in enumerate(engine.moves, start=1):
        print(f"{i} - {move}")
    print("0 - exit")
    print("? - help")


def _prompt_for_move(engine: OutcomeEngine, commitment_hex: str) -> str | None:
    """Ask until the user picks something other than help; ``None`` means exit."""
    _show_menu(engine, commitment_hex)
    while True:
        try:
            choice = input("Enter your move: ").strip()
        except EOFError:
            return None
        if choice == "0":
            return None
        if choice == "?":
            print(format_table(engine))
            _show_menu(engine, commitment_hex)
            continue
        if choice.isdecimal() and 1 <= int(choice) <= engine.size:
            return engine.moves.names[int(choice) - 1]
        # Anything else is taken as a move name and checked by the round.
        return choice


def _show_game_result(reveal: Reveal) -> None:
    print(f"\n{'='*60}")
    print(f"   Your move: {reveal.user_move}")
    print(f"   Computer move: {reveal.house_move}")

    if reveal.outcome == "draw":
        print("   Result: 🤝 DRAW")
    elif reveal.outcome == "user_win":
        print("   Result: 🎉 YOU WIN!")
    else:
        print("   Result: 😞 You lose")
    print(f"   HMAC key: {reveal.secret_hex}")
    print(f"{'='*60}\n")


if __name__ == "__main__":
    raise SystemExit(main())
