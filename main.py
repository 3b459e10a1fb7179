"""Werewolf Replay CLI launcher. Serve the API, export static data, or replay a log."""

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "13013"))
DATA_DIR = Path(os.getenv("DATA_DIR", str(ROOT / "data")))


def _logs_dir(args) -> Path | None:
    if args.logs_dir:
        return args.logs_dir
    return Path(os.environ["LOGS_DIR"]) if os.getenv("LOGS_DIR") else None


def _init_storage(args) -> None:
    from wolfreplay import storage

    storage.init_storage(args.data_dir, _logs_dir(args))


def cmd_serve(args) -> None:
    import uvicorn

    # wolfreplay.app reads its directories from the environment at import
    os.environ["DATA_DIR"] = str(args.data_dir)
    logs_dir = _logs_dir(args)
    if logs_dir is not None:
        os.environ["LOGS_DIR"] = str(logs_dir)
    print(f"Starting backend on http://localhost:{args.port} ...")
    uvicorn.run("wolfreplay.app:app", host=args.host, port=args.port)


def cmd_export(args) -> None:
    from wolfreplay.export import default_export_dir, export_static

    _init_storage(args)
    out_dir = args.out or default_export_dir()
    games = export_static(out_dir)
    print(f"Generated static data for {len(games)} games in {out_dir}")


def cmd_parse(args) -> None:
    from wolfreplay.parser import ParseSession, parse_log

    session = ParseSession()
    events = parse_log(args.file.read_text(encoding="utf-8"), session)
    if args.json:
        print(json.dumps([e.to_dict() for e in events], ensure_ascii=False, indent=2))
    else:
        for event in events:
            print(_format_event(event))
    print(f"\n{len(events)} events, {session.unmatched} unmatched paragraphs", file=sys.stderr)


def cmd_play(args) -> None:
    from wolfreplay import storage
    from wolfreplay.parser import parse_log
    from wolfreplay.playback import Playback

    _init_storage(args)
    settings = storage.get_config()["playback"]
    events = parse_log(args.file.read_text(encoding="utf-8"))

    async def run() -> None:
        player = Playback(
            events,
            speed=args.speed or settings["speed"],
            min_delay_ms=settings["min_delay_ms"],
            default_delay_ms=settings["default_delay_ms"],
            on_reveal=lambda _i, event: print(_format_event(event), flush=True),
        )
        player.play()
        await player.wait()

    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        print("\nStopped.")


def _format_event(event) -> str:
    from wolfreplay.roles import role_info

    if event.kind == "message":
        icon = role_info(event.role)["icon"]
        return f"{icon} {event.speaker}: {event.text}"
    if event.kind in ("round", "phase"):
        return f"\n=== {event.text} ==="
    if event.kind == "winner":
        return f"\n*** {event.text} ***"
    return f"  {event.text}"


def main():
    parser = argparse.ArgumentParser(description="Werewolf game log replay")
    parser.add_argument("--data-dir", type=Path, default=DATA_DIR,
                        help="Data directory holding config.json (default: ./data)")
    parser.add_argument("--logs-dir", type=Path, default=None,
                        help="Game logs directory (default: LOGS_DIR or <data-dir>/logs)")
    parser.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "INFO"))
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=HOST)
    serve.add_argument("--port", type=int, default=PORT)
    serve.set_defaults(func=cmd_serve)

    export = sub.add_parser("export", help="Write static JSON artifacts")
    export.add_argument("--out", type=Path, default=None,
                        help="Output directory (default: export.out_dir setting)")
    export.set_defaults(func=cmd_export)

    parse = sub.add_parser("parse", help="Print the events parsed from a log file")
    parse.add_argument("file", type=Path)
    parse.add_argument("--json", action="store_true", help="Print events as JSON")
    parse.set_defaults(func=cmd_parse)

    play = sub.add_parser("play", help="Replay a log file in the terminal")
    play.add_argument("file", type=Path)
    play.add_argument("--speed", type=float, default=None,
                      help="Speed multiplier (default: playback.speed setting)")
    play.set_defaults(func=cmd_play)

    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    args.func(args)


if __name__ == "__main__":
    main()
