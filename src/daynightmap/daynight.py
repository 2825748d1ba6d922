"""CLI entry point for day/night snapshots.

Prints the sub-solar and sub-lunar points, moon phase, and the night and
twilight regions as GeoJSON for one instant:
    uv run daynight --when "2024-06-21 09:00" --tz Asia/Seoul
"""

import argparse
import json
import logging
import sys
from datetime import datetime, timezone

from dotenv import load_dotenv

load_dotenv()

from daynightmap.compute import QueryError, run  # noqa: E402
from daynightmap.compute import snapshot_to_dict  # noqa: E402
from daynightmap.config import SUPPORTED_LANGS, ConfigError, default_lang, log_level  # noqa: E402
from daynightmap.i18n import t  # noqa: E402
from daynightmap.models import QueryInput  # noqa: E402

log = logging.getLogger("daynightmap")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="daynight", description=__doc__.splitlines()[0])
    parser.add_argument(
        "--when",
        default=None,
        help='Local time "YYYY-MM-DD HH:MM" (default: now)',
    )
    parser.add_argument("--tz", default="UTC", help="IANA timezone of --when (default: UTC)")
    parser.add_argument("--lang", choices=SUPPORTED_LANGS, default=None)
    parser.add_argument("--segments", type=int, default=None, help="Vertices per ring")
    parser.add_argument("--indent", type=int, default=None, help="Pretty-print JSON")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        logging.basicConfig(
            level=log_level(),
            format="%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        lang = args.lang or default_lang()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    if args.segments is not None and args.segments < 3:
        print("--segments must be at least 3", file=sys.stderr)
        return 2

    when = args.when
    tz = args.tz
    if when is None:
        when = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        tz = "UTC"

    try:
        data = run(QueryInput(when=when, tz=tz), segments=args.segments)
    except (QueryError, ConfigError) as e:
        log.error(t("error_query", lang).format(error=e))
        return 2

    json.dump(snapshot_to_dict(data, lang), sys.stdout, ensure_ascii=False, indent=args.indent)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
