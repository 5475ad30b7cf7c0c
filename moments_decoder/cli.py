from __future__ import annotations

import argparse
import sys
from collections import Counter
from pathlib import Path
from typing import Sequence

from .assemble import decode_post
from .batch import decode_batch
from .category import CATEGORIES
from .config import display_tzinfo, load_config
from .errors import ConfigError, DecodeError, InputError
from .render import render_post
from .run_log import RunLogger
from .serialize import serialize_post


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="moments_decoder")

    subparsers = parser.add_subparsers(dest="command", required=True)

    dec = subparsers.add_parser(
        "decode",
        help="Decode a single timeline payload and print it.",
    )
    dec.add_argument(
        "path",
        nargs="?",
        default="-",
        help="Payload file; '-' or omitted reads stdin.",
    )
    dec.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file.",
    )
    dec.add_argument(
        "--format",
        choices=("json", "text"),
        default=None,
        help="Output form (overrides output.format).",
    )
    dec.add_argument(
        "--include-raw",
        action="store_true",
        help="Echo the raw payload in the JSON output (not valid with --format text).",
    )
    dec.set_defaults(_handler=_cmd_decode)

    batch = subparsers.add_parser(
        "batch",
        help="Decode a JSON Lines file of payload records.",
    )
    batch.add_argument(
        "--input",
        required=True,
        help="JSON Lines file; each line is a payload string or an object holding one.",
    )
    batch.add_argument(
        "--out",
        required=True,
        help="Output directory for posts.jsonl and run.log.",
    )
    batch.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file.",
    )
    batch.set_defaults(_handler=_cmd_batch)

    return parser


def _eprint(message: str) -> None:
    print(message, file=sys.stderr)


def _read_payload(path: str) -> str:
    if path == "-":
        return sys.stdin.read()

    p = Path(path)
    try:
        return p.read_bytes().decode("utf-8", errors="replace")
    except OSError as e:
        raise InputError(f"Failed to read payload file: {p}: {e}") from e


def _cmd_decode(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    post = decode_post(_read_payload(args.path), tz=display_tzinfo(cfg))

    fmt = args.format or cfg.output.format
    if fmt == "text" and args.include_raw:
        _eprint("--include-raw only applies to JSON output")
        return 2

    if fmt == "text":
        sys.stdout.write(render_post(post))
    else:
        include_raw = bool(args.include_raw) or cfg.output.include_raw
        print(serialize_post(post, indent=cfg.output.indent, include_raw=include_raw))

    return 0


def _cmd_batch(args: argparse.Namespace) -> int:
    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)

    log_path = out_dir / "run.log"
    posts_path = out_dir / "posts.jsonl"

    with RunLogger.open(log_path) as log:
        log.info("batch_started", input_path=str(args.input), out_dir=str(out_dir))

        try:
            cfg = load_config(args.config)
            log.info(
                "config_loaded",
                config_path=str(args.config) if args.config else None,
                timezone=cfg.display.timezone,
                payload_fields=list(cfg.batch.payload_fields),
            )

            input_path = Path(args.input)
            if not input_path.exists():
                raise InputError(f"Input file not found: {input_path}")

            counts: Counter[str] = Counter()
            records = decoded = skipped = 0

            try:
                with input_path.open("r", encoding="utf-8", errors="replace") as src, \
                        posts_path.open("w", encoding="utf-8", newline="\n") as dst:
                    for outcome in decode_batch(
                        src,
                        tz=display_tzinfo(cfg),
                        payload_fields=cfg.batch.payload_fields,
                    ):
                        records += 1
                        if outcome.post is None:
                            skipped += 1
                            log.record_skipped(outcome.line, reason=outcome.skip_reason or "unknown")
                            continue

                        decoded += 1
                        counts[outcome.post.content_type] += 1
                        log.record_decoded(
                            outcome.line,
                            content_type=outcome.post.content_type,
                            tid=outcome.post.tid,
                        )
                        dst.write(
                            serialize_post(
                                outcome.post,
                                indent=None,
                                include_raw=cfg.output.include_raw,
                            )
                            + "\n"
                        )
            except OSError as e:
                raise InputError(f"Failed to process batch input {input_path}: {e}") from e

            log.info(
                "batch_completed",
                records=records,
                decoded=decoded,
                skipped=skipped,
                content_types=dict(counts),
            )

            print(f"records={records}")
            print(f"decoded={decoded}")
            print(f"skipped={skipped}")
            for category in CATEGORIES:
                print(f"content_type.{category}={counts.get(category, 0)}")
            print(f"posts_jsonl={posts_path}")
            print(f"run_log={log_path}")

            return 0
        except Exception as e:
            log.exception("batch_failed", exc=e)
            raise


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        handler = getattr(args, "_handler")
        return int(handler(args))
    except ConfigError as e:
        _eprint(str(e))
        return 2
    except (DecodeError, InputError) as e:
        _eprint(str(e))
        return 3
    except KeyboardInterrupt:
        _eprint("Interrupted")
        return 130
    except Exception as e:
        _eprint(f"Unexpected error: {e}")
        return 1
