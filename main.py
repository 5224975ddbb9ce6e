#!/usr/bin/env python3
"""Encode newline-delimited JSON records from stdin as line protocol on stdout"""
import json
import sys
from typing import IO, Iterator
from config import Config
from lineprotocol.encoder import LineProtocolEncoder
from logging_config import setup_structured_logging, get_logger, log_startup, log_error


def read_records(stream: IO[str]) -> Iterator[dict]:
    """Yield one JSON record per non-blank line"""
    for line_number, line in enumerate(stream, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            yield json.loads(line)
        except json.JSONDecodeError as e:
            raise ValueError(f"Malformed JSON on line {line_number}: {e.msg}") from e


def main(stdin: IO[str] = None, stdout: IO[str] = None) -> int:
    """Main application entry point"""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        config = Config()

        setup_structured_logging(config)
        logger = get_logger(__name__)
        log_startup(logger, config)

        encoder = LineProtocolEncoder(config)
        payload = encoder.encode_records(read_records(stdin))

        if payload:
            stdout.write(payload + "\n")
        stdout.flush()
        return 0

    except Exception as e:
        logger = get_logger(__name__)
        log_error(logger, e, {"component": "main", "phase": "encode"})
        return 1


if __name__ == '__main__':
    sys.exit(main())
