#!/usr/bin/env python3
"""
makepmafile.py -- Create a small sparse file.

Writes test.pma (4 MiB, mode 0600) into the current directory by seeking
to the last offset and writing a single zero byte. Everything before that
byte is a hole on filesystems that support sparse files.
"""

import os
import sys

PMA_FILE = "test.pma"
PMA_SIZE = 4 * 1024 * 1024
PMA_MODE = 0o600

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def fail(prog, what, err):
    reason = os.strerror(err.errno) if err.errno else str(err)
    print(f"{prog}: {what}: {reason}", file=sys.stderr)
    return EXIT_FAILURE


def generate(prog):
    # Same flags as creat(2): an existing file is truncated, its mode kept.
    try:
        fd = os.open(PMA_FILE, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, PMA_MODE)
    except OSError as e:
        return fail(prog, f"could not create {PMA_FILE}", e)

    try:
        try:
            os.lseek(fd, PMA_SIZE - 1, os.SEEK_SET)
        except OSError as e:
            return fail(prog, "lseek failed", e)

        try:
            os.write(fd, b"\0")
        except OSError as e:
            return fail(prog, "write failed", e)
    finally:
        os.close(fd)

    return EXIT_SUCCESS


def main():
    sys.exit(generate(sys.argv[0]))


if __name__ == "__main__":
    main()
