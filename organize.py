#!/usr/bin/env python3
"""
Organize the files of a folder into category subfolders by extension.

Only the direct entries of the folder are looked at. Files are renamed into
``<folder>/<Category>/<name>``; an existing file at the destination is never
overwritten, the source is left where it is and a notice is printed instead.

Example:
  organize ~/Downloads
  organize -c --dry-run
"""

from __future__ import annotations

import argparse
import errno
import os
import sys
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from categories import category_names, classify

MOVED = "moved"
PENDING = "pending"
SKIPPED_COLLISION = "skipped-collision"
SKIPPED_NO_EXTENSION = "skipped-no-extension"
SKIPPED_SELF = "skipped-self"
ERROR = "error"

WHITESPACE = " \t\n\r\f\v"
QUOTES = "\"'"


@dataclass
class Move:
    src: Path
    dst: Optional[Path]
    category: Optional[str]
    outcome: str
    error: str = ""


def trim_path(raw: str) -> str:
    """Drop surrounding whitespace, then surrounding quotes (pasted paths)."""
    return raw.strip(WHITESPACE).strip(QUOTES)


def ensure_folders(root: Path) -> None:
    for name in category_names():
        folder = root / name
        try:
            folder.mkdir(exist_ok=True)
        except OSError as e:
            raise RuntimeError(f"Error creating directory {folder}: {e}") from e


def file_extension(name: str) -> str:
    """Last ``.suffix`` of ``name``; ``"notes."`` gives ``"."``, dotfiles give ``""``."""
    i = name.rfind(".")
    return name[i:] if i > 0 else ""


def move_no_clobber(src: Path, dst: Path) -> None:
    """Rename ``src`` to ``dst``, raising FileExistsError instead of replacing ``dst``."""
    try:
        os.link(src, dst, follow_symlinks=False)
    except FileExistsError:
        raise
    except (OSError, NotImplementedError):
        # no hard links on this filesystem; check-then-rename leaves a small window
        if os.path.lexists(dst):
            raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), str(dst))
        src.rename(dst)
        return
    try:
        src.unlink()
    except OSError:
        dst.unlink()
        raise


def plan_moves(root: Path, self_path: Optional[Path] = None) -> List[Move]:
    moves: List[Move] = []
    for p in sorted(root.iterdir()):
        if not p.is_file():
            continue
        if self_path is not None and p.resolve() == self_path:
            moves.append(Move(p, None, None, SKIPPED_SELF))
            continue
        ext = file_extension(p.name)
        if not ext:
            moves.append(Move(p, None, None, SKIPPED_NO_EXTENSION))
            continue
        category = classify(ext)
        dst = root / category / p.name
        # lexists: a dangling symlink at the destination still counts as taken
        outcome = SKIPPED_COLLISION if os.path.lexists(dst) else PENDING
        moves.append(Move(p, dst, category, outcome))
    return moves


def _skip_notice(move: Move) -> None:
    print(f"Skipping '{move.src.name}': file already exists in '{move.category}' folder.")


def organize(root: Path, self_path: Optional[Path] = None, dry_run: bool = False) -> List[Move]:
    if not dry_run:
        ensure_folders(root)

    moves = plan_moves(root, self_path)
    for move in moves:
        if move.outcome == SKIPPED_COLLISION:
            _skip_notice(move)
            continue
        if move.outcome != PENDING:
            continue

        if dry_run:
            print(f"[DRY] {move.src.name} -> {move.category}/")
            continue

        try:
            move_no_clobber(move.src, move.dst)
        except FileExistsError:
            # appeared since the scan
            move.outcome = SKIPPED_COLLISION
            _skip_notice(move)
        except OSError as e:
            move.outcome = ERROR
            move.error = str(e)
            print(f"Error moving file '{move.src.name}': {e}", file=sys.stderr)
        else:
            move.outcome = MOVED
            print(f"Moved: {move.src.name} -> {move.category}/")
    return moves


def summarize(moves: List[Move]) -> dict:
    return dict(Counter(m.outcome for m in moves))


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes"}


class _Parser(argparse.ArgumentParser):
    # argparse exits with 2 on bad usage; this tool only ever exits 0 or 1
    def error(self, message):
        self.print_usage(sys.stderr)
        raise SystemExit(f"{self.prog}: error: {message}")


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(
        prog="organize",
        usage="organize <folder_path> OR organize -c",
        description="Organizes files in the specified folder into subdirectories based on file type.",
        add_help=False,
        allow_abbrev=False,
    )
    p.add_argument("folder_path", nargs="?", help="Folder to organize (surrounding quotes are ignored)")
    p.add_argument("-h", "-H", "--help", action="store_true", help="Show this help message.")
    p.add_argument("-c", "-C", "--current", action="store_true",
                   help="Organize files in the current working directory.")
    p.add_argument("-n", "--dry-run", action="store_true", help="Only show what would be moved")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    load_dotenv()

    parser = build_parser()
    args, extra = parser.parse_known_args(argv)
    # anything that is not a known flag is a path, even "-inbox" or "--bogus"
    if args.folder_path is None and extra:
        args.folder_path = extra[0]

    if args.help or (not args.current and args.folder_path is None):
        parser.print_help()
        return

    if args.current:
        folder = Path.cwd()
    else:
        raw = trim_path(args.folder_path)
        # Path("") would silently mean the current directory
        if not raw:
            raise SystemExit(f"Error: The specified path does not exist: '{raw}'")
        folder = Path(raw).expanduser()

    if not folder.exists():
        raise SystemExit(f"Error: The specified path does not exist: '{folder}'")
    if not folder.is_dir():
        raise SystemExit(f"Error: The specified path is not a directory: '{folder}'")

    dry_run = args.dry_run or _env_flag("ORGANIZE_DRY_RUN")
    try:
        root = folder.resolve(strict=True)
        self_path = Path(sys.argv[0]).resolve()

        print(f"Organizing files in '{root}'...")
        moves = organize(root, self_path, dry_run=dry_run)
    except Exception as e:
        raise SystemExit(f"An unexpected error occurred: {e}") from e

    counts = summarize(moves)
    if dry_run:
        print("Dry run complete, nothing was moved.")
        print(f"{counts.get(PENDING, 0)} would move, {counts.get(SKIPPED_COLLISION, 0)} already exist")
        return

    print("File organization complete.")
    print(
        f"{counts.get(MOVED, 0)} moved, {counts.get(SKIPPED_COLLISION, 0)} skipped (already exist), "
        f"{counts.get(ERROR, 0)} failed"
    )


if __name__ == "__main__":
    main()
