# filerepo/cli.py

import os
import sys
import argparse

from filerepo import config
from filerepo.errors import RepositoryError
from filerepo.file_repository import FileRepository
from filerepo.logger import setup_logging, get_logger

logger = get_logger(__name__)


def _parse_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer id: {raw!r}")


# ---------- MENU MODE (when no CLI args) ----------

def menu_mode(data_dir: str = config.DATA_DIR):
    os.makedirs(data_dir, exist_ok=True)
    repo = FileRepository(data_dir)

    while True:
        print("\n====== File Repository ======")
        print("1) Create record")
        print("2) Read record")
        print("3) Write record")
        print("4) Delete record")
        print("5) List records")
        print("6) Exit")
        print("=============================")

        choice = input("Choose an option (1-6): ").strip()

        try:
            if choice == "1":
                record_id = int(input("Enter id: "))
                contents = input("Enter contents: ")
                repo.create(record_id, contents)
                print(f"Created: {record_id}")

            elif choice == "2":
                record_id = int(input("Enter id to read: "))
                print(repo.read(record_id))

            elif choice == "3":
                record_id = int(input("Enter id to write: "))
                contents = input("Enter contents: ")
                repo.write(record_id, contents)
                print(f"Written: {record_id}")

            elif choice == "4":
                record_id = int(input("Enter id to delete: "))
                repo.delete(record_id)
                print(f"Deleted: {record_id}")

            elif choice == "5":
                print(", ".join(str(i) for i in repo.ids()) or "(empty)")

            elif choice == "6":
                print("Goodbye!")
                break

            else:
                print("Invalid option! Try again.")
        except (ValueError, RepositoryError, OSError) as e:
            print(f"ERROR: {e}")


# ---------- CLI MODE (when there ARE args) ----------

def cmd_read(args):
    repo = FileRepository(args.data_dir)
    print(repo.read(args.id))


def cmd_write(args):
    repo = FileRepository(args.data_dir)
    repo.write(args.id, args.contents)
    print(f"OK: wrote {args.id}")


def cmd_create(args):
    repo = FileRepository(args.data_dir)
    repo.create(args.id, args.contents)
    print(f"OK: created {args.id}")


def cmd_delete(args):
    repo = FileRepository(args.data_dir)
    repo.delete(args.id)
    print(f"OK: deleted {args.id}")


def cmd_list(args):
    repo = FileRepository(args.data_dir)
    for record_id in repo.ids():
        print(record_id)


def cmd_repl(args):
    repo = FileRepository(args.data_dir)
    print("Interactive file repository. Type 'help' for commands, 'exit' to quit.")
    while True:
        raw = input("> ").strip()
        if not raw:
            continue
        if raw in ("exit", "quit"):
            break
        if raw == "help":
            print("Commands:")
            print("  create <id> [contents]")
            print("  read <id>")
            print("  write <id> <contents>")
            print("  delete <id>")
            print("  list")
            print("  exit")
            continue

        parts = raw.split()
        cmd = parts[0].lower()

        try:
            if cmd == "create" and len(parts) >= 2:
                repo.create(int(parts[1]), " ".join(parts[2:]))
                print("OK")
            elif cmd == "read" and len(parts) == 2:
                print(repo.read(int(parts[1])))
            elif cmd == "write" and len(parts) >= 3:
                repo.write(int(parts[1]), " ".join(parts[2:]))
                print("OK")
            elif cmd == "delete" and len(parts) == 2:
                repo.delete(int(parts[1]))
                print("OK")
            elif cmd == "list":
                print(" ".join(str(i) for i in repo.ids()))
            else:
                print("Invalid command. Type 'help'.")
        except (ValueError, RepositoryError, OSError) as e:
            print(f"ERROR: {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="File-per-record text repository CLI"
    )
    parser.add_argument(
        "--data-dir",
        default=config.DATA_DIR,
        help=f"Directory holding the <id>.txt records (default: {config.DATA_DIR})",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level, e.g. DEBUG or WARNING (default: FILEREPO_LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(dest="command")

    # read
    p_read = subparsers.add_parser("read", help="Print the contents of a record")
    p_read.add_argument("id", type=_parse_id)
    p_read.set_defaults(func=cmd_read)

    # write
    p_write = subparsers.add_parser("write", help="Overwrite an existing record")
    p_write.add_argument("id", type=_parse_id)
    p_write.add_argument("contents")
    p_write.set_defaults(func=cmd_write)

    # create
    p_create = subparsers.add_parser("create", help="Create a new record")
    p_create.add_argument("id", type=_parse_id)
    p_create.add_argument("contents", nargs="?", default="")
    p_create.set_defaults(func=cmd_create)

    # delete
    p_del = subparsers.add_parser("delete", help="Delete a record")
    p_del.add_argument("id", type=_parse_id)
    p_del.set_defaults(func=cmd_delete)

    # list
    p_list = subparsers.add_parser("list", help="List record ids")
    p_list.set_defaults(func=cmd_list)

    # repl (interactive shell)
    p_repl = subparsers.add_parser("repl", help="Interactive shell")
    p_repl.set_defaults(func=cmd_repl)

    return parser


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # if no extra args -> use menu mode
    if not argv:
        setup_logging()
        menu_mode()
        return 0

    # else: parse CLI subcommands
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if getattr(args, "command", None) is None:
        parser.print_help()
        return 0

    try:
        os.makedirs(args.data_dir, exist_ok=True)
        args.func(args)
    except (RepositoryError, OSError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"ERROR: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
