import os
import shutil
import time
import random
import string
import argparse

from filerepo.file_repository import FileRepository
from filerepo.logger import setup_logging


def random_string(length):
    """Generate a random ASCII string of given length."""
    alphabet = string.ascii_letters + string.digits
    return "".join(random.choice(alphabet) for _ in range(length))


# ---------- Individual measurements ----------
def measure(func, num_ops):
    start = time.time()
    func()
    end = time.time()
    elapsed = end - start
    ops_per_sec = num_ops / elapsed if elapsed > 0 else float("inf")
    return elapsed, ops_per_sec


# ---------- Full benchmark on one repository ----------
def run_full_benchmark(data_dir, num_ops, value_size):
    # Start clean
    if os.path.exists(data_dir):
        shutil.rmtree(data_dir)
    os.makedirs(data_dir)

    repo = FileRepository(data_dir)

    # write() only overwrites, so the records are created up front
    for i in range(num_ops):
        repo.create(i)

    # --------- WRITE ---------
    def do_write():
        for i in range(num_ops):
            repo.write(i, random_string(value_size))

    write_time, write_ops = measure(do_write, num_ops)

    # --------- READ ---------
    def do_read():
        for i in range(num_ops):
            repo.read(i)

    read_time, read_ops = measure(do_read, num_ops)

    # --------- DELETE ---------
    def do_delete():
        for i in range(num_ops):
            repo.delete(i)

    del_time, del_ops = measure(do_delete, num_ops)

    return write_time, write_ops, read_time, read_ops, del_time, del_ops


# ---------- MAIN ----------
def main(argv=None):
    parser = argparse.ArgumentParser(description="Benchmark for FileRepository")
    parser.add_argument(
        "--data-dir",
        default="data/benchmark",
        help="Scratch directory for the benchmark records (default: data/benchmark)",
    )
    parser.add_argument(
        "--num-ops",
        type=int,
        default=5_000,
        help="Number of operations per test (default: 5000)",
    )
    parser.add_argument(
        "--value-size",
        type=int,
        default=100,
        help="Size of the random contents (characters) for each write (default: 100)",
    )

    args = parser.parse_args(argv)
    setup_logging("WARNING")

    print(f"\nBenchmarking {args.num_ops} operations")
    print(f"Value size: {args.value_size} characters\n")

    # Run all benchmarks
    write_t, write_s, read_t, read_s, del_t, del_s = run_full_benchmark(
        args.data_dir, args.num_ops, args.value_size
    )

    # Print results
    print("----> FileRepository")
    print(f"WRITE  : {write_t:.3f} sec, {write_s:.0f} operations/sec")
    print(f"READ   : {read_t:.3f} sec, {read_s:.0f} operations/sec")
    print(f"DELETE : {del_t:.3f} sec, {del_s:.0f} operations/sec")
    print("\nBenchmark completed.\n")


if __name__ == "__main__":
    main()
