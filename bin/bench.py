import logging
from argparse import ArgumentParser
from random import Random
from timeit import timeit
import structlog
from structlog import get_logger
from avl import AVLTree

LOGGER = get_logger()


def main():
    """fire it up"""

    parser = ArgumentParser()
    parser.add_argument(
        "-z", "--set-size", type=int, help="number of keys to insert", default=100000
    )
    parser.add_argument("-s", "--seed", type=int, help="random seed", default=None)
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logs")

    args = parser.parse_args()
    level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(level))

    rand = Random(args.seed)
    keys = [rand.getrandbits(64) for _ in range(0, args.set_size)]
    tree = AVLTree[int]()

    def insert():
        for key in keys:
            tree.insert(key)

    def contains():
        for key in keys:
            tree.contains(key)

    def remove():
        for key in keys:
            tree.remove(key)

    LOGGER.info("config", set_size=args.set_size, seed=args.seed)
    LOGGER.info("running")

    elapsed = timeit(insert, number=1)
    LOGGER.info(
        "insert",
        elapsed=elapsed,
        size=len(tree),
        height=tree.height(),
        balanced=tree.is_balanced(),
    )

    elapsed = timeit(contains, number=1)
    LOGGER.info("contains", elapsed=elapsed)

    elapsed = timeit(remove, number=1)
    LOGGER.info("remove", elapsed=elapsed, size=len(tree))
    LOGGER.info("done")


if __name__ == "__main__":
    main()
