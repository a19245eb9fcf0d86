import logging
from typing import Optional

from fluent import ABSENT, list_of
from combinators import multiply, max_of, sum_of
from models import DemoConfig
from utils import setup_logging

logger = logging.getLogger(__name__)


def run_demo(config: Optional[DemoConfig] = None):
    config = config or DemoConfig()

    print("\n--- Demo: map, reverse, join ---")
    joined = (
        list_of(*config.numbers)
        .map(multiply(config.factor))
        .reverse()
        .join(config.separator)
    )
    print(joined)

    print("\n--- Demo: map then reduce(max) ---")
    largest = list_of(*config.values).map(multiply(config.factor)).reduce(max_of())
    print("(no values)" if largest is ABSENT else largest)

    print("\n--- Demo: reduce(sum) ---")
    total = list_of(*config.values).reduce(sum_of())
    print("(no values)" if total is ABSENT else total)

    logger.info("Demo finished")
    return joined, largest, total


if __name__ == "__main__":
    setup_logging()
    run_demo()
