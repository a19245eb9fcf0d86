"""
Utility functions for fluent sequence views

Logging setup and declarative chain execution.
"""

import sys
import time
import logging
from typing import Any

from fluent import ABSENT, SequenceView, list_of
from combinators import get_mapper, get_reducer
from models import ChainRequest, ChainResult, OperationSpec, OperationType

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Setup structured logging for fluent chains"""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    return logging.getLogger('fluent')


def _apply(view: SequenceView, op: OperationSpec):
    """Run one operation; returns a view for chainable ops, a value for terminal ones"""
    if op.type == OperationType.MAP:
        return view.map(get_mapper(op.name, *op.args))
    if op.type == OperationType.REVERSE:
        return view.reverse()
    if op.type == OperationType.REDUCE:
        reducer = get_reducer(op.name, *op.args)
        if op.has_initial:
            return view.reduce(reducer, op.initial)
        return view.reduce(reducer)
    return view.join(op.separator)


def run_chain(request: ChainRequest) -> ChainResult:
    """Build a view from request.items and run request.operations over it"""
    start_time = time.perf_counter()
    operations_applied = []
    outcome: Any = list_of(*request.items)

    logger.info(f"Running chain of {len(request.operations)} operation(s) "
                f"over {len(request.items)} item(s)")
    try:
        for op in request.operations:
            operations_applied.append(op.type.value)
            outcome = _apply(outcome, op)
    except Exception as e:
        logger.error(f"Chain failed after {operations_applied}: {e}")
        raise

    if isinstance(outcome, SequenceView):
        outcome = outcome.to_list()

    absent = outcome is ABSENT
    processing_time_ms = (time.perf_counter() - start_time) * 1000
    logger.debug(f"Chain completed in {processing_time_ms:.3f} ms")

    return ChainResult(
        result=None if absent else outcome,
        absent=absent,
        operations_applied=operations_applied,
        performance={
            "processing_time_ms": processing_time_ms,
            "input_size": len(request.items),
            "operation": "fluent_chain"
        }
    )
