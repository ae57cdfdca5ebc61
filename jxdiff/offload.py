# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Run large comparisons on a worker thread.

The result is the same as calling `compare` directly. When the worker
does not finish in time or fails, the comparison is run again on the
calling thread.
"""

from concurrent.futures import ThreadPoolExecutor, TimeoutError

from .comparing import compare
from .utils import content_size
from . import log


# Inputs larger than this (in bytes) are compared on a worker thread
OFFLOAD_THRESHOLD = 10 * 1024

# Seconds to wait for the worker before falling back
OFFLOAD_TIMEOUT = 30.0


def should_offload(left_text, right_text, threshold=OFFLOAD_THRESHOLD):
    return max(content_size(left_text), content_size(right_text)) > threshold


def compare_offloaded(left_text, right_text, fmt="auto", options=None,
                      threshold=OFFLOAD_THRESHOLD, timeout=OFFLOAD_TIMEOUT):
    """Compare two documents, on a worker thread if they are large."""
    if not should_offload(left_text, right_text, threshold):
        return compare(left_text, right_text, fmt, options)

    executor = ThreadPoolExecutor(max_workers=1)
    future = executor.submit(compare, left_text, right_text, fmt, options)
    try:
        return future.result(timeout=timeout)
    except TimeoutError:
        log.warning("Comparison did not finish within %s seconds, "
                    "running it on the calling thread.", timeout)
        future.cancel()
    except ValueError:
        # Unknown format
        raise
    except Exception:
        log.warning("Comparison worker failed, running it on the calling thread.",
                    exc_info=True)
    finally:
        # Do not wait for an abandoned worker
        executor.shutdown(wait=False)
    return compare(left_text, right_text, fmt, options)
